"""
Placement of the three views on a shared drawing canvas.

The side view sits on the left, the front and top views share a column to its
right (top view above, front view below). Side and front views share one floor
line so their vertical coordinates can be compared directly.
"""
from dataclasses import dataclass

from dimensions import ScreenDimensions
from geometry_primitives import Vec2


@dataclass(frozen=True)
class LayoutConfig:
    """Canvas layout constants (mm in drawing space)."""

    side_view_width: float = 800.0
    horizontal_view_gap: float = 250.0
    vertical_view_gap: float = 0.0
    top_padding: float = 150.0
    outer_padding: float = 100.0
    stand_anchor_x: float = 600.0  # stand rear-bottom, from side origin
    top_view_ref_offset: float = 100.0
    top_view_clearance: float = 200.0
    view_box_extra_right: float = 300.0
    view_box_extra_bottom: float = 150.0
    pivot_thickness_fraction: float = 1.0 / 3.0


DEFAULT_LAYOUT = LayoutConfig()


@dataclass(frozen=True)
class ViewOrigins:
    """Floor line and origins of the three views."""

    floor_y: float
    side: Vec2
    front: Vec2
    top: Vec2
    top_drawing_height: float

    @classmethod
    def from_dimensions(
        cls, dims: ScreenDimensions, config: LayoutConfig = DEFAULT_LAYOUT,
    ) -> "ViewOrigins":
        panel_assembly_height = max(dims.panel_height, dims.backpack_height)

        top_drawing_height = max(
            dims.base_depth,
            dims.stand_depth + dims.vesa_neck_depth + dims.total_screen_thickness
            + config.top_view_clearance,
        )
        top = (config.side_view_width + config.horizontal_view_gap, config.top_padding)

        static_height = dims.base_height + dims.stand_height + panel_assembly_height
        floor_y = top[1] + top_drawing_height + config.vertical_view_gap + static_height

        return cls(
            floor_y=floor_y,
            side=(0.0, floor_y),
            front=(top[0], floor_y),
            top=top,
            top_drawing_height=top_drawing_height,
        )
