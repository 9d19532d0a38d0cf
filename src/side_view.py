"""
Side (sagittal) view layout solver.

Lays the assembly out in the depth x height plane. The front of the assembly
faces left (smaller X), the floor is at ``origins.floor_y`` and Y grows
downwards. This view owns the canonical vertical extents and the tilt
geometry; the front and top projectors derive their placements from it.
"""
import logging
import math
from dataclasses import dataclass
from typing import Tuple

from dimensions import ScreenDimensions
from geometry_primitives import EPSILON, Quad, Rect, Vec2, clamp, safe_divide
from layout import DEFAULT_LAYOUT, LayoutConfig, ViewOrigins

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SideView:
    """Absolute side-view geometry of every part."""

    origin: Vec2
    floor_y: float
    base: Rect
    stand: Quad             # front-bottom, rear-bottom, rear-top, front-top
    neck: Quad              # top-left, top-right, bottom-right, bottom-left
    neck_rect: Rect         # nominal (unsheared) neck box
    backpack: Rect
    panel: Rect
    screen: Rect            # union of panel and backpack
    pivot: Vec2
    point_a: Vec2           # backward tilt tip point
    point_b: Vec2           # forward tilt tip point
    thickness_lines: Tuple[float, float]
    stand_front_bottom_x: float
    stand_rear_bottom_x: float
    total_gap: float
    max_lifting_offset: float
    applied_lift: float

    @property
    def stand_rect(self) -> Rect:
        return self.stand.bounding_rect()

    @property
    def stand_center_x(self) -> float:
        return (self.stand_front_bottom_x + self.stand_rear_bottom_x) / 2

    @property
    def stand_top_y(self) -> float:
        return self.stand.points[3][1]


def tip_point(pivot: Vec2, angle_deg: float, floor_y: float) -> Vec2:
    """Floor intersection of a ray from ``pivot`` at ``angle_deg`` from vertical.

    Positive angles lean towards +X. A pivot at or below the floor, or a ray
    that never reaches it, yields the pivot's own X on the floor.
    """
    px, py = pivot
    if py >= floor_y:
        return (px, floor_y)
    angle = math.radians(angle_deg)
    if abs(math.cos(angle)) < EPSILON:
        logger.debug("Tilt ray at %.2f deg is horizontal; using pivot X", angle_deg)
        return (px, floor_y)
    x = px + (floor_y - py) * math.tan(angle)
    if not math.isfinite(x):
        return (px, floor_y)
    return (x, floor_y)


def max_lifting_offset(
    base_top_y: float,
    stand_top_y: float,
    stand_to_neck_gap: float,
    neck_height: float,
    panel_height: float,
) -> float:
    """Largest lift before the panel's bottom edge drops below the base top."""
    return base_top_y - stand_top_y + stand_to_neck_gap - neck_height / 2 - panel_height / 2


def solve_side_view(
    dims: ScreenDimensions,
    origins: ViewOrigins,
    config: LayoutConfig = DEFAULT_LAYOUT,
) -> SideView:
    """Compute absolute side-view positions for all parts.

    Args:
        dims: Dimension model (sizes assumed non-negative).
        origins: Canvas placement from ``ViewOrigins.from_dimensions``.
        config: Layout constants.
    """
    floor_y = origins.floor_y
    screen_thickness = dims.total_screen_thickness

    # Stand footprint, anchored at its rear-bottom corner
    stand_rear_bottom_x = origins.side[0] + config.stand_anchor_x
    stand_front_bottom_x = stand_rear_bottom_x - dims.stand_depth

    base = Rect(
        x=stand_front_bottom_x - dims.stand_front_offset,
        y=floor_y - dims.base_height,
        width=dims.base_depth,
        height=dims.base_height,
    )

    angle = math.radians(dims.stand_base_angle)
    top_dx = dims.stand_height * math.cos(angle)
    top_dy = -dims.stand_height * math.sin(angle)

    p1 = (stand_front_bottom_x, base.y)
    p2 = (stand_rear_bottom_x, base.y)
    p3 = (p2[0] + top_dx, base.y + top_dy)
    p4 = (p1[0] + top_dx, base.y + top_dy)
    stand = Quad((p1, p2, p3, p4))

    # Lift is re-clamped every call; the bound moves with the other sizes
    max_lift = max_lifting_offset(
        base.y, p4[1], dims.stand_to_neck_gap,
        dims.vesa_neck_height, dims.panel_height,
    )
    lift = clamp(dims.lifting_offset, 0.0, max_lift)
    if lift != dims.lifting_offset:
        logger.debug(
            "Lifting offset %.2f clamped to %.2f (max %.2f)",
            dims.lifting_offset, lift, max_lift,
        )
    total_gap = dims.stand_to_neck_gap - lift

    # Neck: screen-side edge follows the stand's front edge
    neck_top_y = p4[1] - total_gap
    neck_bottom_y = neck_top_y + dims.vesa_neck_height
    dx_dy = safe_divide(p4[0] - p1[0], p4[1] - p1[1])

    tr = (p4[0] + (neck_top_y - p4[1]) * dx_dy, neck_top_y)
    br = (p4[0] + (neck_bottom_y - p4[1]) * dx_dy, neck_bottom_y)
    tl = (tr[0] - dims.vesa_neck_depth, neck_top_y)
    bl = (tl[0], neck_bottom_y)
    neck = Quad((tl, tr, br, bl))
    neck_rect = Rect(tl[0], neck_top_y, dims.vesa_neck_depth, dims.vesa_neck_height)

    # Backpack and panel stack forward of the neck, centred on its midline
    neck_center_y = neck_top_y + dims.vesa_neck_height / 2
    backpack = Rect(
        x=tl[0] - dims.backpack_thickness,
        y=neck_center_y - dims.backpack_height / 2,
        width=dims.backpack_thickness,
        height=dims.backpack_height,
    )
    panel = Rect(
        x=backpack.x - dims.panel_thickness,
        y=neck_center_y - dims.panel_height / 2,
        width=dims.panel_thickness,
        height=dims.panel_height,
    )
    screen_top = min(panel.y, backpack.y)
    screen = Rect(
        x=panel.x,
        y=screen_top,
        width=screen_thickness,
        height=max(panel.bottom, backpack.bottom) - screen_top,
    )

    fraction = config.pivot_thickness_fraction
    pivot = (panel.x + screen_thickness * fraction, panel.y + panel.height / 2)
    point_a = tip_point(pivot, -dims.tilt_backward_angle, floor_y)
    point_b = tip_point(pivot, dims.tilt_forward_angle, floor_y)

    return SideView(
        origin=origins.side,
        floor_y=floor_y,
        base=base,
        stand=stand,
        neck=neck,
        neck_rect=neck_rect,
        backpack=backpack,
        panel=panel,
        screen=screen,
        pivot=pivot,
        point_a=point_a,
        point_b=point_b,
        thickness_lines=(
            panel.x + screen_thickness / 3,
            panel.x + 2 * screen_thickness / 3,
        ),
        stand_front_bottom_x=stand_front_bottom_x,
        stand_rear_bottom_x=stand_rear_bottom_x,
        total_gap=total_gap,
        max_lifting_offset=max_lift,
        applied_lift=lift,
    )
