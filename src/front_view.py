"""
Front view projector.

Vertical placement of every part is copied from the side view; horizontal
placement centres each part's own width on a shared centreline.
"""
from dataclasses import dataclass

from dimensions import ScreenDimensions
from geometry_primitives import Rect, Vec2
from layout import ViewOrigins
from side_view import SideView


@dataclass(frozen=True)
class FrontView:
    origin: Vec2
    floor_y: float
    center_x: float
    base: Rect
    stand: Rect
    neck: Rect
    backpack: Rect
    panel: Rect


def _centered(center_x: float, width: float, y: float, height: float) -> Rect:
    return Rect(center_x - width / 2, y, width, height)


def project_front_view(
    dims: ScreenDimensions,
    side: SideView,
    origins: ViewOrigins,
) -> FrontView:
    """Project the side-view layout onto the frontal plane."""
    center_x = origins.front[0] + dims.screen_width / 2

    # The stand ends where the lift-adjusted gap puts it, not at stand_height
    stand_top_y = side.neck_rect.y + side.total_gap
    stand = _centered(
        center_x, dims.stand_width,
        stand_top_y, side.floor_y - stand_top_y - dims.base_height,
    )

    return FrontView(
        origin=origins.front,
        floor_y=side.floor_y,
        center_x=center_x,
        base=_centered(center_x, dims.base_width, side.base.y, side.base.height),
        stand=stand,
        neck=_centered(
            center_x, dims.vesa_neck_width, side.neck_rect.y, side.neck_rect.height,
        ),
        backpack=_centered(
            center_x, dims.backpack_width, side.backpack.y, side.backpack.height,
        ),
        panel=Rect(origins.front[0], side.panel.y, dims.screen_width, side.panel.height),
    )
