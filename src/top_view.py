"""
Top (plan) view projector.

Depth positions come from the side view through ``map_depth_to_plan``: the
side view's front-to-back X axis becomes the plan's bottom-to-top Y axis.
Every side->plan conversion in the project goes through that one function.
"""
from dataclasses import dataclass
from typing import Callable

from dimensions import ScreenDimensions
from geometry_primitives import Rect, Vec2, span_rect
from layout import DEFAULT_LAYOUT, LayoutConfig, ViewOrigins
from side_view import SideView


@dataclass(frozen=True)
class TopView:
    origin: Vec2
    center_x: float
    ref_y: float
    base: Rect
    stand_bottom: Rect
    stand_top: Rect
    stand_body: Rect
    neck: Rect
    backpack: Rect
    panel: Rect
    pivot: Vec2
    y_a: float              # plan Y of the backward tilt tip point
    y_b: float              # plan Y of the forward tilt tip point


def map_depth_to_plan(side_x: float, ref_y: float, side_front_x: float) -> float:
    """Map a side-view X to a plan-view Y.

    ``side_front_x`` (the stand's front-bottom X) lands on ``ref_y``; points
    further forward in the side view land further down in the plan.
    """
    return ref_y + (side_front_x - side_x)


def plan_mapper(side: SideView, ref_y: float) -> Callable[[float], float]:
    """``map_depth_to_plan`` bound to one side view."""
    def mapper(side_x: float) -> float:
        return map_depth_to_plan(side_x, ref_y, side.stand_front_bottom_x)
    return mapper


def plan_rect(
    to_plan: Callable[[float], float],
    side_x: float,
    side_depth: float,
    center_x: float,
    width: float,
) -> Rect:
    """Footprint of a part spanning ``[side_x, side_x + side_depth]`` in side X."""
    return Rect(center_x - width / 2, to_plan(side_x + side_depth), width, side_depth)


def project_top_view(
    dims: ScreenDimensions,
    side: SideView,
    origins: ViewOrigins,
    config: LayoutConfig = DEFAULT_LAYOUT,
) -> TopView:
    """Project the side-view depth layout onto the plan."""
    center_x = origins.top[0] + dims.screen_width / 2
    ref_y = origins.top[1] + config.top_view_ref_offset
    to_plan = plan_mapper(side, ref_y)

    p1, p2, p3, p4 = side.stand.points
    front_bottom_y = to_plan(p1[0])
    rear_bottom_y = to_plan(p2[0])
    rear_top_y = to_plan(p3[0])
    front_top_y = to_plan(p4[0])

    stand_ys = (front_bottom_y, rear_bottom_y, rear_top_y, front_top_y)
    stand_body = span_rect(center_x, dims.stand_width, min(stand_ys), max(stand_ys))

    neck = side.neck_rect
    return TopView(
        origin=origins.top,
        center_x=center_x,
        ref_y=ref_y,
        base=plan_rect(to_plan, side.base.x, side.base.width, center_x, dims.base_width),
        stand_bottom=span_rect(center_x, dims.stand_width, front_bottom_y, rear_bottom_y),
        stand_top=span_rect(center_x, dims.stand_width, front_top_y, rear_top_y),
        stand_body=stand_body,
        neck=plan_rect(to_plan, neck.x, neck.width, center_x, dims.vesa_neck_width),
        backpack=plan_rect(
            to_plan, side.backpack.x, side.backpack.width, center_x, dims.backpack_width,
        ),
        panel=plan_rect(
            to_plan, side.panel.x, side.panel.width, center_x, dims.screen_width,
        ),
        pivot=(center_x, rear_bottom_y + dims.swivel_pivot_offset),
        y_a=to_plan(side.point_a[0]),
        y_b=to_plan(side.point_b[0]),
    )
