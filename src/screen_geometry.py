"""
Geometry and stability engine for the monitor-stand assembly.

``compute_geometry`` is a pure function of the dimension model: it solves the
side view, projects the front and top views from it, then computes the centre
of gravity and the stability verdict. Callers that recompute on every edit
should go through ``GeometryCache``, which memoises snapshots by value.

Example:
    >>> from dimensions import DEFAULT_DIMENSIONS
    >>> snapshot = compute_geometry(DEFAULT_DIMENSIONS)
    >>> snapshot.is_stable
    True
"""
import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from center_of_gravity import side_center_of_gravity
from dimensions import ScreenDimensions
from front_view import FrontView, project_front_view
from geometry_primitives import Vec2
from layout import DEFAULT_LAYOUT, LayoutConfig, ViewOrigins
from side_view import SideView, solve_side_view
from stability import StabilityReport, evaluate_stability
from top_view import TopView, map_depth_to_plan, project_top_view

logger = logging.getLogger(__name__)

ViewBox = Tuple[float, float, float, float]


@dataclass(frozen=True)
class GeometrySnapshot:
    """Everything the drawing layer needs for one dimension model."""

    dimensions: ScreenDimensions
    side: SideView
    front: FrontView
    top: TopView
    center_of_gravity: Vec2          # side view
    front_center_of_gravity: Vec2
    top_center_of_gravity: Vec2
    stability: StabilityReport
    view_box: ViewBox

    @property
    def is_stable(self) -> bool:
        return self.stability.is_stable

    @property
    def view_box_str(self) -> str:
        """``"minX minY width height"`` for an SVG viewBox attribute."""
        return " ".join(_format_number(v) for v in self.view_box)

    def to_dict(self) -> Dict[str, Any]:
        side, front, top = self.side, self.front, self.top
        return {
            "dimensions": self.dimensions.to_dict(),
            "is_stable": self.is_stable,
            "view_box": self.view_box_str,
            "side": {
                "floor_y": side.floor_y,
                "base": side.base.to_dict(),
                "stand": side.stand.to_dict(),
                "neck": side.neck.to_dict(),
                "backpack": side.backpack.to_dict(),
                "panel": side.panel.to_dict(),
                "pivot": list(side.pivot),
                "point_a": list(side.point_a),
                "point_b": list(side.point_b),
                "applied_lift": side.applied_lift,
                "max_lifting_offset": side.max_lifting_offset,
                "center_of_gravity": list(self.center_of_gravity),
            },
            "front": {
                "base": front.base.to_dict(),
                "stand": front.stand.to_dict(),
                "neck": front.neck.to_dict(),
                "backpack": front.backpack.to_dict(),
                "panel": front.panel.to_dict(),
                "center_of_gravity": list(self.front_center_of_gravity),
            },
            "top": {
                "base": top.base.to_dict(),
                "stand_bottom": top.stand_bottom.to_dict(),
                "stand_top": top.stand_top.to_dict(),
                "neck": top.neck.to_dict(),
                "backpack": top.backpack.to_dict(),
                "panel": top.panel.to_dict(),
                "pivot": list(top.pivot),
                "y_a": top.y_a,
                "y_b": top.y_b,
                "center_of_gravity": list(self.top_center_of_gravity),
            },
            "stability": self.stability.to_dict(),
        }


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def compute_view_box(
    side: SideView,
    front: FrontView,
    top: TopView,
    config: LayoutConfig = DEFAULT_LAYOUT,
) -> ViewBox:
    """Canvas bounds fitting all three views, framed by their bases."""
    bases = (side.base, front.base, top.base)
    padding = config.outer_padding
    min_x = min(b.x for b in bases) - padding
    max_x = max(b.right for b in bases) + padding + config.view_box_extra_right
    top_y = config.top_padding - padding
    bottom_y = side.floor_y + padding + config.view_box_extra_bottom
    return (min_x, top_y, max_x - min_x, bottom_y - top_y)


def compute_geometry(
    dimensions: ScreenDimensions,
    config: Optional[LayoutConfig] = None,
) -> GeometrySnapshot:
    """Compute all three views, the centre of gravity and the stability verdict.

    Args:
        dimensions: Dimension model. Never mutated; negative sizes are treated
            as zero.
        config: Canvas layout constants.

    Returns:
        A fresh ``GeometrySnapshot``.
    """
    if config is None:
        config = DEFAULT_LAYOUT
    dims = dimensions.with_non_negative_sizes()

    origins = ViewOrigins.from_dimensions(dims, config)
    side = solve_side_view(dims, origins, config)
    front = project_front_view(dims, side, origins)
    top = project_top_view(dims, side, origins, config)

    cg = side_center_of_gravity(dims, side)
    stability = evaluate_stability(top, dims.swivel_angle)

    return GeometrySnapshot(
        dimensions=dimensions,
        side=side,
        front=front,
        top=top,
        center_of_gravity=cg,
        front_center_of_gravity=(front.center_x, cg[1]),
        top_center_of_gravity=(
            top.center_x,
            map_depth_to_plan(cg[0], top.ref_y, side.stand_front_bottom_x),
        ),
        stability=stability,
        view_box=compute_view_box(side, front, top, config),
    )


class GeometryCache:
    """LRU memo of snapshots keyed by dimension-model value.

    Safe to share between threads. Recomputation is always idempotent, so the
    cache only saves work.
    """

    def __init__(self, maxsize: int = 128, config: Optional[LayoutConfig] = None):
        if maxsize < 1:
            raise ValueError(f"maxsize must be >= 1, got {maxsize}")
        self.maxsize = maxsize
        self.config = config if config is not None else DEFAULT_LAYOUT
        self.hits = 0
        self.misses = 0
        self._entries: "OrderedDict[ScreenDimensions, GeometrySnapshot]" = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, dimensions: ScreenDimensions) -> GeometrySnapshot:
        with self._lock:
            snapshot = self._entries.get(dimensions)
            if snapshot is not None:
                self._entries.move_to_end(dimensions)
                self.hits += 1
                return snapshot
            self.misses += 1

        snapshot = compute_geometry(dimensions, self.config)

        with self._lock:
            self._entries[dimensions] = snapshot
            self._entries.move_to_end(dimensions)
            while len(self._entries) > self.maxsize:
                self._entries.popitem(last=False)
        return snapshot

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0
