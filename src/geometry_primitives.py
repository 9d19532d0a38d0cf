"""
Core 2D shape types for the three stand views.

Every part in a view is either an axis-aligned ``Rect`` or a four-point
``Quad`` (the side-view stand and neck, which may lean or shear). Both share
a bounding-box accessor so the projectors and the drawing code can treat them
uniformly. Built on Shapely for polygon conversion.
"""
import math
from dataclasses import dataclass
from typing import ClassVar, Tuple

from shapely.geometry import Polygon, box

Vec2 = Tuple[float, float]
Bounds = Tuple[float, float, float, float]

EPSILON = 1e-9


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in screen coordinates (Y grows downwards)."""

    kind: ClassVar[str] = "rect"

    x: float
    y: float
    width: float
    height: float

    @property
    def points(self) -> Tuple[Vec2, Vec2, Vec2, Vec2]:
        """Corners: top-left, top-right, bottom-right, bottom-left."""
        right = self.x + self.width
        bottom = self.y + self.height
        return (
            (self.x, self.y),
            (right, self.y),
            (right, bottom),
            (self.x, bottom),
        )

    @property
    def center(self) -> Vec2:
        return (self.x + self.width / 2, self.y + self.height / 2)

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def bounds(self) -> Bounds:
        return (
            min(self.x, self.right),
            min(self.y, self.bottom),
            max(self.x, self.right),
            max(self.y, self.bottom),
        )

    def bounding_rect(self) -> "Rect":
        return self

    def area(self) -> float:
        return abs(self.width * self.height)

    def to_polygon(self) -> Polygon:
        min_x, min_y, max_x, max_y = self.bounds()
        return box(min_x, min_y, max_x, max_y)

    def to_dict(self) -> dict:
        return {
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
        }


@dataclass(frozen=True)
class Quad:
    """Quadrilateral given by four ordered points.

    Used where a part cannot stay axis-aligned: a stand column leaning away
    from 90 degrees, and the neck sheared to follow it.
    """

    kind: ClassVar[str] = "quad"

    points: Tuple[Vec2, Vec2, Vec2, Vec2]

    def __post_init__(self):
        if len(self.points) != 4:
            raise ValueError(f"Quad needs 4 points, got {len(self.points)}")
        object.__setattr__(
            self,
            "points",
            tuple((float(px), float(py)) for px, py in self.points),
        )

    @property
    def center(self) -> Vec2:
        """Vertex mean (the centroid for a parallelogram)."""
        xs = [p[0] for p in self.points]
        ys = [p[1] for p in self.points]
        return (sum(xs) / 4, sum(ys) / 4)

    def bounds(self) -> Bounds:
        xs = [p[0] for p in self.points]
        ys = [p[1] for p in self.points]
        return (min(xs), min(ys), max(xs), max(ys))

    def bounding_rect(self) -> Rect:
        min_x, min_y, max_x, max_y = self.bounds()
        return Rect(min_x, min_y, max_x - min_x, max_y - min_y)

    def area(self) -> float:
        """Shoelace area; zero for collapsed quads."""
        total = 0.0
        for (x1, y1), (x2, y2) in zip(self.points, self.points[1:] + self.points[:1]):
            total += x1 * y2 - x2 * y1
        return abs(total) / 2

    def to_polygon(self) -> Polygon:
        return Polygon(self.points)

    def to_dict(self) -> dict:
        return {"points": [list(p) for p in self.points]}


# ─── Numeric guards ──────────────────────────────────────────────────────────

def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp ``value`` into ``[lower, upper]``.

    When ``upper < lower`` the lower bound wins.
    """
    return max(lower, min(upper, value))


def safe_divide(numerator: float, denominator: float, fallback: float = 0.0) -> float:
    """Divide, returning ``fallback`` for a (near-)zero or non-finite result."""
    if abs(denominator) < EPSILON:
        return fallback
    result = numerator / denominator
    if not math.isfinite(result):
        return fallback
    return result


def span_rect(center_x: float, width: float, y0: float, y1: float) -> Rect:
    """Rect of ``width`` centred on ``center_x``, covering ``y0``..``y1`` in either order."""
    return Rect(center_x - width / 2, min(y0, y1), width, abs(y1 - y0))
