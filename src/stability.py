"""
Tip-over stability check in the plan view.

The tilt tip points (mapped into the plan) bound a "sway circle" that
approximates where the screen's weight travels between its forward and
backward tilt limits. The assembly is stable when that circle stays inside
the base footprint with the screen straight and swivelled to both limits.

This is a conservative circle-in-rectangle test sampled at three swivel
angles, not a convex-hull or friction analysis. Positions between the
samples are not checked.
"""
import logging
import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from geometry_primitives import Rect, Vec2
from top_view import TopView

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SwayCircle:
    cx: float
    cy: float
    radius: float

    @property
    def center(self) -> Vec2:
        return (self.cx, self.cy)

    def moved_to(self, center: Vec2) -> "SwayCircle":
        return SwayCircle(center[0], center[1], self.radius)


@dataclass(frozen=True)
class SwivelCheck:
    """Containment result at one swivel angle."""

    angle_deg: float
    circle: SwayCircle
    contained: bool
    margin: float  # smallest slack to a base edge; negative = overhang


@dataclass(frozen=True)
class StabilityReport:
    pivot: Vec2
    sway: SwayCircle
    footprint: Rect
    checks: Tuple[SwivelCheck, ...]

    @property
    def is_stable(self) -> bool:
        return all(check.contained for check in self.checks)

    @property
    def worst_margin(self) -> float:
        return min(check.margin for check in self.checks)

    def to_dict(self) -> dict:
        return {
            "is_stable": self.is_stable,
            "worst_margin": self.worst_margin,
            "pivot": list(self.pivot),
            "sway_radius": self.sway.radius,
            "checks": [
                {
                    "angle_deg": check.angle_deg,
                    "center": list(check.circle.center),
                    "contained": check.contained,
                    "margin": check.margin,
                }
                for check in self.checks
            ],
        }


def sway_circle(y_a: float, y_b: float, pivot_x: float) -> SwayCircle:
    """Circle spanning the two plan-mapped tip points on the pivot's X."""
    return SwayCircle(pivot_x, (y_a + y_b) / 2, abs(y_a - y_b) / 2)


def rotate_about(point: Vec2, pivot: Vec2, angle_deg: float) -> Vec2:
    """Rotate ``point`` about ``pivot`` by ``angle_deg`` (standard 2D rotation)."""
    theta = math.radians(angle_deg)
    c, s = math.cos(theta), math.sin(theta)
    rotation = np.array([[c, -s], [s, c]])
    offset = np.array(point, dtype=float) - np.array(pivot, dtype=float)
    x, y = rotation @ offset + np.array(pivot, dtype=float)
    return (float(x), float(y))


def circle_in_rect(circle: SwayCircle, rect: Rect) -> bool:
    """True if the circle lies fully inside the rectangle (edges inclusive)."""
    return (
        rect.x <= circle.cx - circle.radius
        and circle.cx + circle.radius <= rect.x + rect.width
        and rect.y <= circle.cy - circle.radius
        and circle.cy + circle.radius <= rect.y + rect.height
    )


def circle_clearance(circle: SwayCircle, rect: Rect) -> float:
    """Smallest distance from the circle to a rectangle edge, signed."""
    return min(
        (circle.cx - circle.radius) - rect.x,
        (rect.x + rect.width) - (circle.cx + circle.radius),
        (circle.cy - circle.radius) - rect.y,
        (rect.y + rect.height) - (circle.cy + circle.radius),
    )


def swivel_samples(swivel_angle: float) -> Tuple[float, float, float]:
    """Angles the containment test runs at: straight, then both limits."""
    limit = abs(swivel_angle)
    return (0.0, limit, -limit)


def evaluate_stability(top: TopView, swivel_angle: float) -> StabilityReport:
    """Run the sway-circle containment test against the base footprint."""
    sway = sway_circle(top.y_a, top.y_b, top.pivot[0])
    checks = []
    for angle in swivel_samples(swivel_angle):
        circle = sway.moved_to(rotate_about(sway.center, top.pivot, angle))
        checks.append(SwivelCheck(
            angle_deg=angle,
            circle=circle,
            contained=circle_in_rect(circle, top.base),
            margin=circle_clearance(circle, top.base),
        ))

    report = StabilityReport(
        pivot=top.pivot, sway=sway, footprint=top.base, checks=tuple(checks),
    )
    logger.debug(
        "Sway radius %.2f, worst margin %.2f, stable=%s",
        sway.radius, report.worst_margin, report.is_stable,
    )
    return report
