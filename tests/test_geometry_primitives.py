"""Tests for geometry_primitives module."""
import math

import pytest

from geometry_primitives import (
    Quad,
    Rect,
    clamp,
    safe_divide,
    span_rect,
)


class TestRect:
    """Test axis-aligned rectangles."""

    def test_points_order(self):
        rect = Rect(10, 20, 100, 50)
        assert rect.points == ((10, 20), (110, 20), (110, 70), (10, 70))

    def test_center_and_edges(self):
        rect = Rect(10, 20, 100, 50)
        assert rect.center == (60, 45)
        assert rect.right == 110
        assert rect.bottom == 70

    def test_bounding_rect_is_self(self):
        rect = Rect(0, 0, 5, 5)
        assert rect.bounding_rect() is rect

    def test_zero_size_collapses(self):
        rect = Rect(3, 4, 0, 0)
        assert rect.area() == 0.0
        assert rect.bounds() == (3, 4, 3, 4)

    def test_to_polygon_area(self):
        poly = Rect(0, 0, 200, 100).to_polygon()
        assert poly.area == pytest.approx(20000.0)


class TestQuad:
    """Test four-point shapes."""

    def test_requires_four_points(self):
        with pytest.raises(ValueError):
            Quad(((0, 0), (1, 0), (1, 1)))

    def test_parallelogram_bounds(self):
        quad = Quad(((0, 100), (50, 100), (80, 0), (30, 0)))
        assert quad.bounds() == (0, 0, 80, 100)
        rect = quad.bounding_rect()
        assert rect == Rect(0, 0, 80, 100)

    def test_parallelogram_center_and_area(self):
        quad = Quad(((0, 100), (50, 100), (80, 0), (30, 0)))
        assert quad.center == pytest.approx((40, 50))
        assert quad.area() == pytest.approx(5000.0)
        assert quad.to_polygon().area == pytest.approx(5000.0)

    def test_axis_aligned_quad_matches_rect(self):
        rect = Rect(5, 5, 20, 10)
        quad = Quad(rect.points)
        assert quad.bounding_rect() == rect
        assert quad.center == pytest.approx(rect.center)

    def test_collapsed_quad(self):
        quad = Quad(((1, 1), (1, 1), (1, 1), (1, 1)))
        assert quad.area() == 0.0
        assert quad.bounding_rect() == Rect(1, 1, 0, 0)

    def test_kind_tags(self):
        assert Rect(0, 0, 1, 1).kind == "rect"
        assert Quad(((0, 0), (1, 0), (1, 1), (0, 1))).kind == "quad"


class TestNumericGuards:
    """Test clamp and safe_divide."""

    def test_clamp_inside_range(self):
        assert clamp(5, 0, 10) == 5

    def test_clamp_to_bounds(self):
        assert clamp(-3, 0, 10) == 0
        assert clamp(30, 0, 10) == 10

    def test_clamp_lower_bound_wins_when_range_inverted(self):
        assert clamp(5, 0, -15) == 0

    def test_safe_divide(self):
        assert safe_divide(10, 4) == 2.5

    def test_safe_divide_by_zero_uses_fallback(self):
        assert safe_divide(10, 0) == 0.0
        assert safe_divide(10, 0, fallback=7.0) == 7.0
        assert safe_divide(0, 0) == 0.0

    def test_safe_divide_never_returns_infinite(self):
        result = safe_divide(1e308, 1e-300)
        assert math.isfinite(result)

    def test_span_rect_orders_endpoints(self):
        assert span_rect(10, 4, 8, 2) == Rect(8, 2, 4, 6)
        assert span_rect(10, 4, 2, 8) == span_rect(10, 4, 8, 2)
