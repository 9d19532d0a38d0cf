"""
Shared test fixtures for the stand geometry tests.
"""
import sys
from pathlib import Path

import pytest

# Add src/ to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from dimensions import DEFAULT_DIMENSIONS, ScreenDimensions
from layout import DEFAULT_LAYOUT, ViewOrigins
from screen_geometry import compute_geometry
from side_view import solve_side_view


@pytest.fixture
def default_dims():
    return DEFAULT_DIMENSIONS


@pytest.fixture
def default_snapshot():
    return compute_geometry(DEFAULT_DIMENSIONS)


@pytest.fixture
def default_side():
    origins = ViewOrigins.from_dimensions(DEFAULT_DIMENSIONS, DEFAULT_LAYOUT)
    return solve_side_view(DEFAULT_DIMENSIONS, origins, DEFAULT_LAYOUT)


@pytest.fixture
def leaning_dims():
    """Stand column leaning 20 degrees back from vertical, screen lowered."""
    return DEFAULT_DIMENSIONS.replace(stand_base_angle=70.0, lifting_offset=20.0)


@pytest.fixture
def zero_dims():
    """Every size zero; angles and offsets left at their defaults."""
    sizes = {
        name: 0.0
        for name in (
            "screen_width", "panel_height", "backpack_height", "backpack_width",
            "panel_thickness", "backpack_thickness", "vesa_neck_height",
            "vesa_neck_depth", "vesa_neck_width", "stand_height", "stand_width",
            "stand_depth", "base_width", "base_depth", "base_height",
        )
    }
    return ScreenDimensions(**sizes)


@pytest.fixture
def assorted_dims(leaning_dims, zero_dims):
    """A spread of models for property-style checks."""
    return [
        DEFAULT_DIMENSIONS,
        leaning_dims,
        zero_dims,
        DEFAULT_DIMENSIONS.replace(stand_base_angle=110.0, stand_height=420.0),
        DEFAULT_DIMENSIONS.replace(lifting_offset=1000.0),
        DEFAULT_DIMENSIONS.replace(
            tilt_forward_angle=5.0, tilt_backward_angle=25.0, swivel_angle=-30.0,
        ),
        DEFAULT_DIMENSIONS.replace(backpack_height=500.0, panel_thickness=12.0),
    ]
