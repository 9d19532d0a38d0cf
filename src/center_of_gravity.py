"""
Volume-weighted centre of gravity.

Each part is modelled as a box: its side-view shape extruded by its width.
Volumes come straight from the dimension model so every view weights a part
identically.
"""
import logging
from typing import Dict, Sequence

import numpy as np

from dimensions import ScreenDimensions
from geometry_primitives import EPSILON, Vec2
from side_view import SideView

logger = logging.getLogger(__name__)

PART_NAMES = ("base", "stand", "neck", "backpack", "panel")


def part_volumes(dims: ScreenDimensions) -> Dict[str, float]:
    """True 3D volume of each part (mm^3)."""
    return {
        "base": dims.base_width * dims.base_depth * dims.base_height,
        "stand": dims.stand_width * dims.stand_depth * dims.stand_height,
        "neck": dims.vesa_neck_width * dims.vesa_neck_depth * dims.vesa_neck_height,
        "backpack": dims.backpack_width * dims.backpack_thickness * dims.backpack_height,
        "panel": dims.screen_width * dims.panel_thickness * dims.panel_height,
    }


def side_part_centers(side: SideView) -> Dict[str, Vec2]:
    """Side-view centre of each part; the stand uses its quad's vertex mean."""
    return {
        "base": side.base.center,
        "stand": side.stand.center,
        "neck": side.neck_rect.center,
        "backpack": side.backpack.center,
        "panel": side.panel.center,
    }


def weighted_centroid(centers: Sequence[Vec2], volumes: Sequence[float]) -> Vec2:
    """Sum(center * volume) / Sum(volume).

    With zero total volume, falls back to the unweighted mean of the centres
    (and to the origin when there are no centres at all).
    """
    if len(centers) == 0:
        return (0.0, 0.0)
    pts = np.asarray(centers, dtype=float).reshape(-1, 2)
    weights = np.asarray(volumes, dtype=float)
    total = float(weights.sum())
    if total <= EPSILON:
        logger.debug("Zero total volume; using unweighted centroid")
        mean = pts.mean(axis=0)
        return (float(mean[0]), float(mean[1]))
    cg = (pts * weights[:, None]).sum(axis=0) / total
    return (float(cg[0]), float(cg[1]))


def side_center_of_gravity(dims: ScreenDimensions, side: SideView) -> Vec2:
    """Combined CG of all five parts in side-view coordinates."""
    volumes = part_volumes(dims)
    centers = side_part_centers(side)
    return weighted_centroid(
        [centers[name] for name in PART_NAMES],
        [volumes[name] for name in PART_NAMES],
    )
