"""
Dimension model for the monitor-stand assembly.

A flat, immutable record of the physical measurements (mm) and angles (deg)
that drive every view. Instances are hashable and compare by value, so they
can key the geometry cache and be kept by reference in an undo history.

The interchange format (dict / JSON) uses the camelCase keys of the editing
layer, e.g. ``screenWidth`` for ``screen_width``.
"""

import json
import logging
import math
from dataclasses import dataclass, field, fields
from dataclasses import replace as dataclass_replace
from pathlib import Path
from typing import Any, Dict, List, Mapping, Tuple, Union

logger = logging.getLogger(__name__)

LabelOffsets = Tuple[Tuple[str, float], ...]


class DimensionsError(ValueError):
    """Raised when a dimension payload cannot be parsed."""
    pass


DEFAULT_LABEL_OFFSETS: Dict[str, float] = {
    "front_screenWidth": -180,
    "front_backpackWidth": -220,
    "front_panelHeight": 120,
    "front_baseWidth": 50,
    "front_standWidth": -300,
    "front_neckWidth": -300,
    "front_backpackHeight": 185,
    "side_panelThickness": -180,
    "side_backpackThickness": -180,
    "side_neckDepth": -180,
    "side_standDepth": 30,
    "side_baseDepth": 50,
    "side_frontOffset": 30,
    "side_backpackHeight": -60,
    "side_neckHeight": 60,
    "side_standHeight": 110,
    "side_gap": 60,
    "side_baseHeight": 100,
    "top_baseWidth": -60,
    "top_baseDepth": -150,
    "top_pivotOffset": -150,
}


def _normalize_label_offsets(offsets) -> LabelOffsets:
    if isinstance(offsets, Mapping):
        items = offsets.items()
    else:
        items = offsets
    return tuple(sorted((str(k), float(v)) for k, v in items))


@dataclass(frozen=True)
class ScreenDimensions:
    """Physical parameters of the stand assembly.

    Attributes:
        screen_width: Panel width (front view).
        panel_height / panel_thickness: Display glass height and depth.
        backpack_*: Electronics housing behind the panel.
        vesa_neck_*: Connector between backpack and stand.
        stand_*: Column between base and neck.
        stand_to_neck_gap: Resting vertical gap from stand top to neck top.
        lifting_offset: Downward travel of the screen from the resting gap
            (0 = fully raised). Clamped by the engine on every call.
        stand_front_offset: Distance from the stand's front face to the
            base's front edge.
        base_*: Footprint resting on the desk.
        tilt_forward_angle / tilt_backward_angle: Tilt limits from vertical.
        swivel_angle: Plan-view swivel limit, tested at 0 and +/- this angle.
        swivel_pivot_offset: Swivel centre, measured forward from the stand's
            rear edge.
        stand_base_angle: Angle between base and column (90 = vertical).
        label_offsets: Presentation-only offsets, carried through unchanged.
    """

    screen_width: float = 718.0
    panel_height: float = 412.63
    backpack_height: float = 288.0
    backpack_width: float = 437.0
    panel_thickness: float = 7.0
    backpack_thickness: float = 61.0
    vesa_neck_height: float = 29.4
    vesa_neck_depth: float = 15.0
    vesa_neck_width: float = 40.0
    stand_height: float = 300.0
    stand_to_neck_gap: float = -15.0
    lifting_offset: float = 0.0
    stand_width: float = 50.0
    stand_depth: float = 50.0
    stand_front_offset: float = 150.0
    base_width: float = 220.0
    base_depth: float = 243.5
    base_height: float = 5.0
    tilt_forward_angle: float = 15.0
    tilt_backward_angle: float = 15.0
    swivel_angle: float = 45.0
    swivel_pivot_offset: float = 65.0  # VESA mount plane
    stand_base_angle: float = 90.0
    label_offsets: LabelOffsets = field(
        default_factory=lambda: _normalize_label_offsets(DEFAULT_LABEL_OFFSETS)
    )

    def __post_init__(self):
        object.__setattr__(
            self, "label_offsets", _normalize_label_offsets(self.label_offsets)
        )

    @property
    def total_screen_thickness(self) -> float:
        return self.panel_thickness + self.backpack_thickness

    def label_offset_map(self) -> Dict[str, float]:
        """Label offsets as a fresh dict."""
        return dict(self.label_offsets)

    def replace(self, **changes) -> "ScreenDimensions":
        """Return a copy with ``changes`` applied."""
        return dataclass_replace(self, **changes)

    def with_non_negative_sizes(self) -> "ScreenDimensions":
        """Copy with negative lengths replaced by zero.

        Returns ``self`` when nothing needs clamping.
        """
        changes = {
            name: 0.0 for name in SIZE_FIELDS if getattr(self, name) < 0
        }
        if not changes:
            return self
        logger.warning("Negative sizes treated as zero: %s", ", ".join(sorted(changes)))
        return dataclass_replace(self, **changes)

    def validate(self) -> List[str]:
        """Check for values the editing layer should not accept.

        Returns list of issue strings (empty = ok). The geometry engine does
        not call this; it produces defined output for any finite input.
        """
        issues = []
        for name in SIZE_FIELDS:
            value = getattr(self, name)
            if not math.isfinite(value):
                issues.append(f"{name} is not finite: {value}")
            elif value < 0:
                issues.append(f"{name} must be >= 0, got {value:.2f}")
        for name in ANGLE_FIELDS:
            value = getattr(self, name)
            if not math.isfinite(value):
                issues.append(f"{name} is not finite: {value}")
            elif abs(value) > 180:
                issues.append(f"{name} outside +/-180 deg: {value:.2f}")
        for name in ("tilt_forward_angle", "tilt_backward_angle"):
            value = getattr(self, name)
            if math.isfinite(value) and abs(value) >= 90:
                issues.append(f"{name} {value:.2f} deg never reaches the floor")
        return issues

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {}
        for f in fields(self):
            if f.name == "label_offsets":
                continue
            payload[FIELD_TO_KEY[f.name]] = getattr(self, f.name)
        payload["labelOffsets"] = self.label_offset_map()
        return payload

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "ScreenDimensions":
        """Build from an editing-layer payload.

        Missing keys keep their defaults. Both camelCase and snake_case keys
        are accepted.
        """
        changes: Dict[str, Any] = {}
        for key, value in payload.items():
            name = resolve_field_name(key)
            if name == "label_offsets":
                if not isinstance(value, Mapping):
                    raise DimensionsError("labelOffsets must be an object")
                try:
                    changes[name] = _normalize_label_offsets(value)
                except (TypeError, ValueError) as exc:
                    raise DimensionsError(f"Invalid labelOffsets: {exc}") from exc
                continue
            changes[name] = coerce_number(key, value)
        return cls(**changes)


FIELD_TO_KEY: Dict[str, str] = {
    "screen_width": "screenWidth",
    "panel_height": "panelHeight",
    "backpack_height": "backpackHeight",
    "backpack_width": "backpackWidth",
    "panel_thickness": "panelThickness",
    "backpack_thickness": "backpackThickness",
    "vesa_neck_height": "vesaNeckHeight",
    "vesa_neck_depth": "vesaNeckDepth",
    "vesa_neck_width": "vesaNeckWidth",
    "stand_height": "standHeight",
    "stand_to_neck_gap": "standToNeckGap",
    "lifting_offset": "liftingOffset",
    "stand_width": "standWidth",
    "stand_depth": "standDepth",
    "stand_front_offset": "standFrontOffset",
    "base_width": "baseWidth",
    "base_depth": "baseDepth",
    "base_height": "baseHeight",
    "tilt_forward_angle": "tiltForwardAngle",
    "tilt_backward_angle": "tiltBackwardAngle",
    "swivel_angle": "swivelAngle",
    "swivel_pivot_offset": "swivelPivotOffset",
    "stand_base_angle": "standBaseAngle",
    "label_offsets": "labelOffsets",
}
KEY_TO_FIELD: Dict[str, str] = {v: k for k, v in FIELD_TO_KEY.items()}

# Lengths that must not be negative. Gap, lift and offsets are signed.
SIZE_FIELDS = (
    "screen_width",
    "panel_height",
    "backpack_height",
    "backpack_width",
    "panel_thickness",
    "backpack_thickness",
    "vesa_neck_height",
    "vesa_neck_depth",
    "vesa_neck_width",
    "stand_height",
    "stand_width",
    "stand_depth",
    "base_width",
    "base_depth",
    "base_height",
)
ANGLE_FIELDS = (
    "tilt_forward_angle",
    "tilt_backward_angle",
    "swivel_angle",
    "stand_base_angle",
)

DEFAULT_DIMENSIONS = ScreenDimensions()


def resolve_field_name(key: str) -> str:
    """Map a camelCase or snake_case key to a ``ScreenDimensions`` field."""
    if key in KEY_TO_FIELD:
        return KEY_TO_FIELD[key]
    if key in FIELD_TO_KEY:
        return key
    raise DimensionsError(f"Unknown dimension: {key}")


def coerce_number(key: str, value: Any) -> float:
    """Convert ``value`` to a finite float or raise ``DimensionsError``."""
    if isinstance(value, bool):
        raise DimensionsError(f"{key} must be a number, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise DimensionsError(f"{key} must be a number, got {value!r}") from exc
    if not math.isfinite(number):
        raise DimensionsError(f"{key} must be finite, got {value!r}")
    return number


def load_dimensions(path: Union[str, Path]) -> ScreenDimensions:
    """Read a dimension model from a JSON file."""
    path = Path(path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise DimensionsError(f"{path}: invalid JSON ({exc})") from exc
    if not isinstance(payload, dict):
        raise DimensionsError(f"{path}: expected a JSON object")
    dims = ScreenDimensions.from_dict(payload)
    logger.debug("Loaded dimensions from %s", path)
    return dims


def save_dimensions(dims: ScreenDimensions, path: Union[str, Path]) -> Path:
    """Write a dimension model as JSON."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(dims.to_dict(), indent=2), encoding="utf-8")
    logger.info("Saved dimensions: %s", path)
    return path
