"""Tests for the dimension model."""
import json

import pytest

from dimensions import (
    DEFAULT_DIMENSIONS,
    DEFAULT_LABEL_OFFSETS,
    DimensionsError,
    ScreenDimensions,
    coerce_number,
    load_dimensions,
    resolve_field_name,
    save_dimensions,
)


class TestDefaults:

    def test_shipped_values(self):
        dims = DEFAULT_DIMENSIONS
        assert dims.screen_width == 718
        assert dims.panel_height == pytest.approx(412.63)
        assert dims.stand_height == 300
        assert dims.base_width == 220
        assert dims.base_depth == pytest.approx(243.5)
        assert dims.tilt_forward_angle == 15
        assert dims.tilt_backward_angle == 15
        assert dims.swivel_angle == 45
        assert dims.stand_base_angle == 90

    def test_total_screen_thickness(self):
        assert DEFAULT_DIMENSIONS.total_screen_thickness == 68

    def test_default_label_offsets(self):
        assert DEFAULT_DIMENSIONS.label_offset_map() == {
            k: float(v) for k, v in DEFAULT_LABEL_OFFSETS.items()
        }


class TestValueSemantics:
    """The model must be immutable, hashable and compared by value."""

    def test_frozen(self):
        with pytest.raises(Exception):
            DEFAULT_DIMENSIONS.screen_width = 10

    def test_structural_equality_and_hash(self):
        a = ScreenDimensions(base_width=180.0)
        b = ScreenDimensions(base_width=180.0)
        assert a == b
        assert a is not b
        assert hash(a) == hash(b)

    def test_label_offset_order_does_not_matter(self):
        a = ScreenDimensions(label_offsets={"a": 1, "b": 2})
        b = ScreenDimensions(label_offsets={"b": 2, "a": 1})
        assert a == b
        assert hash(a) == hash(b)

    def test_label_offset_map_is_a_copy(self):
        dims = ScreenDimensions(label_offsets={"side_gap": 60})
        offsets = dims.label_offset_map()
        offsets["side_gap"] = 0
        assert dims.label_offset_map() == {"side_gap": 60.0}

    def test_replace_returns_new_instance(self):
        edited = DEFAULT_DIMENSIONS.replace(swivel_angle=10.0)
        assert edited.swivel_angle == 10.0
        assert DEFAULT_DIMENSIONS.swivel_angle == 45
        assert edited.label_offsets == DEFAULT_DIMENSIONS.label_offsets


class TestDictConversion:

    def test_to_dict_uses_camel_case(self):
        payload = DEFAULT_DIMENSIONS.to_dict()
        assert payload["screenWidth"] == 718
        assert payload["standToNeckGap"] == -15
        assert "screen_width" not in payload
        assert payload["labelOffsets"]["side_gap"] == 60

    def test_round_trip(self):
        dims = DEFAULT_DIMENSIONS.replace(base_width=199.5, lifting_offset=12.0)
        assert ScreenDimensions.from_dict(dims.to_dict()) == dims

    def test_missing_keys_keep_defaults(self):
        dims = ScreenDimensions.from_dict({"baseWidth": 150})
        assert dims.base_width == 150.0
        assert dims.base_depth == DEFAULT_DIMENSIONS.base_depth

    def test_snake_case_keys_accepted(self):
        dims = ScreenDimensions.from_dict({"swivel_angle": 30})
        assert dims.swivel_angle == 30.0

    def test_unknown_key_rejected(self):
        with pytest.raises(DimensionsError, match="Unknown dimension"):
            ScreenDimensions.from_dict({"armLength": 5})

    def test_non_numeric_rejected(self):
        with pytest.raises(DimensionsError):
            ScreenDimensions.from_dict({"baseWidth": "wide"})

    def test_bool_rejected(self):
        with pytest.raises(DimensionsError):
            ScreenDimensions.from_dict({"baseWidth": True})

    def test_non_finite_rejected(self):
        with pytest.raises(DimensionsError):
            ScreenDimensions.from_dict({"baseWidth": float("nan")})

    def test_label_offsets_must_be_mapping(self):
        with pytest.raises(DimensionsError):
            ScreenDimensions.from_dict({"labelOffsets": [1, 2]})

    def test_resolve_field_name(self):
        assert resolve_field_name("vesaNeckDepth") == "vesa_neck_depth"
        assert resolve_field_name("vesa_neck_depth") == "vesa_neck_depth"
        with pytest.raises(DimensionsError):
            resolve_field_name("nope")


class TestFileIO:

    def test_save_and_load(self, tmp_path):
        dims = DEFAULT_DIMENSIONS.replace(stand_base_angle=80.0)
        path = save_dimensions(dims, tmp_path / "nested" / "stand.json")
        assert path.exists()
        assert load_dimensions(path) == dims

    def test_load_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(DimensionsError, match="invalid JSON"):
            load_dimensions(path)

    def test_load_requires_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text(json.dumps([1, 2, 3]), encoding="utf-8")
        with pytest.raises(DimensionsError):
            load_dimensions(path)


class TestValidation:

    def test_defaults_are_valid(self):
        assert DEFAULT_DIMENSIONS.validate() == []

    def test_negative_size_reported(self):
        issues = DEFAULT_DIMENSIONS.replace(base_width=-1.0).validate()
        assert any("base_width" in issue for issue in issues)

    def test_negative_gap_is_allowed(self):
        assert DEFAULT_DIMENSIONS.replace(stand_to_neck_gap=-40.0).validate() == []

    def test_out_of_range_angle_reported(self):
        issues = DEFAULT_DIMENSIONS.replace(swivel_angle=270.0).validate()
        assert any("swivel_angle" in issue for issue in issues)

    def test_horizontal_tilt_reported(self):
        issues = DEFAULT_DIMENSIONS.replace(tilt_forward_angle=90.0).validate()
        assert any("never reaches the floor" in issue for issue in issues)

    def test_with_non_negative_sizes(self):
        dims = DEFAULT_DIMENSIONS.replace(base_width=-10.0, stand_to_neck_gap=-20.0)
        clamped = dims.with_non_negative_sizes()
        assert clamped.base_width == 0.0
        assert clamped.stand_to_neck_gap == -20.0

    def test_with_non_negative_sizes_keeps_valid_instance(self):
        assert DEFAULT_DIMENSIONS.with_non_negative_sizes() is DEFAULT_DIMENSIONS


class TestCoerceNumber:

    def test_accepts_numeric_strings(self):
        assert coerce_number("baseWidth", "180.5") == 180.5
        assert coerce_number("baseWidth", 7) == 7.0

    @pytest.mark.parametrize("raw", ["inf", "-inf", "nan", float("inf")])
    def test_rejects_non_finite(self, raw):
        with pytest.raises(DimensionsError, match="must be finite"):
            coerce_number("swivelAngle", raw)

    @pytest.mark.parametrize("raw", ["wide", None, True])
    def test_rejects_non_numbers(self, raw):
        with pytest.raises(DimensionsError, match="must be a number"):
            coerce_number("baseWidth", raw)
