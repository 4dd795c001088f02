"""Tests for unit conversion, range validation and rounding."""
import pytest

from core.exceptions import MissingRequiredFieldError, OutOfRangeError
from services.units import (
    check_range,
    normalize_height,
    normalize_weight,
    round_half_up,
    round_whole,
    to_centimeters,
    to_kilograms,
    validate_age,
)


def test_imperial_units_convert_to_metric():
    assert to_kilograms(100, "lb") == pytest.approx(45.359237)
    assert to_kilograms(70, "kg") == 70.0
    assert to_centimeters(72, "in") == pytest.approx(182.88)
    assert to_centimeters(5.75, "ft") == pytest.approx(175.26)
    assert to_centimeters(175, "cm") == 175.0


def test_weight_range_is_exclusive_at_both_ends():
    assert normalize_weight(499.9) == 499.9
    for bad in (0, -5, 500, 650):
        with pytest.raises(OutOfRangeError) as exc_info:
            normalize_weight(bad)
        assert exc_info.value.field == "weight"
        assert exc_info.value.status_code == 422


def test_weight_range_checked_after_conversion():
    """1200 lb is about 544 kg, over the 500 kg limit."""
    with pytest.raises(OutOfRangeError) as exc_info:
        normalize_weight(1200, "lb")
    assert exc_info.value.value == pytest.approx(544.31, abs=0.01)
    assert "weight" in exc_info.value.message
    assert "500" in exc_info.value.message


def test_height_range():
    assert normalize_height(6, "ft") == pytest.approx(182.88)
    with pytest.raises(OutOfRangeError) as exc_info:
        normalize_height(300)
    assert exc_info.value.details["maximum"] == 300.0
    assert exc_info.value.details["unit"] == "cm"
    with pytest.raises(OutOfRangeError):
        normalize_height(0)


def test_non_finite_values_are_out_of_range():
    for bad in (float("nan"), float("inf"), float("-inf")):
        with pytest.raises(OutOfRangeError) as exc_info:
            check_range("weight", bad, 0.0, 500.0, unit="kg")
        assert exc_info.value.field == "weight"
    with pytest.raises(OutOfRangeError) as exc_info:
        check_range("bmi", float("inf"), 0.0, float("inf"), inclusive_min=True)
    assert exc_info.value.details["value"] == "inf"
    assert exc_info.value.details["maximum"] == "inf"


def test_age_range_is_inclusive():
    assert validate_age(0) == 0
    assert validate_age(120) == 120
    for bad in (-1, 121):
        with pytest.raises(OutOfRangeError) as exc_info:
            validate_age(bad)
        assert "at least 0 and at most 120" in exc_info.value.message


def test_missing_values_name_the_field():
    with pytest.raises(MissingRequiredFieldError) as exc_info:
        normalize_weight(None)
    assert exc_info.value.field == "weight"
    assert exc_info.value.details == {"field": "weight"}

    with pytest.raises(MissingRequiredFieldError) as exc_info:
        validate_age(None)
    assert exc_info.value.field == "age"


def test_rounding_is_half_up():
    assert round_whole(1673.75) == 1674
    assert round_whole(2008.5) == 2009
    assert round_whole(0.5) == 1
    assert round_whole(2.5) == 3
    assert round_half_up(18.45, 1) == 18.5
    assert round_half_up(2.675, 2) == 2.68
    assert round_half_up(66.6666, 0) == 67.0
