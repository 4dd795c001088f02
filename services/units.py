"""Unit conversion, input validation and rounding shared by all calculators.

Every calculator normalizes its inputs here before running a formula:
weights become kilograms, heights become centimeters, and anything absent
or outside a plausible human range is rejected with a field-named error.
"""

import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, TypeVar

from core.exceptions import MissingRequiredFieldError, OutOfRangeError
from schemas.common_schema import HeightUnit, WeightUnit

T = TypeVar("T")

KG_PER_LB = 0.45359237
CM_PER_INCH = 2.54
CM_PER_FOOT = 30.48

# Exclusive bounds, canonical units.
WEIGHT_RANGE_KG = (0.0, 500.0)
HEIGHT_RANGE_CM = (0.0, 300.0)
# Inclusive bounds.
AGE_RANGE_YEARS = (0, 120)


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round `value` to `ndigits` decimals, ties away from zero.

    The float is read through its shortest repr, so 2.675 rounds to 2.68
    instead of inheriting the binary error of ``round(2.675, 2)``.
    """
    quantum = Decimal(1).scaleb(-ndigits)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def round_whole(value: float) -> int:
    return int(round_half_up(value))


def require(value: Optional[T], field: str) -> T:
    """Return `value`, raising MissingRequiredFieldError when it is None."""
    if value is None:
        raise MissingRequiredFieldError(field)
    return value


def check_range(
    field: str,
    value: float,
    minimum: float,
    maximum: float,
    unit: Optional[str] = None,
    inclusive_min: bool = False,
    inclusive_max: bool = False,
) -> float:
    """Return `value` if it lies inside the range, else raise OutOfRangeError.

    NaN and infinities are always out of range, even against an open bound.
    """
    above = value >= minimum if inclusive_min else value > minimum
    below = value <= maximum if inclusive_max else value < maximum
    if not (math.isfinite(value) and above and below):
        raise OutOfRangeError(
            field, value, minimum, maximum, unit=unit,
            inclusive_min=inclusive_min, inclusive_max=inclusive_max,
        )
    return value


def to_kilograms(value: float, unit: WeightUnit) -> float:
    if WeightUnit(unit) is WeightUnit.LB:
        return value * KG_PER_LB
    return float(value)


def to_centimeters(value: float, unit: HeightUnit) -> float:
    unit = HeightUnit(unit)
    if unit is HeightUnit.IN:
        return value * CM_PER_INCH
    if unit is HeightUnit.FT:
        return value * CM_PER_FOOT
    return float(value)


def normalize_weight(value: Optional[float], unit: WeightUnit = WeightUnit.KG, field: str = "weight") -> float:
    """Validate a tagged weight and return it in kilograms."""
    weight_kg = to_kilograms(require(value, field), unit)
    return check_range(field, weight_kg, *WEIGHT_RANGE_KG, unit="kg")


def normalize_height(value: Optional[float], unit: HeightUnit = HeightUnit.CM, field: str = "height") -> float:
    """Validate a tagged height and return it in centimeters."""
    height_cm = to_centimeters(require(value, field), unit)
    return check_range(field, height_cm, *HEIGHT_RANGE_CM, unit="cm")


def validate_age(value: Optional[int], field: str = "age") -> int:
    age = require(value, field)
    check_range(field, age, *AGE_RANGE_YEARS, unit="years", inclusive_min=True, inclusive_max=True)
    return age
