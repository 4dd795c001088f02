"""Enumerations and shared records used by every calculator schema."""

from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class Sex(str, Enum):
    """Biological sex; selects the BMR constant, calorie floor and fiber bracket."""

    MALE = "male"
    FEMALE = "female"


class ActivityLevel(str, Enum):
    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very-active"


class WeightUnit(str, Enum):
    KG = "kg"
    LB = "lb"


class HeightUnit(str, Enum):
    CM = "cm"
    IN = "in"
    FT = "ft"


class CalculatorWarning(BaseModel):
    """Non-fatal condition attached to a result (e.g. a clamped calorie target)."""

    model_config = ConfigDict(frozen=True)

    code: str
    message: str
    details: Dict[str, Any] = {}

    @classmethod
    def from_warning(cls, warning) -> "CalculatorWarning":
        """Build the response entry from a warning object exposing code/message/details."""
        return cls(code=warning.code, message=warning.message, details=warning.details)
