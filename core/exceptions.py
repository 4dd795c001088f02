"""Custom exception classes for the calculator engine.

Defines the errors raised by the calculators and the API layer. Every
exception carries an HTTP status code and a details dictionary so the
FastAPI exception handlers can render it without knowing its type.
"""

import math
from typing import Optional, Any, Dict


def _json_number(value: Any) -> Any:
    """Strict JSON has no NaN or Infinity; render those as strings."""
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    return value


class AppException(Exception):
    """Base exception class for all application exceptions.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code to return.
        details: Optional additional error details.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(AppException):
    """Exception raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: Any):
        """Initialize not found error.

        Args:
            resource: Type of resource (e.g., 'Caffeine source').
            identifier: Name or identifier that was not found.
        """
        message = f"{resource} '{identifier}' not found"
        super().__init__(message, status_code=404, details={"resource": resource, "id": identifier})


class ValidationError(AppException):
    """Exception raised when input validation fails."""

    def __init__(self, message: str, field: Optional[str] = None, status_code: int = 400, details: Optional[Dict[str, Any]] = None):
        """Initialize validation error.

        Args:
            message: Validation error message.
            field: Optional field name that failed validation.
            status_code: HTTP status code (default: 400).
            details: Extra context merged after the field name.
        """
        merged = {"field": field} if field else {}
        merged.update(details or {})
        super().__init__(message, status_code=status_code, details=merged)
        self.field = field


class MissingRequiredFieldError(ValidationError):
    """Exception raised when a required calculator input is absent."""

    def __init__(self, field: str):
        super().__init__(f"{field} is required", field=field, status_code=422)


class OutOfRangeError(ValidationError):
    """Exception raised when an input lies outside its plausible range.

    The message names the field and the accepted range, e.g.
    ``weight must be greater than 0 and less than 500 kg (got 612)``.

    Attributes:
        value: Offending value, in canonical units.
        minimum: Lower bound of the accepted range.
        maximum: Upper bound of the accepted range.
    """

    def __init__(
        self,
        field: str,
        value: Any,
        minimum: float,
        maximum: float,
        unit: Optional[str] = None,
        inclusive_min: bool = False,
        inclusive_max: bool = False,
    ):
        lower = "at least" if inclusive_min else "greater than"
        upper = "at most" if inclusive_max else "less than"
        suffix = f" {unit}" if unit else ""
        message = f"{field} must be {lower} {minimum:g} and {upper} {maximum:g}{suffix} (got {value:g})"
        super().__init__(
            message,
            field=field,
            status_code=422,
            details={
                "value": _json_number(value),
                "minimum": _json_number(minimum),
                "maximum": _json_number(maximum),
                "inclusive_min": inclusive_min,
                "inclusive_max": inclusive_max,
                "unit": unit,
            },
        )
        self.value = value
        self.minimum = minimum
        self.maximum = maximum


class ConfigurationError(AppException):
    """Exception raised when application configuration is invalid."""

    def __init__(self, message: str, config_key: Optional[str] = None):
        """Initialize configuration error.

        Args:
            message: Configuration error message.
            config_key: Optional configuration key that is invalid.
        """
        details = {"config_key": config_key} if config_key else {}
        super().__init__(message, status_code=500, details=details)


class BelowSafeMinimumWarning(UserWarning):
    """Non-fatal: a calorie target was raised to the safe daily minimum.

    Never raised by the engine; calculators attach it to their result as a
    warning entry and return normally.
    """

    code = "BelowSafeMinimum"

    def __init__(self, goal: str, requested: int, floor: int):
        self.goal = goal
        self.requested = requested
        self.floor = floor
        super().__init__(
            f"{goal} target of {requested} kcal is below the safe minimum; clamped to {floor} kcal"
        )

    @property
    def message(self) -> str:
        return str(self)

    @property
    def details(self) -> Dict[str, Any]:
        return {"goal": self.goal, "requested": self.requested, "floor": self.floor}
