"""Test error handling functionality.

Verifies that the exception taxonomy carries the expected attributes and
that the FastAPI handlers render it as a consistent JSON error body.
"""
import asyncio
import json
import logging

import pytest
from fastapi.exceptions import RequestValidationError
from starlette.requests import Request

from core.config import parse_log_level, parse_origins
from core.error_handlers import (
    app_exception_handler,
    generic_exception_handler,
    validation_exception_handler,
)
from core.exceptions import (
    BelowSafeMinimumWarning,
    ConfigurationError,
    MissingRequiredFieldError,
    NotFoundError,
    OutOfRangeError,
    ValidationError,
)
from schemas import CalculatorWarning


def make_request(path="/api/calculators/bmi", method="POST"):
    return Request({
        "type": "http",
        "method": method,
        "path": path,
        "query_string": b"",
        "headers": [],
    })


def body_of(response):
    return json.loads(response.body)


def test_exception_classes_have_proper_attributes():
    """Test that custom exception classes have expected attributes."""
    exc = NotFoundError("Caffeine source", "Rocket Fuel")
    assert exc.status_code == 404
    assert "Rocket Fuel" in exc.message

    exc = ValidationError("Invalid input", field="age")
    assert exc.status_code == 400
    assert exc.details == {"field": "age"}

    exc = MissingRequiredFieldError("weight")
    assert isinstance(exc, ValidationError)
    assert exc.status_code == 422
    assert exc.message == "weight is required"

    exc = OutOfRangeError("weight", 612.0, 0, 500, unit="kg")
    assert isinstance(exc, ValidationError)
    assert exc.message == "weight must be greater than 0 and less than 500 kg (got 612)"
    assert exc.details["field"] == "weight"
    assert exc.details["maximum"] == 500


def test_below_safe_minimum_is_a_warning_not_an_error():
    warning = BelowSafeMinimumWarning("deficit", 900, 1200)
    assert isinstance(warning, UserWarning)
    assert not isinstance(warning, ValidationError)
    entry = CalculatorWarning.from_warning(warning)
    assert entry.code == "BelowSafeMinimum"
    assert entry.details == {"goal": "deficit", "requested": 900, "floor": 1200}
    assert "1200" in entry.message


def test_app_exception_handler_renders_details():
    exc = OutOfRangeError("age", 130, 0, 120, unit="years", inclusive_min=True, inclusive_max=True)
    response = asyncio.run(app_exception_handler(make_request(), exc))
    assert response.status_code == 422
    error = body_of(response)["error"]
    assert error["message"] == "age must be at least 0 and at most 120 years (got 130)"
    assert error["details"]["field"] == "age"


def test_app_exception_handler_renders_non_finite_values():
    exc = OutOfRangeError("weight", float("nan"), 0, float("inf"), unit="kg")
    response = asyncio.run(app_exception_handler(make_request(), exc))
    assert response.status_code == 422
    details = body_of(response)["error"]["details"]
    assert details["value"] == "nan"
    assert details["maximum"] == "inf"


def test_validation_exception_handler_lists_fields():
    exc = RequestValidationError([
        {"loc": ("body", "sex"), "msg": "Input should be 'male' or 'female'", "type": "enum"},
    ])
    response = asyncio.run(validation_exception_handler(make_request(), exc))
    assert response.status_code == 422
    errors = body_of(response)["error"]["details"]["validation_errors"]
    assert errors == [{"field": "body.sex", "message": "Input should be 'male' or 'female'", "type": "enum"}]


def test_generic_exception_handler_hides_internals():
    response = asyncio.run(generic_exception_handler(make_request(), RuntimeError("boom")))
    assert response.status_code == 500
    error = body_of(response)["error"]
    assert "boom" not in error["message"]
    assert error["details"] == {"type": "internal_error"}


def test_config_parsing():
    assert parse_log_level("debug") == logging.DEBUG
    assert parse_log_level(" WARNING ") == logging.WARNING
    with pytest.raises(ConfigurationError) as exc_info:
        parse_log_level("loud")
    assert exc_info.value.details == {"config_key": "NUTRITION_LOG_LEVEL"}

    assert parse_origins("https://a.example, https://b.example,,") == ["https://a.example", "https://b.example"]
    assert parse_origins("") == ["*"]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
