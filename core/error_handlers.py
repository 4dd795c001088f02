"""Exception handlers that turn calculator failures into JSON error bodies.

Every error response has the same envelope::

    {"error": {"message": ..., "status_code": ..., "details": {...}}}

`details` is omitted when there is nothing to add.
"""

from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from core.exceptions import AppException
from core.logger import get_logger

logger = get_logger("core.error_handlers")

INTERNAL_ERROR_MESSAGE = "An internal server error occurred"


def error_response(message: str, status_code: int, details: Optional[Dict[str, Any]] = None) -> JSONResponse:
    """Wrap `message` and optional `details` in the error envelope."""
    body: Dict[str, Any] = {"message": message, "status_code": status_code}
    if details:
        body["details"] = details
    return JSONResponse(status_code=status_code, content={"error": body})


def _route(request: Request) -> str:
    return f"{request.method} {request.url.path}"


def field_errors(exc: RequestValidationError) -> List[Dict[str, str]]:
    """Flatten pydantic errors to ``field``/``message``/``type`` entries.

    The raw `input` pydantic reports is left out; it may hold values
    (NaN, infinities) that strict JSON cannot carry.
    """
    return [
        {
            "field": ".".join(str(part) for part in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Render an engine error (missing field, out of range, not found) as-is."""
    logger.warning("%s rejected: %s", _route(request), exc.message)
    return error_response(exc.message, exc.status_code, exc.details)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render a body that failed schema validation before reaching a calculator."""
    errors = field_errors(exc)
    logger.warning("%s failed schema validation: %s", _route(request), errors)
    return error_response(
        "Validation error",
        422,
        {"validation_errors": errors},
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled exception on %s: %s", _route(request), exc, exc_info=exc)
    return error_response(
        INTERNAL_ERROR_MESSAGE,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        {"type": "internal_error"},
    )


EXCEPTION_HANDLERS = [
    (AppException, app_exception_handler),
    (RequestValidationError, validation_exception_handler),
    (Exception, generic_exception_handler),
]


def register_exception_handlers(app: FastAPI) -> None:
    for exc_class, handler in EXCEPTION_HANDLERS:
        app.add_exception_handler(exc_class, handler)
    logger.info("Registered %d exception handlers", len(EXCEPTION_HANDLERS))
