# app/shared/error_handlers.py
"""
Exception handlers.
Every error body carries a "message"; validation failures also list each field.
"""
import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.system_services.exceptions import DuplicateRecordError, InvalidReferenceError

logger = logging.getLogger(__name__)

REQUEST_LOCATIONS = ("body", "query", "path", "header", "cookie")


def format_validation_errors(errors) -> List[Dict[str, Any]]:
    """Flatten pydantic errors into {field, message, type} entries."""
    formatted = []
    for error in errors:
        loc = list(error.get("loc", ()))
        if loc and loc[0] in REQUEST_LOCATIONS:
            loc = loc[1:]
        formatted.append(
            {
                "field": ".".join(str(part) for part in loc) or "body",
                "message": error.get("msg", "Invalid value"),
                "type": error.get("type", "value_error"),
            }
        )
    return formatted


def invalid_payload(message: str, error: Exception) -> Dict[str, Any]:
    """HTTPException detail for a reference or uniqueness failure on a write."""
    if isinstance(error, InvalidReferenceError):
        reason = f"No record with id {error.record_id}"
        error_type = "invalid_reference"
    elif isinstance(error, DuplicateRecordError):
        reason = f"'{error.value}' already exists"
        error_type = "duplicate"
    else:
        raise TypeError(f"Unsupported payload error: {error!r}")
    return {
        "message": message,
        "errors": [{"field": error.field, "message": reason, "type": error_type}],
    }


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid request data", "errors": format_validation_errors(exc.errors())},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    content = exc.detail if isinstance(exc.detail, dict) else {"message": exc.detail}
    return JSONResponse(status_code=exc.status_code, content=content, headers=getattr(exc, "headers", None))


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
