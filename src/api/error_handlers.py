"""Global exception handlers.

- ConduitError → status from its kind, ``{"error": ...}`` or ``{"errors": [...]}``
- RequestValidationError → 400 with field-level ``{"errors": [...]}``
- anything else → 500 with a generic message; details are only logged
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.exceptions import ConduitError, ErrorKind, FieldError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(ConduitError, conduit_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


async def conduit_error_handler(request: Request, exc: ConduitError) -> JSONResponse:
    if exc.http_status >= 500:
        logger.error(f"{exc.kind.value} error on {request.url.path}: {exc.message}")
    else:
        logger.info(f"{exc.kind.value} on {request.method} {request.url.path}: {exc.message}")

    headers = None
    if exc.kind is ErrorKind.UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Token"}
    return JSONResponse(status_code=exc.http_status, content=exc.to_response(), headers=headers)


def field_errors(exc: RequestValidationError) -> list[FieldError]:
    """Flatten pydantic errors to one entry per failing field."""
    errors = []
    for error in exc.errors():
        if error.get("type") == "json_invalid":
            errors.append(FieldError(field="body", message="Invalid JSON format"))
            continue
        loc = error.get("loc") or ("body",)
        errors.append(FieldError(field=str(loc[-1]), message=error["msg"]))
    return errors


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = field_errors(exc)
    logger.info(f"Validation failed on {request.url.path}: {len(errors)} error(s)")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": [error.to_dict() for error in errors]},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled exception on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": INTERNAL_ERROR_MESSAGE},
    )
