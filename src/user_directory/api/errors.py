"""Translate domain errors into uniform JSON error responses."""

import logging
from datetime import UTC, datetime

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from user_directory.api.schemas import ErrorResponse
from user_directory.domain.errors import (
    DuplicateResourceError,
    ResourceNotFoundError,
    UpstreamError,
    ValidationFailedError,
)

logger = logging.getLogger(__name__)

_REQUEST_LOCATIONS = {"body", "query", "path", "header"}


def error_response(
    status_code: int,
    error: str,
    message: str,
    validation_errors: dict[str, str] | None = None,
) -> JSONResponse:
    """Build a JSON response with the uniform error body."""
    body = ErrorResponse(
        error=error,
        message=message,
        status=status_code,
        timestamp=datetime.now(tz=UTC),
        validation_errors=validation_errors,
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", by_alias=True, exclude_none=True),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach handlers for every domain error to the app."""

    @app.exception_handler(ResourceNotFoundError)
    async def handle_not_found(
        _request: Request, exc: ResourceNotFoundError
    ) -> JSONResponse:
        logger.warning("Resource not found: %s", exc)
        return error_response(
            status.HTTP_404_NOT_FOUND, "Resource Not Found", str(exc)
        )

    @app.exception_handler(DuplicateResourceError)
    async def handle_duplicate(
        _request: Request, exc: DuplicateResourceError
    ) -> JSONResponse:
        logger.warning("Duplicate resource: %s", exc)
        return error_response(status.HTTP_409_CONFLICT, "Duplicate Resource", str(exc))

    @app.exception_handler(ValidationFailedError)
    async def handle_validation_failed(
        _request: Request, exc: ValidationFailedError
    ) -> JSONResponse:
        logger.warning("Validation failed: %s", exc.errors)
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            "Validation Failed",
            "Invalid input data",
            validation_errors=exc.errors,
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = request_validation_messages(exc)
        logger.warning("Validation failed: %s", errors)
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            "Validation Failed",
            "Invalid input data",
            validation_errors=errors,
        )

    @app.exception_handler(UpstreamError)
    async def handle_upstream(_request: Request, exc: UpstreamError) -> JSONResponse:
        logger.error("External API failure: %s", exc)
        return error_response(status.HTTP_502_BAD_GATEWAY, "Bad Gateway", str(exc))

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unexpected error", exc_info=exc)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal Server Error",
            "An unexpected error occurred",
        )


def request_validation_messages(exc: RequestValidationError) -> dict[str, str]:
    """Map FastAPI validation errors to field names and messages."""
    messages: dict[str, str] = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in _REQUEST_LOCATIONS:
            loc = loc[1:]
        field = ".".join(loc) or "body"
        messages.setdefault(field, str(error.get("msg", "Invalid value")))
    return messages
