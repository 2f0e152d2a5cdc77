"""Exception handlers rendering every error as ``{"error": "..."}``."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Not found"
INTERNAL_ERROR_MESSAGE = "Internal server error"

# Details Starlette's router uses when no route matches
_ROUTING_DETAILS = {"Not Found", "Method Not Allowed"}


def _error(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTPException; unmatched routes (any verb) become a plain 404."""
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED or (
        exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail in _ROUTING_DETAILS
    ):
        return _error(status.HTTP_404_NOT_FOUND, NOT_FOUND_MESSAGE)

    headers = getattr(exc, "headers", None)
    return _error(exc.status_code, str(exc.detail), headers=headers)


def describe_validation_errors(errors: list[dict]) -> str:
    """Turn pydantic error dicts into one user-facing message.

    Missing body fields are reported together; otherwise the first
    problem is described.
    """
    missing = [
        str(err["loc"][-1])
        for err in errors
        if err.get("type") == "missing" and len(err.get("loc", ())) > 1
    ]
    if missing:
        return f"Missing required fields: {', '.join(missing)}"

    for err in errors:
        err_type = err.get("type")
        loc = err.get("loc", ())
        if err_type == "json_invalid":
            return "Request body is not valid JSON"
        if err_type == "missing":
            return "Request body is required"
        # loc is ("body", field, <union member>...); report the field only
        field = str(loc[1]) if len(loc) > 1 else str(loc[0]) if loc else "body"
        return f"Invalid value for {field}: {err.get('msg', 'invalid')}"

    return "Invalid request"


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render request validation failures as 400 instead of FastAPI's 422."""
    message = describe_validation_errors(list(exc.errors()))
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, message)
    return _error(status.HTTP_400_BAD_REQUEST, message)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log the failure and answer with a generic 500."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    """Install all exception handlers on ``app``."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
