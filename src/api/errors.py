"""Centralized error reporting.

Every failure that escapes a route handler ends up here, is logged, and is
returned as HTTP 500 with ``{"response": <message>}``. Error kinds are not
mapped to distinct status codes.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.errors import TodoAPIError

logger = logging.getLogger(__name__)

DEFAULT_MESSAGE = "An error occurred"


def error_response(message: str | None) -> JSONResponse:
    """Build the uniform error response."""
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"response": message or DEFAULT_MESSAGE},
    )


def describe_validation_error(exc: RequestValidationError) -> str:
    """Summarize request validation failures as one line."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg')}")
    return "Invalid request: " + "; ".join(parts)


async def handle_api_error(request: Request, exc: TodoAPIError) -> JSONResponse:
    """Report an expected request failure."""
    logger.error(f"{request.method} {request.url.path} failed: {type(exc).__name__}: {exc}")
    return error_response(exc.message)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request input (bad JSON, wrong path parameter types)."""
    message = describe_validation_error(exc)
    logger.error(f"{request.method} {request.url.path} failed: {message}")
    return error_response(message)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Report anything else a handler raised."""
    logger.exception(f"{request.method} {request.url.path} failed unexpectedly")
    return error_response(str(exc))


def register_exception_handlers(app: FastAPI) -> None:
    """Route every error kind to the uniform error response."""
    app.add_exception_handler(TodoAPIError, handle_api_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
