"""Error handling utilities for API endpoints."""

import functools
from typing import Any, Callable, Dict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from solana_api.logging_config import get_logger, log_with_context
from solana_api.utils.errors import ErrorResponse, SolanaApiError

# Set up logger
logger = get_logger(__name__)

FailureBuilder = Callable[[SolanaApiError, Dict[str, Any]], BaseModel]


def envelope_errors(on_error: FailureBuilder) -> Callable:
    """Decorator that turns service errors into a failed response envelope.

    The endpoint keeps answering HTTP 200; callers read ``success``.

    Args:
        on_error: Builds the failed response from the error and the
            endpoint's keyword arguments (the parsed request among them)

    Returns:
        Decorator function
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except SolanaApiError as e:
                log_with_context(
                    logger,
                    "warning",
                    f"{func.__name__} rejected request: {e.message}",
                    endpoint=func.__name__,
                    code=e.code.value
                )
                return on_error(e, kwargs)

        return wrapper

    return decorator


def describe_validation_errors(exc: RequestValidationError) -> str:
    """Render request validation errors as one readable line."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Invalid request body"


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle request bodies that do not match the endpoint's schema."""
    detail = describe_validation_errors(exc)
    log_with_context(
        logger,
        "warning",
        f"Request validation failed: {detail}",
        path=request.url.path
    )
    return JSONResponse(
        status_code=422,
        content=ErrorResponse(error=detail).model_dump(),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle uncaught exceptions.

    Args:
        request: FastAPI request
        exc: Exception that was raised

    Returns:
        JSON response with a generic error
    """
    logger.error(f"Unhandled exception on {request.url.path}: {str(exc)}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(error="Internal server error").model_dump(),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the application-level exception handlers."""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
    logger.debug("Error handlers registered")
