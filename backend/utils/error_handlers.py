"""
Error handling decorators and utilities for API endpoints.

This module centralizes the translation of uncaught application exceptions
into HTTP responses, so route functions only deal with the expected outcomes.
"""

from functools import wraps
from typing import Callable
from fastapi import HTTPException
import inspect
import logging

from constants import HTTPStatus
from exceptions import (
    ValidationError,
    DatabaseError,
    ApplicationError
)

logger = logging.getLogger(__name__)


def _to_http_exception(operation_name: str, e: Exception) -> HTTPException:
    """Map an exception raised inside a route to an HTTPException."""
    if isinstance(e, ValidationError):
        logger.warning(f"{operation_name} - Validation error: {e.message}")
        return HTTPException(
            status_code=HTTPStatus.BAD_REQUEST,
            detail=e.message
        )
    if isinstance(e, DatabaseError):
        logger.error(f"{operation_name} - Database error: {e.message}", exc_info=e)
        return HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail=f"Database operation failed: {e.message}"
        )
    if isinstance(e, ApplicationError):
        logger.error(f"{operation_name} - Application error: {e.message}", exc_info=e)
        return HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail=f"{operation_name} failed: {e.message}"
        )
    logger.error(f"{operation_name} - Unexpected error: {e}", exc_info=e)
    return HTTPException(
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
        detail=f"{operation_name} failed. Please check server logs or contact support."
    )


def handle_api_errors(operation_name: str):
    """
    Decorator to handle common API errors consistently across endpoints.

    This decorator catches application exceptions and converts them
    to appropriate HTTPException responses with consistent error messages.

    Args:
        operation_name: Human-readable name of the operation (e.g., "Create delivery")

    Returns:
        Decorated function that handles errors uniformly

    Example:
        @router.post("/deliveries")
        @handle_api_errors("Create delivery")
        def create_delivery(...):
            return to_response(endpoint.create(delivery), endpoint.config)
    """
    def decorator(func: Callable):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                # Re-raise HTTPException as-is to preserve status code and detail
                raise
            except Exception as e:
                raise _to_http_exception(operation_name, e) from e

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as e:
                raise _to_http_exception(operation_name, e) from e

        # Return appropriate wrapper based on whether the function is async
        if inspect.iscoroutinefunction(func):
            return async_wrapper
        else:
            return sync_wrapper

    return decorator
