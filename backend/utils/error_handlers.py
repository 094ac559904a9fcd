"""
Error handling decorators and utilities for API endpoints.

Centralizes the translation of application exceptions into HTTP responses so
endpoints only contain the happy path.
"""

from functools import wraps
from typing import Callable
from fastapi import HTTPException
import inspect
import logging

from constants import HTTPStatus
from exceptions import (
    ApplicationError,
    ConfigurationError,
    EntityNotFoundError,
    InvalidArgumentError,
)

logger = logging.getLogger(__name__)


def to_http_exception(operation_name: str, exc: Exception) -> HTTPException:
    """
    Map an exception raised by the service layer to an HTTPException.

    - EntityNotFoundError -> 404
    - InvalidArgumentError -> 400
    - Other application errors -> 500
    - Anything else -> 500 with a generic message (details go to the log)
    """
    if isinstance(exc, EntityNotFoundError):
        logger.info(f"{operation_name} - Not found: {exc.message}")
        return HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=exc.message)
    if isinstance(exc, InvalidArgumentError):
        logger.warning(f"{operation_name} - Invalid argument: {exc.message}")
        return HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=exc.message)
    if isinstance(exc, ConfigurationError):
        logger.error(f"{operation_name} - Configuration error: {exc.message}")
        return HTTPException(status_code=HTTPStatus.INTERNAL_SERVER_ERROR, detail=exc.message)
    if isinstance(exc, ApplicationError):
        logger.error(f"{operation_name} - Application error: {exc.message}", exc_info=exc)
        return HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail=f"{operation_name} failed: {exc.message}"
        )
    logger.error(f"{operation_name} - Unexpected error: {exc}", exc_info=exc)
    return HTTPException(
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
        detail=f"{operation_name} failed. Please check server logs."
    )


def handle_api_errors(operation_name: str):
    """
    Decorator to handle common API errors consistently across endpoints.

    Args:
        operation_name: Human-readable name of the operation (e.g., "Get products")

    Example:
        @router.get("/products")
        @handle_api_errors("Get products")
        def get_products(...):
            return service.fetch_products_by_specifications(...)
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
                raise to_http_exception(operation_name, e) from e

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as e:
                raise to_http_exception(operation_name, e) from e

        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator
