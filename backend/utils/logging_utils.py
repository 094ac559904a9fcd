"""
Structured Logging Utilities

Root logger setup plus helpers for adding request-scoped context to log
messages.
"""

import inspect
import logging
import sys
from contextvars import ContextVar
from functools import wraps
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Identifier arguments copied into the context of log_operation messages
CONTEXT_ID_KEYS = ("product_id", "user_id", "profile_id", "address_id", "category", "page", "size")

# Context variable for request-scoped logging context
_logging_context: ContextVar[Dict[str, Any]] = ContextVar('logging_context', default={})

# LogRecord attributes that may not be overwritten through `extra`
_RESERVED_RECORD_KEYS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime"}


def configure_logging(level: str = "INFO", log_dir: Optional[Path] = None) -> None:
    """
    Install console and optional rotating-file handlers on the root logger.

    Safe to call more than once; handlers installed by an earlier call are
    replaced.

    Args:
        level: Root log level name
        log_dir: Directory for catalog.log (console only when None)
    """
    log_formatter = logging.Formatter(LOG_FORMAT)
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in list(root_logger.handlers):
        if getattr(handler, '_catalog_handler', False):
            root_logger.removeHandler(handler)
            handler.close()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)
    console_handler._catalog_handler = True
    root_logger.addHandler(console_handler)

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        # 10MB per file, keep 5 backups
        file_handler = RotatingFileHandler(
            log_dir / "catalog.log",
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setFormatter(log_formatter)
        file_handler._catalog_handler = True
        root_logger.addHandler(file_handler)

    logging.getLogger(__name__).info(
        f"Logging initialized (level={level}, file={log_dir / 'catalog.log' if log_dir else 'none'})"
    )


class StructuredLogger:
    """
    Wrapper around standard logger that adds structured context.

    Usage:
        logger = StructuredLogger(__name__)
        logger.info("Product deleted", extra={"product_id": product.id})
    """

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def _add_context(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Merge the ContextVar context with per-call extras.

        Keys that collide with LogRecord attributes are stored as ctx_<key>.
        """
        context = _logging_context.get().copy()
        if extra:
            context.update(extra)
        return {
            (f"ctx_{key}" if key in _RESERVED_RECORD_KEYS else key): value
            for key, value in context.items()
        }

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.logger.debug(message, extra=self._add_context(extra))

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.logger.info(message, extra=self._add_context(extra))

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.logger.warning(message, extra=self._add_context(extra))

    def error(self, message: str, extra: Optional[Dict[str, Any]] = None, exc_info: bool = False):
        self.logger.error(message, extra=self._add_context(extra), exc_info=exc_info)


def set_logging_context(**kwargs):
    """
    Set logging context for the current request/operation.

    This context will be automatically included in all StructuredLogger
    messages within the current context (typically a request).

    Example:
        set_logging_context(request_id="abc-123", user_id=42)
    """
    context = _logging_context.get().copy()
    context.update(kwargs)
    _logging_context.set(context)


def clear_logging_context():
    """Clear the logging context."""
    _logging_context.set({})


def get_logging_context() -> Dict[str, Any]:
    return _logging_context.get().copy()


def _extract_ids(func, args, kwargs) -> Dict[str, Any]:
    try:
        bound = inspect.signature(func).bind_partial(*args, **kwargs)
    except TypeError:
        bound = None
    arguments = bound.arguments if bound else kwargs
    return {key: arguments[key] for key in CONTEXT_ID_KEYS if key in arguments}


def log_operation(operation_name: str):
    """
    Decorator to log operation start/end with structured context.

    Identifier arguments named in CONTEXT_ID_KEYS are copied into the log
    context whether passed positionally or by keyword. Failures are logged
    and re-raised.

    Example:
        @log_operation("delete_product")
        def delete_product(self, product_id: int):
            ...
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            logger = StructuredLogger(func.__module__)
            context = {"operation": operation_name}
            context.update(_extract_ids(func, args, kwargs))

            logger.debug(f"Starting {operation_name}", extra=context)
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                context["error"] = str(e)
                context["error_type"] = type(e).__name__
                logger.warning(f"Failed {operation_name}: {e}", extra=context)
                raise
            logger.debug(f"Completed {operation_name}", extra=context)
            return result

        return wrapper

    return decorator
