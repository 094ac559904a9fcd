"""
Custom exception classes for the application.

This module defines domain-specific exceptions that let callers tell an
absent entity apart from bad input. Persistence failures raised by
SQLAlchemy are not wrapped and reach the caller unchanged.
"""


class ApplicationError(Exception):
    """Base exception for all application errors"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(ApplicationError):
    """Raised when there's a configuration issue"""

    def __init__(self, message: str, missing_keys: list[str] | None = None):
        details = {"missing_keys": missing_keys} if missing_keys else {}
        super().__init__(message, details)


class EntityNotFoundError(ApplicationError):
    """Raised when a lookup by identifier finds no row"""

    def __init__(self, entity: str, entity_id, message: str | None = None):
        self.entity = entity
        self.entity_id = entity_id
        details = {"entity": entity, "entity_id": entity_id}
        msg = message or f"{entity} not found with ID: {entity_id}"
        super().__init__(msg, details)


class InvalidArgumentError(ApplicationError):
    """Raised when an identifier or paging parameter violates its precondition"""

    def __init__(self, message: str, argument: str | None = None, value=None):
        self.argument = argument
        self.value = value
        details = {"argument": argument, "value": value} if argument else {}
        super().__init__(message, details)
