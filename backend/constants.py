"""
Application-wide constants.

This module centralizes the enums and magic numbers shared by the
repository, service and API layers.
"""
from enum import Enum


class Direction(str, Enum):
    """Sort direction for a single ordered property."""

    ASC = 'ASC'
    DESC = 'DESC'


class StringMatcher(str, Enum):
    """
    How text fields of a query-by-example probe are compared.

    - EXACT: column equals the probe value
    - CONTAINING: column contains the probe value
    - STARTING: column starts with the probe value
    - ENDING: column ends with the probe value
    """

    EXACT = 'EXACT'
    CONTAINING = 'CONTAINING'
    STARTING = 'STARTING'
    ENDING = 'ENDING'


class ServerConfig:
    """Server configuration constants"""

    HOST = "127.0.0.1"
    PORT = 8080

    @classmethod
    def url(cls) -> str:
        """Get the full server URL"""
        return f"http://{cls.HOST}:{cls.PORT}"


class ProductDefaults:
    """Defaults for the query-by-example product search"""

    PROBE_NAME = "product"
    IGNORED_PATHS = ("id", "description")


class HTTPStatus:
    """HTTP status codes used throughout the application"""

    # Success
    NO_CONTENT = 204

    # Client Errors
    BAD_REQUEST = 400
    NOT_FOUND = 404

    # Server Errors
    INTERNAL_SERVER_ERROR = 500
