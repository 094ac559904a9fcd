"""
Runtime Configuration

Reads the catalog backend settings from environment variables once at import
time and exposes them as module-level constants.

Variables:
- CATALOG_DATABASE_URL: SQLAlchemy URL (default: SQLite file in the user data dir)
- CATALOG_SQL_ECHO: Echo emitted SQL ('true', '1', 'yes')
- CATALOG_LOG_LEVEL: Root log level (default INFO)
- CATALOG_LOG_DIR: Directory for the rotating log file (console only when unset)
- CATALOG_DEFAULT_PAGE_SIZE / CATALOG_MAX_PAGE_SIZE: Pagination bounds for list endpoints
"""
import os
import logging
from pathlib import Path

from exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DATA_DIR = Path.home() / ".local/share/catalog-backend"


def _get_bool(key: str, default: str = 'false') -> bool:
    return os.environ.get(key, default).lower() in ('true', '1', 'yes')


def _get_int(key: str, default: int) -> int:
    raw = os.environ.get(key)
    if raw is None or raw == '':
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"{key} must be an integer, got {raw!r}", missing_keys=[key])
    if value <= 0:
        raise ConfigurationError(f"{key} must be positive, got {value}", missing_keys=[key])
    return value


def get_database_url() -> str:
    """
    Resolve the database URL.

    Returns:
        CATALOG_DATABASE_URL if set, otherwise a SQLite file under DATA_DIR
    """
    url = os.environ.get('CATALOG_DATABASE_URL')
    if url:
        return url

    DATA_DIR.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{DATA_DIR / 'catalog.db'}"


def get_log_dir() -> Path | None:
    log_dir = os.environ.get('CATALOG_LOG_DIR')
    return Path(log_dir) if log_dir else None


SQL_ECHO = _get_bool('CATALOG_SQL_ECHO')
LOG_LEVEL = os.environ.get('CATALOG_LOG_LEVEL', 'INFO').upper()
DEFAULT_PAGE_SIZE = _get_int('CATALOG_DEFAULT_PAGE_SIZE', 20)
MAX_PAGE_SIZE = _get_int('CATALOG_MAX_PAGE_SIZE', 200)

if DEFAULT_PAGE_SIZE > MAX_PAGE_SIZE:
    logger.warning(
        f"CATALOG_DEFAULT_PAGE_SIZE ({DEFAULT_PAGE_SIZE}) exceeds "
        f"CATALOG_MAX_PAGE_SIZE ({MAX_PAGE_SIZE}); clamping"
    )
    DEFAULT_PAGE_SIZE = MAX_PAGE_SIZE
