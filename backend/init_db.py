from database import engine, Base
from sqlalchemy import inspect
import models  # noqa: F401  registers the tables on Base.metadata
import logging

logger = logging.getLogger(__name__)


def init_database(bind=None):
    """
    Create any missing tables.

    Args:
        bind: Engine or connection to use (default: the application engine)
    """
    target = bind if bind is not None else engine
    existing = set(inspect(target).get_table_names())

    Base.metadata.create_all(bind=target)

    created = sorted(set(Base.metadata.tables) - existing)
    if created:
        logger.info(f"✅ Created tables: {', '.join(created)}")
    else:
        logger.info("Database schema up to date")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_database()
