from contextlib import contextmanager
import logging

from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, sessionmaker, declarative_base

from config.app_config import SQL_ECHO, get_database_url

logger = logging.getLogger(__name__)

DATABASE_URL = get_database_url()

_connect_args = {'check_same_thread': False} if DATABASE_URL.startswith('sqlite') else {}

engine = create_engine(
    DATABASE_URL,
    connect_args=_connect_args,
    echo=SQL_ECHO,
    pool_pre_ping=True,  # Verify connections are alive before using
)


def set_sqlite_pragma(dbapi_conn, connection_record):
    """Enforce referential integrity on SQLite connections"""
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def enable_sqlite_foreign_keys(target_engine) -> None:
    if target_engine.dialect.name == 'sqlite':
        event.listen(target_engine, "connect", set_sqlite_pragma)


enable_sqlite_foreign_keys(engine)

SessionLocal = sessionmaker(bind=engine)
Base = declarative_base()


def get_db():
    """Dependency for FastAPI routes"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transaction(db: Session):
    """
    Unit of work around a block of writes.

    Commits when the block exits normally and rolls back when it raises;
    the exception is re-raised unchanged.

    Example:
        with transaction(db):
            repo.delete_by_id(product_id)
    """
    try:
        yield db
        db.commit()
    except Exception:
        logger.debug("Rolling back transaction", exc_info=True)
        db.rollback()
        raise
