"""
Database connection management

The configured database is connected and probed at startup only; user data
lives in the in-memory store.
"""

import threading

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine

from ..config import get_database_url, settings
from ..logging import get_logger

logger = get_logger(__name__)

_engine: Engine | None = None
_initialized = False
_init_lock = threading.Lock()


def reset_database() -> None:
    """Dispose of the shared engine (for tests)."""
    global _engine, _initialized
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _initialized = False


def init_database(database_url: str | None = None, force_reinit: bool = False) -> Engine:
    """Initialize the shared SQLAlchemy engine.

    Engine creation is lazy: no connection is opened until the first use.
    """
    global _engine, _initialized

    if _initialized and not force_reinit and database_url is None:
        return _engine  # type: ignore[return-value]

    with _init_lock:
        if _initialized and not force_reinit and database_url is None:
            return _engine  # type: ignore[return-value]

        if _engine is not None:
            _engine.dispose()

        db_url = database_url or get_database_url()

        engine_kwargs = {"echo": settings.sql_echo}
        # SQLite uses its own pool classes without overflow settings
        if not db_url.startswith("sqlite"):
            engine_kwargs["pool_size"] = settings.database_pool_size
            engine_kwargs["max_overflow"] = settings.database_max_overflow
            engine_kwargs["pool_pre_ping"] = True

        _engine = create_engine(db_url, **engine_kwargs)
        _initialized = True
        logger.info("Database initialized", database_url=_engine.url.render_as_string())

        return _engine


def get_engine() -> Engine:
    """Get the shared SQLAlchemy engine."""
    if _engine is None:
        return init_database()
    return _engine


def check_database_connection() -> tuple[bool, str | None]:
    """
    Probe the database and return a helpful error message on failure.

    Returns:
        tuple: (success, error_message)
    """
    if _engine is None:
        return False, "Database engine not initialized"

    try:
        with _engine.connect() as conn:
            conn.execute(text("SELECT 1"))
            return True, None
    except Exception as e:
        error_str = str(e)
        error_type = type(e).__name__

        if "Connection refused" in error_str or "could not connect" in error_str:
            return False, (
                f"Cannot connect to database server: {error_str}\n"
                f"The database server appears to be down or unreachable."
            )
        elif "authentication failed" in error_str:
            return False, (
                f"Database authentication failed: {error_str}\n"
                f"Please check your database credentials."
            )
        return False, f"Database connection error ({error_type}): {error_str}"
