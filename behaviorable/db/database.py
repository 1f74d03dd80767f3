"""
Database engine and session management.

Builds the SQLAlchemy engine from environment configuration with a test
fallback (SQLite in-memory) and exposes FastAPI dependencies.
"""
import os
import sys

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

IN_MEMORY_SQLITE_URL = "sqlite+pysqlite:///:memory:"


def _is_pytest_runtime() -> bool:
    """Best-effort detection that we're executing under pytest.

    ``PYTEST_CURRENT_TEST`` is only set while a test runs, so module import
    during collection is detected through ``sys.modules`` instead. Setting
    ``PYTEST_RUNNING=1`` forces the test fallback.
    """
    if os.getenv("PYTEST_RUNNING") == "1":
        return True
    if "PYTEST_CURRENT_TEST" in os.environ:
        return True
    return "pytest" in sys.modules


def _get_database_url() -> str:
    for name in ("BEHAVIORABLE_DATABASE_URL", "DATABASE_URL"):
        value = os.getenv(name)
        if value:
            return value
    if _is_pytest_runtime():
        return IN_MEMORY_SQLITE_URL
    raise ValueError(
        "Missing required database environment variable: "
        "set BEHAVIORABLE_DATABASE_URL or DATABASE_URL"
    )


def _engine_kwargs(url: str) -> dict:
    if not url.startswith("sqlite"):
        return {}
    kwargs = {"connect_args": {"check_same_thread": False}}
    if ":memory:" in url:
        # StaticPool keeps the single in-memory database alive across sessions
        kwargs["poolclass"] = StaticPool
    return kwargs


DATABASE_URL = _get_database_url()

engine = create_engine(DATABASE_URL, **_engine_kwargs(DATABASE_URL))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db() -> None:
    """Create every table known to the declarative base."""
    from behaviorable.db import models  # local import to avoid circular import at module load

    models.Base.metadata.create_all(bind=engine)


def get_db():
    """Dependency to get a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
