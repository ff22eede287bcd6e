"""Database infrastructure for the SQL ledger backend.

This module creates and reuses SQLAlchemy engines for the ledger database.
SQLite URLs keep SQLAlchemy's default pool; server databases get a small
pre-pinged queue pool.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort


def _get_env_var(name: str) -> str:
    """Read an environment variable or raise a descriptive error.

    Args:
        name: Name of the environment variable to read.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the environment variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine instance.
    """
    if db_url.startswith("sqlite"):
        return create_engine(db_url, future=True)
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_ledger_engines: dict[str, Engine] = {}


def get_ledger_engine(db_url: Optional[str] = None) -> Engine:
    """Get a cached SQLAlchemy engine for the ledger database.

    Args:
        db_url: Database URL; ``LEDGER_DB_URL`` is read when omitted.

    Returns:
        Engine: Lazily initialized engine, one per URL.
    """
    url = db_url or _get_env_var("LEDGER_DB_URL")
    engine = _ledger_engines.get(url)
    if engine is None:
        engine = _create_engine(url)
        _ledger_engines[url] = engine
    return engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by SQLAlchemy engines."""

    def __init__(self, db_url: Optional[str] = None) -> None:
        self._db_url = db_url

    def get_ledger_engine(self) -> Engine:
        """Get the engine for the ledger database.

        Returns:
            Engine: SQLAlchemy engine connected to the ledger tables.
        """
        return get_ledger_engine(self._db_url)


__all__ = ["get_ledger_engine", "SqlAlchemyDatabaseEngineAdapter"]
