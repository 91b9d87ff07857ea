"""Database infrastructure for FinSight.

This module exposes concrete helpers to create and reuse the SQLAlchemy
engine connected to the FinSight data store. It belongs to the
infrastructure layer because it deals with an external system (PostgreSQL).
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from finsight.application.ports.database import DatabaseEnginePort

DB_URL_VARIABLE = "FINSIGHT_DB_URL"


def _get_env_var(name: str) -> str:
    """Read an environment variable or raise a descriptive error.

    Values from a local ``.env`` file are loaded first.

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
        Engine: A SQLAlchemy engine instance with a small connection pool and
        health checks enabled.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_engine: Optional[Engine] = None


def get_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the FinSight database.

    Returns:
        Engine: Lazily initialized engine connected to the data store.
    """
    global _engine
    if _engine is None:
        _engine = _create_engine(_get_env_var(DB_URL_VARIABLE))
    return _engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    The adapter hides configuration details (environment variables, pooling)
    behind the port so use cases and repositories depend only on the
    protocol.
    """

    def get_engine(self) -> Engine:
        """Get the engine for the FinSight database.

        Returns:
            Engine: SQLAlchemy engine connected to the data store.
        """
        return get_engine()


__all__ = [
    "get_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
