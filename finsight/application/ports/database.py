"""Database port for the FinSight data store.

This module defines the application-layer protocol for accessing the
database engine. Infrastructure implementations provide concrete adapters
that satisfy it.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine of the FinSight data store."""

    def get_engine(self) -> Engine:
        """Get the engine for the FinSight database.

        Returns:
            Engine: SQLAlchemy engine connected to the data store.
        """


__all__ = ["DatabaseEnginePort"]
