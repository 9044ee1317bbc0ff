"""Database reachability checks used by the health endpoint."""

from abc import ABC, abstractmethod

import logfire
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine


class DatabaseHealthCheck(ABC):
    """Reports whether the backing store answers queries."""

    @abstractmethod
    async def is_healthy(self) -> bool:
        pass


class PostgresHealthCheck(DatabaseHealthCheck):
    """Runs ``SELECT 1`` on a fresh connection."""

    def __init__(self, engine: AsyncEngine) -> None:
        self.engine = engine

    async def is_healthy(self) -> bool:
        try:
            async with self.engine.connect() as connection:
                await connection.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError) as e:
            logfire.error("Database health check failed", error=str(e))
            return False
        return True


class InMemoryHealthCheck(DatabaseHealthCheck):
    """Always healthy; pairs with the in-memory repositories."""

    async def is_healthy(self) -> bool:
        return True
