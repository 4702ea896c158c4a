"""Database Session Manager — one async engine, request-scoped sessions.

Invariants:
    - A session that exits with an exception is rolled back before it is closed
    - SQLAlchemy failures leave this module as DatabaseError; every other
      exception (EurekaError included) propagates unchanged
    - Stale pooled connections are detected with pool_pre_ping

Design Decisions:
    - Module-level db_manager set by init_db() from the FastAPI lifespan, so
      importing this module never opens a connection
    - expire_on_commit=False: handlers read views after commit without lazy loads
    - SQLite URLs (local runs, tests) skip the QueuePool sizing arguments
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import (
    DBAPIError, IntegrityError, OperationalError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

from eureka.core.errors import DatabaseError
from eureka.db.base import Base

logger = logging.getLogger(__name__)

# Most specific first: IntegrityError and OperationalError subclass DBAPIError
_ERROR_MAP: tuple[tuple[type[SQLAlchemyError], str, str], ...] = (
    (IntegrityError, "Integrity constraint violated", "commit"),
    (OperationalError, "Connection or operational error", "execute"),
    (DBAPIError, "Database driver error", "query"),
    (SQLAlchemyError, "Database operation failed", "unknown"),
)


def to_database_error(exc: SQLAlchemyError) -> DatabaseError:
    """Translate a SQLAlchemy exception into the client-safe DatabaseError."""
    for exc_type, message, operation in _ERROR_MAP:
        if isinstance(exc, exc_type):
            return DatabaseError(message, operation)
    return DatabaseError("Database operation failed", "unknown")


class DatabaseSessionManager:
    """Owns the engine and hands out sessions that clean up after themselves."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        options: dict = {"pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            options |= {
                "pool_size": pool_size,
                "max_overflow": max_overflow,
                "pool_recycle": 3600,
            }
        self.engine = create_async_engine(database_url, **options)
        self._session_factory = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            await session.rollback()
            error = to_database_error(e)
            logger.error(f"{error.message}: {e}", extra={"error_code": error.code})
            raise error from e
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def create_schema(self) -> None:
        """CREATE TABLE for every model missing from the database."""
        import eureka.models  # noqa: F401  (registers tables on Base.metadata)

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema ensured")

    async def health_check(self) -> bool:
        """True when a trivial query round-trips (readiness probe)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False
        return True

    async def close(self) -> None:
        await self.engine.dispose()


db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: one session per request."""
    if db_manager is None:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
