"""Database Session Manager - async connection pool with automatic rollback and health checks.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Connection pool uses pool_pre_ping for stale connection detection
    - SQLAlchemy exceptions escaping a session are mapped to DatabaseError (core/errors.py)
    - Integrity violations on commit are mapped to ConstraintViolationError by commit_or_raise()
    - Values the column rejects (DataError) are mapped to InvalidInputError by commit_or_raise()
    - SQLite connections run with foreign keys enforced, matching PostgreSQL

Design Decisions:
    - Singleton db_manager initialized on startup: FastAPI lifespan manages lifecycle
    - expire_on_commit=False: committed rows stay readable without a lazy reload
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import event, text
from sqlalchemy.exc import (
    DataError, IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker,
)

from biztime.core.errors import (
    ConstraintViolationError, DatabaseError, ErrorContext, InvalidInputError,
)

logger = logging.getLogger(__name__)


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """Turn on FK enforcement (and ON DELETE CASCADE) for every SQLite connection."""

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def translate_integrity_error(
    exc: IntegrityError, resource_type: str, resource_id: str,
) -> ConstraintViolationError:
    """Classify a driver integrity error as a foreign-key or uniqueness violation."""
    detail = str(exc.orig).lower()
    context = ErrorContext(resource_type=resource_type, resource_id=resource_id)
    if "foreign key" in detail:
        return ConstraintViolationError(
            f"{resource_type} '{resource_id}' references a resource that does not exist",
            "foreign_key", context,
        )
    if "unique" in detail or "duplicate key" in detail:
        return ConstraintViolationError(
            f"{resource_type} '{resource_id}' already exists",
            "unique", context,
        )
    return ConstraintViolationError(
        f"{resource_type} '{resource_id}' violates a database constraint",
        "other", context,
    )


async def commit_or_raise(
    db: AsyncSession, resource_type: str, resource_id: str,
) -> None:
    """Commit, turning integrity violations into ConstraintViolationError
    and rejected column values into InvalidInputError.
    """
    try:
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        logger.warning(
            f"Integrity error writing {resource_type}: {e.orig}",
            extra={"resource_type": resource_type, "resource_id": resource_id},
        )
        raise translate_integrity_error(e, resource_type, resource_id) from e
    except DataError as e:
        await db.rollback()
        logger.warning(
            f"Rejected value writing {resource_type}: {e.orig}",
            extra={"resource_type": resource_type, "resource_id": resource_id},
        )
        raise InvalidInputError(
            f"{resource_type} '{resource_id}' has a value the database cannot store",
            resource_type.lower(),
            ErrorContext(resource_type=resource_type, resource_id=resource_id),
        ) from e


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self,
        database_url: str,
        pool_size: int = 20,
        max_overflow: int = 10,
        echo: bool = False,
    ):
        if database_url.startswith("sqlite"):
            self.engine = create_async_engine(database_url, echo=echo)
            enable_sqlite_foreign_keys(self.engine)
        else:
            self.engine = create_async_engine(
                database_url,
                echo=echo,
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_pre_ping=True,
                pool_recycle=3600,
            )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            await session.rollback()
            logger.error(f"DB integrity error: {e}")
            raise DatabaseError("Integrity constraint violated", "commit")
        except OperationalError as e:
            await session.rollback()
            logger.error(f"DB operational error: {e}")
            raise DatabaseError("Connection or operational error", "execute")
        except DBAPIError as e:
            await session.rollback()
            logger.error(f"DB driver error: {e}")
            raise DatabaseError("Database driver error", "query")
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"SQLAlchemy error: {e}")
            raise DatabaseError("Database operation failed", "unknown")
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def close_db() -> None:
    global db_manager
    if db_manager:
        await db_manager.dispose()
        db_manager = None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
