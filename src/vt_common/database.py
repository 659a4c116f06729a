from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from config.settings import settings
from src.vt_common.errors import ConcurrencyConflictError


class Base(DeclarativeBase):
    """Shared declarative base for all ORM models across modules."""

    pass


engine: AsyncEngine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    pool_size=10,
    max_overflow=5,
)

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: yields an AsyncSession, auto-closes after request."""
    async with async_session_factory() as session:
        yield session


# SQLSTATE serialization_failure / deadlock_detected
_CONFLICT_SQLSTATES = frozenset({"40001", "40P01"})


def is_conflict_error(exc: BaseException) -> bool:
    """True if a DBAPI error was PostgreSQL aborting a transaction over a lost race."""
    orig = getattr(exc, "orig", None)
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    return sqlstate in _CONFLICT_SQLSTATES


@asynccontextmanager
async def transaction(db: AsyncSession) -> AsyncGenerator[AsyncSession, None]:
    """Commit on success, roll back on any error.

    PostgreSQL serialization failures and deadlocks surface as
    ConcurrencyConflictError so callers can retry the whole operation.
    """
    try:
        yield db
        await db.commit()
    except DBAPIError as exc:
        await db.rollback()
        if is_conflict_error(exc):
            raise ConcurrencyConflictError() from exc
        raise
    except Exception:
        await db.rollback()
        raise
