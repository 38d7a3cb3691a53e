"""
gighub/database/session.py

Initializes the SQLAlchemy asynchronous engine and session factory.
Provides an AsyncGenerator for database session dependency injection.
"""

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from gighub.core.config import settings


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """SQLite ignores ON DELETE rules unless foreign keys are switched on per connection."""
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection: Any, connection_record: Any) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# -----------------------------------------------------
# SQLAlchemy Async Engine Initialization
# -----------------------------------------------------
engine = create_async_engine(
    settings.db_url,
    echo=False,
)
enable_sqlite_foreign_keys(engine)

# -----------------------------------------------------
# Session Factory for Async Database Access
# -----------------------------------------------------
AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    autoflush=False,
    expire_on_commit=False,  # ORM objects stay readable after commit for response building
)


# -----------------------------------------------------
# Dependency: Get Async DB Session
# -----------------------------------------------------
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency function for FastAPI endpoints to provide an async DB session.
    Yields a single session per request, rolls back on exceptions, and closes cleanly.
    """
    async with AsyncSessionLocal() as db:
        try:
            yield db
        except Exception:
            await db.rollback()
            raise
