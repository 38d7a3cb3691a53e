"""
gighub/database/init_db.py

Initializes the database by creating all tables defined in the SQLAlchemy models.
Run with `python -m gighub.database.init_db`.
"""

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from gighub.database.base import Base
from gighub.database import models  # noqa: F401  (registers every mapper on Base.metadata)
from gighub.database.session import engine as default_engine

logger = logging.getLogger(__name__)


async def init_db(engine: AsyncEngine = default_engine) -> None:
    """
    Creates all database tables based on SQLAlchemy models.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("[DB] Tables created")


if __name__ == "__main__":
    asyncio.run(init_db())
