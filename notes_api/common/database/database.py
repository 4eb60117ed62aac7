# notes_api/common/database/database.py

import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from notes_api.common.config import settings
from notes_api.models.models import Base

logger = logging.getLogger(__name__)

engine = create_async_engine(settings.DATABASE_URL, echo=settings.DEBUG, pool_pre_ping=True)

# Sessions are opened per repository call; objects stay usable after commit.
async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

async def connect_to_db() -> None:
    """Create any missing tables."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database ready: %s", engine.url.render_as_string(hide_password=True))

async def close_db_connection() -> None:
    await engine.dispose()
    logger.info("Database connections closed")
