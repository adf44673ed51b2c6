"""
Database initialization and bootstrapping.
Creates tables for local development and seeds the town dictionary.
"""

from typing import List, Optional

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from manager_logbook.core.config import settings
from manager_logbook.core.logging import get_logger
from manager_logbook.db.base import Base
from manager_logbook.models import Town

logger = get_logger(__name__)


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all database tables registered on Base.
    Production databases are expected to be migrated separately.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    
    logger.info("Database tables initialized")


async def seed_initial_data(
    session: AsyncSession,
    towns: Optional[List[str]] = None,
) -> int:
    """
    Insert the default towns when the towns table is empty.
    
    Returns:
        Number of towns inserted
    """
    town_names = settings.DEFAULT_TOWNS if towns is None else towns
    
    existing = await session.execute(select(func.count(Town.id)))
    if (existing.scalar() or 0) > 0:
        logger.info("Town seeding skipped, towns already present")
        return 0
    
    for name in town_names:
        session.add(Town(name=name))
    await session.commit()
    
    logger.info("Towns seeded", extra={"count": len(town_names)})
    return len(town_names)
