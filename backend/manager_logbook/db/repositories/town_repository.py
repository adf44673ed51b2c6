"""
Town repository for database operations.
"""

from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from manager_logbook.db.repositories.base_repository import BaseRepository
from manager_logbook.models.town import Town


class TownRepository(BaseRepository[Town]):
    """Repository for town operations."""
    
    def __init__(self, session: AsyncSession):
        super().__init__(Town, session)
    
    async def list_by_name_desc(self) -> List[Town]:
        """List all towns in reverse alphabetical order."""
        result = await self.session.execute(
            select(Town).order_by(Town.name.desc())
        )
        return list(result.scalars().all())
