"""
Logbook repository for database operations.
"""

from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from manager_logbook.db.repositories.base_repository import BaseRepository
from manager_logbook.models.business_unit import BusinessUnit
from manager_logbook.models.logbook import Logbook


class LogbookRepository(BaseRepository[Logbook]):
    """Repository for logbook operations."""
    
    def __init__(self, session: AsyncSession):
        super().__init__(Logbook, session)
    
    async def list_by_business_unit(self, business_unit_id: int) -> List[Logbook]:
        """List logbooks of a business unit with notes and the unit's town loaded."""
        result = await self.session.execute(
            select(Logbook)
            .options(
                selectinload(Logbook.notes),
                selectinload(Logbook.business_unit).selectinload(BusinessUnit.town),
            )
            .where(Logbook.business_unit_id == business_unit_id)
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all())
