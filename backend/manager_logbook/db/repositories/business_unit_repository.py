"""
Business unit repository for database operations.
"""

from typing import Optional, List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from sqlalchemy.orm import selectinload

from manager_logbook.db.repositories.base_repository import BaseRepository
from manager_logbook.models.business_unit import BusinessUnit


class BusinessUnitRepository(BaseRepository[BusinessUnit]):
    """Repository for business unit operations."""
    
    def __init__(self, session: AsyncSession):
        super().__init__(BusinessUnit, session)
    
    def _with_relationships(self):
        """Select business units with category, town and moderators loaded."""
        return (
            select(BusinessUnit)
            .options(
                selectinload(BusinessUnit.business_unit_category),
                selectinload(BusinessUnit.town),
                selectinload(BusinessUnit.moderators),
            )
            .execution_options(populate_existing=True)
        )
    
    async def get_with_relationships(self, business_unit_id: int) -> Optional[BusinessUnit]:
        """Get business unit with related entities, re-read from the database."""
        result = await self.session.execute(
            self._with_relationships().where(BusinessUnit.id == business_unit_id)
        )
        return result.scalar_one_or_none()
    
    async def list_with_relationships(self) -> List[BusinessUnit]:
        """List all business units, most recently created first."""
        result = await self.session.execute(
            self._with_relationships().order_by(BusinessUnit.id.desc())
        )
        return list(result.scalars().all())
    
    async def list_by_category(self, business_unit_category_id: int) -> List[BusinessUnit]:
        """List business units in a category."""
        result = await self.session.execute(
            self._with_relationships()
            .where(BusinessUnit.business_unit_category_id == business_unit_category_id)
        )
        return list(result.scalars().all())
    
    async def search(
        self,
        search_criteria: Optional[str],
        business_unit_category_id: int,
        town_id: int,
    ) -> List[BusinessUnit]:
        """
        Find business units matching all three filters.
        
        Args:
            search_criteria: Case-insensitive fragment of the name; None matches any name
            business_unit_category_id: Required category
            town_id: Required town
            
        Returns:
            Matching business units with related entities loaded
        """
        query = (
            self._with_relationships()
            .where(BusinessUnit.business_unit_category_id == business_unit_category_id)
            .where(BusinessUnit.town_id == town_id)
        )
        if search_criteria:
            query = query.where(
                func.lower(BusinessUnit.name).contains(search_criteria.lower(), autoescape=True)
            )
        result = await self.session.execute(query)
        return list(result.scalars().all())
