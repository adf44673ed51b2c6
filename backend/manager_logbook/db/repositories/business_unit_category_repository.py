"""
Business unit category repository for database operations.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from manager_logbook.db.repositories.base_repository import BaseRepository
from manager_logbook.models.business_unit_category import BusinessUnitCategory


class BusinessUnitCategoryRepository(BaseRepository[BusinessUnitCategory]):
    """Repository for business unit category operations."""
    
    def __init__(self, session: AsyncSession):
        super().__init__(BusinessUnitCategory, session)
