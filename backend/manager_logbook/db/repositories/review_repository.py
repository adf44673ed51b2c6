"""
Review repository for database operations.
"""

from datetime import datetime
from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from manager_logbook.db.repositories.base_repository import BaseRepository
from manager_logbook.models.review import Review


class ReviewRepository(BaseRepository[Review]):
    """Repository for review operations."""
    
    def __init__(self, session: AsyncSession):
        super().__init__(Review, session)
    
    async def list_visible_by_business_unit(self, business_unit_id: int) -> List[Review]:
        """List visible reviews of a business unit, newest first."""
        result = await self.session.execute(
            select(Review)
            .where(Review.business_unit_id == business_unit_id)
            .where(Review.is_visible.is_(True))
            .order_by(Review.created_on.desc(), Review.id.desc())
        )
        return list(result.scalars().all())
    
    async def list_created_on(self, created_on: datetime) -> List[Review]:
        """List reviews created at exactly the given timestamp."""
        result = await self.session.execute(
            select(Review).where(Review.created_on == created_on)
        )
        return list(result.scalars().all())
    
    async def list_created_between(self, start: datetime, end: datetime) -> List[Review]:
        """List reviews created in the half-open interval [start, end)."""
        result = await self.session.execute(
            select(Review)
            .where(Review.created_on >= start)
            .where(Review.created_on < end)
            .order_by(Review.created_on)
        )
        return list(result.scalars().all())
