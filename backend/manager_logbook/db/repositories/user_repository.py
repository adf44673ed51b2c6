"""
User repository for database operations.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from manager_logbook.db.repositories.base_repository import BaseRepository
from manager_logbook.models.user import User


class UserRepository(BaseRepository[User]):
    """Repository for user operations."""
    
    def __init__(self, session: AsyncSession):
        super().__init__(User, session)
