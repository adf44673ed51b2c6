"""
Base repository class with common data access operations.
Repositories handle database access using async SQLAlchemy sessions.
"""

from typing import Generic, TypeVar, Type, Optional, List, Any
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from manager_logbook.db.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with get, list, create and save."""
    
    def __init__(self, model: Type[ModelType], session: AsyncSession):
        """
        Initialize repository.
        
        Args:
            model: SQLAlchemy model class
            session: Async database session
        """
        self.model = model
        self.session = session
    
    async def create(self, **kwargs) -> ModelType:
        """
        Insert a new record and flush it so the generated key is available.
        
        Args:
            **kwargs: Model attributes
            
        Returns:
            Created model instance
        """
        instance = self.model(**kwargs)
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance
    
    async def get(self, id: Any) -> Optional[ModelType]:
        """
        Get a record by primary key.
        
        Args:
            id: Record ID
            
        Returns:
            Model instance or None
        """
        return await self.session.get(self.model, id)
    
    async def list(self, **filters) -> List[ModelType]:
        """
        List records matching equality filters.
        
        Args:
            **filters: Filter criteria
            
        Returns:
            List of model instances
        """
        query = select(self.model)
        
        for key, value in filters.items():
            if hasattr(self.model, key):
                query = query.where(getattr(self.model, key) == value)
        
        result = await self.session.execute(query)
        return list(result.scalars().all())
    
    async def save(self) -> None:
        """Commit all pending changes of the current unit of work."""
        await self.session.commit()
