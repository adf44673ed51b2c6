"""
Business unit controller.
Unpacks request schemas into the scalar arguments the service expects.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from manager_logbook.controllers.base_controller import BaseController
from manager_logbook.services.business_unit_service import BusinessUnitService
from manager_logbook.services.business_validator import BaseBusinessValidator
from manager_logbook.schemas.business_unit import (
    BusinessUnitCreate,
    BusinessUnitUpdate,
    BusinessUnitResponse,
    BusinessUnitListResponse,
)
from manager_logbook.schemas.business_unit_category import (
    BusinessUnitCategoryCreate,
    BusinessUnitCategoryUpdate,
    BusinessUnitCategoryResponse,
)
from manager_logbook.schemas.logbook import LogbookListResponse
from manager_logbook.schemas.town import TownListResponse


class BusinessUnitController(BaseController):
    """Controller for business unit, category and town operations."""
    
    def __init__(self, session: AsyncSession, business_validator: BaseBusinessValidator):
        self.business_unit_service = BusinessUnitService(session, business_validator)
    
    async def create_business_unit(self, data: BusinessUnitCreate) -> BusinessUnitResponse:
        """Create a new business unit."""
        return await self.business_unit_service.create_business_unit(
            brand_name=data.name,
            address=data.address,
            phone_number=data.phone_number,
            email=data.email,
            information=data.information,
            business_unit_category_id=data.business_unit_category_id,
            town_id=data.town_id,
        )
    
    async def get_business_unit(self, business_unit_id: int) -> BusinessUnitResponse:
        """Get business unit by ID."""
        return await self.business_unit_service.get_business_unit(business_unit_id)
    
    async def update_business_unit(
        self,
        business_unit_id: int,
        data: BusinessUnitUpdate,
    ) -> BusinessUnitResponse:
        """Update a business unit."""
        return await self.business_unit_service.update_business_unit(
            business_unit_id,
            brand_name=data.name,
            address=data.address,
            phone_number=data.phone_number,
            information=data.information,
            email=data.email,
            picture=data.picture,
        )
    
    async def list_business_units(self) -> BusinessUnitListResponse:
        """List all business units."""
        items = await self.business_unit_service.get_all_business_units()
        return BusinessUnitListResponse(items=items, total=len(items))
    
    async def search_business_units(
        self,
        search: Optional[str],
        category_id: int,
        town_id: int,
    ) -> BusinessUnitListResponse:
        """Search business units."""
        items = await self.business_unit_service.search_business_units(search, category_id, town_id)
        return BusinessUnitListResponse(items=items, total=len(items))
    
    async def list_logbooks(self, business_unit_id: int) -> LogbookListResponse:
        """List logbooks of a business unit."""
        items = await self.business_unit_service.get_all_logbooks_for_business_unit(business_unit_id)
        return LogbookListResponse(items=items, total=len(items))
    
    async def assign_category(self, business_unit_id: int, category_id: int) -> BusinessUnitResponse:
        """Move a business unit to a category."""
        return await self.business_unit_service.add_business_unit_category_to_business_unit(
            category_id, business_unit_id
        )
    
    async def assign_moderator(self, business_unit_id: int, user_id: str) -> BusinessUnitResponse:
        """Assign a moderator to a business unit."""
        return await self.business_unit_service.add_moderator_to_business_unit(user_id, business_unit_id)
    
    async def create_category(self, data: BusinessUnitCategoryCreate) -> BusinessUnitCategoryResponse:
        """Create a category."""
        return await self.business_unit_service.create_business_unit_category(data.name)
    
    async def get_category(self, category_id: int) -> BusinessUnitCategoryResponse:
        """Get category by ID."""
        return await self.business_unit_service.get_business_unit_category(category_id)
    
    async def update_category(
        self,
        category_id: int,
        data: BusinessUnitCategoryUpdate,
    ) -> BusinessUnitCategoryResponse:
        """Rename a category."""
        return await self.business_unit_service.update_business_unit_category(category_id, data.name)
    
    async def list_business_units_by_category(self, category_id: int) -> BusinessUnitListResponse:
        """List business units of a category."""
        items = await self.business_unit_service.get_all_business_units_by_category(category_id)
        return BusinessUnitListResponse(items=items, total=len(items))
    
    async def list_towns(self) -> TownListResponse:
        """List all towns."""
        items = await self.business_unit_service.get_all_towns()
        return TownListResponse(items=items, total=len(items))
