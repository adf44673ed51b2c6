"""
Business unit API endpoints.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from manager_logbook.db.session import get_db
from manager_logbook.deps.di_container import get_container
from manager_logbook.schemas.business_unit import (
    BusinessUnitCreate,
    BusinessUnitUpdate,
    BusinessUnitResponse,
    BusinessUnitListResponse,
)
from manager_logbook.schemas.logbook import LogbookListResponse

router = APIRouter()


@router.post("", response_model=BusinessUnitResponse, status_code=status.HTTP_201_CREATED)
async def create_business_unit(
    data: BusinessUnitCreate,
    db: AsyncSession = Depends(get_db),
) -> BusinessUnitResponse:
    """Create a new business unit."""
    controller = get_container().business_unit_controller(session=db)
    return await controller.create_business_unit(data)


@router.get("", response_model=BusinessUnitListResponse)
async def list_business_units(
    db: AsyncSession = Depends(get_db),
) -> BusinessUnitListResponse:
    """List all business units, newest first."""
    controller = get_container().business_unit_controller(session=db)
    return await controller.list_business_units()


@router.get("/search", response_model=BusinessUnitListResponse)
async def search_business_units(
    category_id: int = Query(...),
    town_id: int = Query(...),
    search: Optional[str] = Query(None, max_length=50),
    db: AsyncSession = Depends(get_db),
) -> BusinessUnitListResponse:
    """Search business units by name fragment within a category and town."""
    controller = get_container().business_unit_controller(session=db)
    return await controller.search_business_units(search, category_id, town_id)


@router.get("/{business_unit_id}", response_model=BusinessUnitResponse)
async def get_business_unit(
    business_unit_id: int,
    db: AsyncSession = Depends(get_db),
) -> BusinessUnitResponse:
    """Get business unit by ID."""
    controller = get_container().business_unit_controller(session=db)
    return await controller.get_business_unit(business_unit_id)


@router.put("/{business_unit_id}", response_model=BusinessUnitResponse)
async def update_business_unit(
    business_unit_id: int,
    data: BusinessUnitUpdate,
    db: AsyncSession = Depends(get_db),
) -> BusinessUnitResponse:
    """Update the supplied fields of a business unit."""
    controller = get_container().business_unit_controller(session=db)
    return await controller.update_business_unit(business_unit_id, data)


@router.get("/{business_unit_id}/logbooks", response_model=LogbookListResponse)
async def list_business_unit_logbooks(
    business_unit_id: int,
    db: AsyncSession = Depends(get_db),
) -> LogbookListResponse:
    """List logbooks of a business unit."""
    controller = get_container().business_unit_controller(session=db)
    return await controller.list_logbooks(business_unit_id)


@router.put("/{business_unit_id}/category/{category_id}", response_model=BusinessUnitResponse)
async def assign_business_unit_category(
    business_unit_id: int,
    category_id: int,
    db: AsyncSession = Depends(get_db),
) -> BusinessUnitResponse:
    """Move a business unit to another category."""
    controller = get_container().business_unit_controller(session=db)
    return await controller.assign_category(business_unit_id, category_id)


@router.put("/{business_unit_id}/moderators/{user_id}", response_model=BusinessUnitResponse)
async def assign_business_unit_moderator(
    business_unit_id: int,
    user_id: str,
    db: AsyncSession = Depends(get_db),
) -> BusinessUnitResponse:
    """Make a user moderator of a business unit."""
    controller = get_container().business_unit_controller(session=db)
    return await controller.assign_moderator(business_unit_id, user_id)
