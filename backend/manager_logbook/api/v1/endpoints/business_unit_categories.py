"""
Business unit category API endpoints.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from manager_logbook.db.session import get_db
from manager_logbook.deps.di_container import get_container
from manager_logbook.schemas.business_unit import BusinessUnitListResponse
from manager_logbook.schemas.business_unit_category import (
    BusinessUnitCategoryCreate,
    BusinessUnitCategoryUpdate,
    BusinessUnitCategoryResponse,
)

router = APIRouter()


@router.post("", response_model=BusinessUnitCategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    data: BusinessUnitCategoryCreate,
    db: AsyncSession = Depends(get_db),
) -> BusinessUnitCategoryResponse:
    """Create a new category."""
    controller = get_container().business_unit_controller(session=db)
    return await controller.create_category(data)


@router.get("/{category_id}", response_model=BusinessUnitCategoryResponse)
async def get_category(
    category_id: int,
    db: AsyncSession = Depends(get_db),
) -> BusinessUnitCategoryResponse:
    """Get category by ID."""
    controller = get_container().business_unit_controller(session=db)
    return await controller.get_category(category_id)


@router.put("/{category_id}", response_model=BusinessUnitCategoryResponse)
async def update_category(
    category_id: int,
    data: BusinessUnitCategoryUpdate,
    db: AsyncSession = Depends(get_db),
) -> BusinessUnitCategoryResponse:
    """Rename a category."""
    controller = get_container().business_unit_controller(session=db)
    return await controller.update_category(category_id, data)


@router.get("/{category_id}/business-units", response_model=BusinessUnitListResponse)
async def list_category_business_units(
    category_id: int,
    db: AsyncSession = Depends(get_db),
) -> BusinessUnitListResponse:
    """List business units of a category."""
    controller = get_container().business_unit_controller(session=db)
    return await controller.list_business_units_by_category(category_id)
