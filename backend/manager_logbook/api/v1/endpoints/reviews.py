"""
Review API endpoints.
"""

from datetime import date
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from manager_logbook.db.session import get_db
from manager_logbook.deps.di_container import get_container
from manager_logbook.schemas.review import (
    ReviewCreate,
    ReviewUpdate,
    ReviewResponse,
    ReviewListResponse,
)

router = APIRouter()


@router.post("", response_model=ReviewResponse, status_code=status.HTTP_201_CREATED)
async def create_review(
    data: ReviewCreate,
    db: AsyncSession = Depends(get_db),
) -> ReviewResponse:
    """Create a review for a business unit."""
    controller = get_container().review_controller(session=db)
    return await controller.create_review(data)


@router.get("", response_model=ReviewListResponse)
async def list_reviews_by_date(
    created_on: date = Query(..., alias="date"),
    db: AsyncSession = Depends(get_db),
) -> ReviewListResponse:
    """List reviews created on a calendar day."""
    controller = get_container().review_controller(session=db)
    return await controller.list_reviews_by_date(created_on)


@router.get("/business-unit/{business_unit_id}", response_model=ReviewListResponse)
async def list_reviews_by_business_unit(
    business_unit_id: int,
    db: AsyncSession = Depends(get_db),
) -> ReviewListResponse:
    """List visible reviews of a business unit."""
    controller = get_container().review_controller(session=db)
    return await controller.list_reviews_by_business_unit(business_unit_id)


@router.get("/{review_id}", response_model=ReviewResponse)
async def get_review(
    review_id: int,
    db: AsyncSession = Depends(get_db),
) -> ReviewResponse:
    """Get review by ID."""
    controller = get_container().review_controller(session=db)
    return await controller.get_review(review_id)


@router.put("/{review_id}", response_model=ReviewResponse)
async def update_review(
    review_id: int,
    data: ReviewUpdate,
    db: AsyncSession = Depends(get_db),
) -> ReviewResponse:
    """Edit the public text of a review."""
    controller = get_container().review_controller(session=db)
    return await controller.update_review(review_id, data)


@router.put("/{review_id}/hide", response_model=ReviewResponse)
async def hide_review(
    review_id: int,
    db: AsyncSession = Depends(get_db),
) -> ReviewResponse:
    """Hide a review from the public listing."""
    controller = get_container().review_controller(session=db)
    return await controller.hide_review(review_id)
