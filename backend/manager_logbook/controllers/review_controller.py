"""
Review controller.
"""

from datetime import date, datetime
from typing import Union
from sqlalchemy.ext.asyncio import AsyncSession

from manager_logbook.controllers.base_controller import BaseController
from manager_logbook.services.business_validator import BaseBusinessValidator
from manager_logbook.services.review_editor import ReviewEditor
from manager_logbook.services.review_service import ReviewService
from manager_logbook.schemas.review import (
    ReviewCreate,
    ReviewUpdate,
    ReviewResponse,
    ReviewListResponse,
)


class ReviewController(BaseController):
    """Controller for review operations."""
    
    def __init__(
        self,
        session: AsyncSession,
        business_validator: BaseBusinessValidator,
        review_editor: ReviewEditor,
    ):
        self.review_service = ReviewService(session, business_validator, review_editor)
    
    async def create_review(self, data: ReviewCreate) -> ReviewResponse:
        """Create a review."""
        return await self.review_service.create_review(
            data.original_description,
            data.business_unit_id,
            data.rating,
        )
    
    async def get_review(self, review_id: int) -> ReviewResponse:
        """Get review by ID."""
        return await self.review_service.get_review(review_id)
    
    async def update_review(self, review_id: int, data: ReviewUpdate) -> ReviewResponse:
        """Edit the public text of a review."""
        return await self.review_service.update_review(review_id, data.edited_description)
    
    async def hide_review(self, review_id: int) -> ReviewResponse:
        """Hide a review."""
        return await self.review_service.make_review_invisible(review_id)
    
    async def list_reviews_by_business_unit(self, business_unit_id: int) -> ReviewListResponse:
        """List visible reviews of a business unit."""
        items = await self.review_service.get_all_reviews_by_business_unit(business_unit_id)
        return ReviewListResponse(items=items, total=len(items))
    
    async def list_reviews_by_date(self, created_on: Union[date, datetime]) -> ReviewListResponse:
        """List reviews created on a date."""
        items = await self.review_service.get_all_reviews_by_date(created_on)
        return ReviewListResponse(items=items, total=len(items))
