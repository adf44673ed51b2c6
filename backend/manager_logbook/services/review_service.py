"""
Review service with business logic.
"""

from datetime import date, datetime, time, timedelta
from typing import List, Union
from sqlalchemy.ext.asyncio import AsyncSession

from manager_logbook.core.constants import ServicesConstants
from manager_logbook.core.exceptions import NotFoundException
from manager_logbook.core.logging import get_logger
from manager_logbook.db.repositories.business_unit_repository import BusinessUnitRepository
from manager_logbook.db.repositories.review_repository import ReviewRepository
from manager_logbook.models.review import Review
from manager_logbook.schemas.review import ReviewResponse
from manager_logbook.services.base_service import BaseService
from manager_logbook.services.business_validator import BaseBusinessValidator
from manager_logbook.services.review_editor import ReviewEditor

logger = get_logger(__name__)


class ReviewService(BaseService):
    """Service for review operations."""

    def __init__(
        self,
        session: AsyncSession,
        business_validator: BaseBusinessValidator,
        review_editor: ReviewEditor,
    ):
        if business_validator is None:
            raise ValueError("business_validator is required")
        if review_editor is None:
            raise ValueError("review_editor is required")
        self.session = session
        self.business_validator = business_validator
        self.review_editor = review_editor
        self.review_repo = ReviewRepository(session)
        self.business_unit_repo = BusinessUnitRepository(session)

    async def create_review(
        self,
        original_description: str,
        business_unit_id: int,
        rating: int,
    ) -> ReviewResponse:
        """Create a review; the public text is the auto-edited original."""
        self.business_validator.is_description_in_range(original_description)
        self.business_validator.is_rating_in_range(rating)

        business_unit = await self.business_unit_repo.get(business_unit_id)
        if not business_unit:
            raise NotFoundException(ServicesConstants.BUSINESS_UNIT_NOT_FOUND)

        review = await self.review_repo.create(
            original_description=original_description,
            edited_description=self.review_editor.auto_edit_review(original_description),
            rating=rating,
            is_visible=True,
            business_unit_id=business_unit_id,
        )
        await self.review_repo.save()

        logger.info(
            "Review created",
            extra={"review_id": review.id, "business_unit_id": business_unit_id},
        )
        return ReviewResponse.model_validate(review)

    async def get_review(self, review_id: int) -> ReviewResponse:
        """Get review by ID."""
        review = await self._get_review_or_raise(review_id)
        return ReviewResponse.model_validate(review)

    async def update_review(self, review_id: int, edited_description: str) -> ReviewResponse:
        """Replace the public text of a review."""
        review = await self._get_review_or_raise(review_id)
        self.business_validator.is_description_in_range(edited_description)

        review.edited_description = edited_description
        await self.review_repo.save()

        return ReviewResponse.model_validate(review)

    async def make_review_invisible(self, review_id: int) -> ReviewResponse:
        """Hide a review from the public listing."""
        review = await self._get_review_or_raise(review_id)

        review.is_visible = False
        await self.review_repo.save()

        logger.info("Review hidden", extra={"review_id": review_id})
        return ReviewResponse.model_validate(review)

    async def get_all_reviews_by_business_unit(self, business_unit_id: int) -> List[ReviewResponse]:
        """List visible reviews of a business unit, newest first."""
        business_unit = await self.business_unit_repo.get(business_unit_id)
        if not business_unit:
            raise NotFoundException(ServicesConstants.BUSINESS_UNIT_NOT_FOUND)

        reviews = await self.review_repo.list_visible_by_business_unit(business_unit_id)
        return [ReviewResponse.model_validate(review) for review in reviews]

    async def get_all_reviews_by_date(self, created_on: Union[date, datetime]) -> List[ReviewResponse]:
        """
        List reviews by creation date.

        A datetime matches reviews created at exactly that moment; a plain
        date matches every review created on that calendar day.
        """
        self.business_validator.is_date_valid(created_on)

        if isinstance(created_on, datetime):
            reviews = await self.review_repo.list_created_on(created_on)
        else:
            start = datetime.combine(created_on, time.min)
            reviews = await self.review_repo.list_created_between(start, start + timedelta(days=1))

        return [ReviewResponse.model_validate(review) for review in reviews]

    async def _get_review_or_raise(self, review_id: int) -> Review:
        review = await self.review_repo.get(review_id)
        if not review:
            raise NotFoundException(ServicesConstants.REVIEW_NOT_FOUND)
        return review
