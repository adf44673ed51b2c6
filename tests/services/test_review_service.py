"""
Review service tests against an in-memory database.
"""

from datetime import date, datetime

import pytest

from manager_logbook.core.constants import ServicesConstants
from manager_logbook.core.exceptions import BusinessValidatorException, NotFoundException
from manager_logbook.services.business_validator import BusinessValidator
from manager_logbook.services.review_editor import ReviewEditor
from manager_logbook.services.review_service import ReviewService


@pytest.fixture
def review_editor():
    return ReviewEditor(blocked_words=["awful"])


@pytest.fixture
def service(test_db_session, mock_validator, review_editor):
    return ReviewService(test_db_session, mock_validator, review_editor)


def test_requires_collaborators(test_db_session, mock_validator):
    with pytest.raises(ValueError):
        ReviewService(test_db_session, None, ReviewEditor(blocked_words=[]))
    with pytest.raises(ValueError):
        ReviewService(test_db_session, mock_validator, None)


@pytest.mark.asyncio
class TestGetAllReviewsByDate:
    async def test_returns_reviews_created_at_timestamp(self, service, seeded, mock_validator):
        reviews = await service.get_all_reviews_by_date(seeded.review_day)

        assert len(reviews) == 2
        assert all(review.created_on == seeded.review_day for review in reviews)
        mock_validator.is_date_valid.assert_called_once_with(seeded.review_day)

    async def test_plain_date_matches_whole_day(self, service, seeded, mock_validator):
        reviews = await service.get_all_reviews_by_date(date(2024, 3, 15))

        assert len(reviews) == 3
        mock_validator.is_date_valid.assert_called_once_with(date(2024, 3, 15))

    async def test_no_reviews_on_date(self, service, seeded):
        assert await service.get_all_reviews_by_date(datetime(2023, 1, 1, 12, 0)) == []

    async def test_invalid_date_is_rejected(self, test_db_session, seeded, review_editor):
        service = ReviewService(test_db_session, BusinessValidator(), review_editor)

        with pytest.raises(BusinessValidatorException):
            await service.get_all_reviews_by_date(date(1800, 1, 1))


@pytest.mark.asyncio
class TestCreateReview:
    async def test_create_review_auto_edits_text(self, service, seeded, mock_validator):
        review = await service.create_review("Awful   parking, great room", seeded.grand.id, 4)

        assert review.id is not None
        assert review.original_description == "Awful   parking, great room"
        assert review.edited_description == "***** parking, great room"
        assert review.rating == 4
        assert review.is_visible is True
        assert review.created_on is not None
        mock_validator.is_description_in_range.assert_called_once_with("Awful   parking, great room")
        mock_validator.is_rating_in_range.assert_called_once_with(4)

    async def test_create_review_for_missing_unit(self, service, seeded):
        with pytest.raises(NotFoundException) as exc_info:
            await service.create_review("Great stay", 9999, 5)
        assert exc_info.value.message == ServicesConstants.BUSINESS_UNIT_NOT_FOUND

    async def test_invalid_rating_rejected_before_lookup(self, test_db_session, review_editor):
        service = ReviewService(test_db_session, BusinessValidator(), review_editor)

        with pytest.raises(BusinessValidatorException):
            await service.create_review("Great stay", 9999, 9)


@pytest.mark.asyncio
class TestModeration:
    async def test_update_review_text(self, service, seeded):
        created = await service.create_review("Great stay", seeded.seaside.id, 5)

        updated = await service.update_review(created.id, "Great stay, thanks")

        assert updated.edited_description == "Great stay, thanks"
        assert updated.original_description == "Great stay"

    async def test_update_missing_review(self, service, seeded):
        with pytest.raises(NotFoundException) as exc_info:
            await service.update_review(9999, "Anything")
        assert exc_info.value.message == ServicesConstants.REVIEW_NOT_FOUND

    async def test_hidden_review_drops_out_of_unit_listing(self, service, seeded):
        visible = await service.get_all_reviews_by_business_unit(seeded.grand.id)
        assert len(visible) == 2

        hidden = await service.make_review_invisible(visible[0].id)
        assert hidden.is_visible is False

        remaining = await service.get_all_reviews_by_business_unit(seeded.grand.id)
        assert [review.id for review in remaining] == [visible[1].id]

    async def test_get_review(self, service, seeded):
        visible = await service.get_all_reviews_by_business_unit(seeded.jazz.id)

        review = await service.get_review(visible[0].id)

        assert review.original_description == "Noisy at night"

    async def test_get_missing_review(self, service, seeded):
        with pytest.raises(NotFoundException):
            await service.get_review(9999)

    async def test_reviews_for_missing_unit(self, service, seeded):
        with pytest.raises(NotFoundException):
            await service.get_all_reviews_by_business_unit(9999)
