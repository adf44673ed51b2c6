"""
Business unit service with business logic.
Covers business units, their categories, towns, logbooks and moderators.
"""

from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from manager_logbook.core.constants import ServicesConstants
from manager_logbook.core.exceptions import NotFoundException
from manager_logbook.core.logging import get_logger
from manager_logbook.db.repositories.business_unit_repository import BusinessUnitRepository
from manager_logbook.db.repositories.business_unit_category_repository import BusinessUnitCategoryRepository
from manager_logbook.db.repositories.logbook_repository import LogbookRepository
from manager_logbook.db.repositories.town_repository import TownRepository
from manager_logbook.db.repositories.user_repository import UserRepository
from manager_logbook.models.business_unit import BusinessUnit
from manager_logbook.models.business_unit_category import BusinessUnitCategory
from manager_logbook.models.logbook import Logbook
from manager_logbook.schemas.business_unit import BusinessUnitResponse, ModeratorResponse
from manager_logbook.schemas.business_unit_category import BusinessUnitCategoryResponse
from manager_logbook.schemas.logbook import LogbookResponse, NoteResponse
from manager_logbook.schemas.town import TownResponse
from manager_logbook.services.base_service import BaseService
from manager_logbook.services.business_validator import BaseBusinessValidator

logger = get_logger(__name__)


class BusinessUnitService(BaseService):
    """Service for business unit operations."""

    def __init__(self, session: AsyncSession, business_validator: BaseBusinessValidator):
        if business_validator is None:
            raise ValueError("business_validator is required")
        self.session = session
        self.business_validator = business_validator
        self.business_unit_repo = BusinessUnitRepository(session)
        self.category_repo = BusinessUnitCategoryRepository(session)
        self.logbook_repo = LogbookRepository(session)
        self.town_repo = TownRepository(session)
        self.user_repo = UserRepository(session)

    async def create_business_unit(
        self,
        brand_name: str,
        address: str,
        phone_number: str,
        email: str,
        information: str,
        business_unit_category_id: int,
        town_id: int,
    ) -> BusinessUnitResponse:
        """Validate and create a new business unit."""
        self.business_validator.is_name_in_range(brand_name)
        self.business_validator.is_address_in_range(address)
        self.business_validator.is_email_valid(email)
        self.business_validator.is_phone_number_valid(phone_number)
        self.business_validator.is_description_in_range(information)

        business_unit = await self.business_unit_repo.create(
            name=brand_name,
            address=address,
            phone_number=phone_number,
            email=email,
            information=information,
            business_unit_category_id=business_unit_category_id,
            town_id=town_id,
        )
        await self.business_unit_repo.save()

        logger.info("Business unit created", extra={"business_unit_id": business_unit.id})
        return await self._build_business_unit_response(business_unit.id)

    async def get_business_unit(self, business_unit_id: int) -> BusinessUnitResponse:
        """Get business unit by ID."""
        return await self._build_business_unit_response(business_unit_id)

    async def update_business_unit(
        self,
        business_unit_id: int,
        brand_name: Optional[str] = None,
        address: Optional[str] = None,
        phone_number: Optional[str] = None,
        information: Optional[str] = None,
        email: Optional[str] = None,
        picture: Optional[str] = None,
    ) -> BusinessUnitResponse:
        """
        Patch a business unit.

        Only fields passed as non-None are changed. All supplied fields are
        validated before any of them is applied.
        """
        business_unit = await self._get_business_unit_or_raise(business_unit_id)

        checks = (
            ("name", brand_name, self.business_validator.is_name_in_range),
            ("address", address, self.business_validator.is_address_in_range),
            ("phone_number", phone_number, self.business_validator.is_phone_number_valid),
            ("email", email, self.business_validator.is_email_valid),
            ("information", information, self.business_validator.is_description_in_range),
        )
        changes = {}
        for field, value, validate in checks:
            if value is not None:
                validate(value)
                changes[field] = value
        if picture is not None:
            changes["picture"] = picture

        for field, value in changes.items():
            setattr(business_unit, field, value)
        await self.business_unit_repo.save()

        logger.info(
            "Business unit updated",
            extra={"business_unit_id": business_unit_id, "fields": sorted(changes)},
        )
        return await self._build_business_unit_response(business_unit_id)

    async def get_all_logbooks_for_business_unit(self, business_unit_id: int) -> List[LogbookResponse]:
        """List logbooks of a business unit with their notes."""
        await self._get_business_unit_or_raise(business_unit_id)

        logbooks = await self.logbook_repo.list_by_business_unit(business_unit_id)
        return [self._to_logbook_response(logbook) for logbook in logbooks]

    async def create_business_unit_category(self, business_unit_category_name: str) -> BusinessUnitCategoryResponse:
        """Validate and create a new category."""
        self.business_validator.is_name_in_range(business_unit_category_name)

        category = await self.category_repo.create(name=business_unit_category_name)
        await self.category_repo.save()

        logger.info("Business unit category created", extra={"business_unit_category_id": category.id})
        return BusinessUnitCategoryResponse.model_validate(category)

    async def update_business_unit_category(
        self,
        business_unit_category_id: int,
        new_business_unit_category_name: str,
    ) -> BusinessUnitCategoryResponse:
        """Rename a category."""
        self.business_validator.is_name_in_range(new_business_unit_category_name)

        category = await self._get_category_or_raise(business_unit_category_id)
        category.name = new_business_unit_category_name
        await self.category_repo.save()

        return BusinessUnitCategoryResponse.model_validate(category)

    async def add_business_unit_category_to_business_unit(
        self,
        business_unit_category_id: int,
        business_unit_id: int,
    ) -> BusinessUnitResponse:
        """Move a business unit into another category."""
        business_unit = await self._get_business_unit_or_raise(business_unit_id)
        await self._get_category_or_raise(business_unit_category_id)

        business_unit.business_unit_category_id = business_unit_category_id
        await self.business_unit_repo.save()

        return await self._build_business_unit_response(business_unit_id)

    async def get_business_unit_category(self, business_unit_category_id: int) -> BusinessUnitCategoryResponse:
        """Get category by ID."""
        category = await self._get_category_or_raise(business_unit_category_id)
        return BusinessUnitCategoryResponse.model_validate(category)

    async def get_all_business_units_by_category(self, business_unit_category_id: int) -> List[BusinessUnitResponse]:
        """List business units of a category."""
        await self._get_category_or_raise(business_unit_category_id)

        business_units = await self.business_unit_repo.list_by_category(business_unit_category_id)
        return [self._to_response(business_unit) for business_unit in business_units]

    async def get_all_business_units(self) -> List[BusinessUnitResponse]:
        """List all business units, newest first."""
        business_units = await self.business_unit_repo.list_with_relationships()
        return [self._to_response(business_unit) for business_unit in business_units]

    async def get_all_towns(self) -> List[TownResponse]:
        """List all towns in reverse alphabetical order."""
        towns = await self.town_repo.list_by_name_desc()
        return [TownResponse.model_validate(town) for town in towns]

    async def add_moderator_to_business_unit(self, moderator_id: str, business_unit_id: int) -> BusinessUnitResponse:
        """Make a user moderator of a business unit."""
        await self._get_business_unit_or_raise(business_unit_id)

        moderator = await self.user_repo.get(moderator_id)
        if not moderator:
            raise NotFoundException(ServicesConstants.USER_NOT_FOUND)

        moderator.business_unit_id = business_unit_id
        await self.user_repo.save()

        logger.info(
            "Moderator assigned",
            extra={"business_unit_id": business_unit_id, "moderator_id": moderator_id},
        )
        return await self._build_business_unit_response(business_unit_id)

    async def search_business_units(
        self,
        search_criteria: Optional[str],
        business_unit_category_id: int,
        town_id: int,
    ) -> List[BusinessUnitResponse]:
        """Search business units by name fragment, category and town."""
        business_units = await self.business_unit_repo.search(
            search_criteria, business_unit_category_id, town_id
        )
        return [self._to_response(business_unit) for business_unit in business_units]

    async def _get_business_unit_or_raise(self, business_unit_id: int) -> BusinessUnit:
        business_unit = await self.business_unit_repo.get(business_unit_id)
        if not business_unit:
            raise NotFoundException(ServicesConstants.BUSINESS_UNIT_NOT_FOUND)
        return business_unit

    async def _get_category_or_raise(self, business_unit_category_id: int) -> BusinessUnitCategory:
        category = await self.category_repo.get(business_unit_category_id)
        if not category:
            raise NotFoundException(ServicesConstants.BUSINESS_UNIT_CATEGORY_NOT_FOUND)
        return category

    async def _build_business_unit_response(self, business_unit_id: int) -> BusinessUnitResponse:
        """Reload a business unit with relationships and build response."""
        business_unit = await self.business_unit_repo.get_with_relationships(business_unit_id)
        if not business_unit:
            raise NotFoundException(ServicesConstants.BUSINESS_UNIT_NOT_FOUND)
        return self._to_response(business_unit)

    def _to_response(self, business_unit: BusinessUnit) -> BusinessUnitResponse:
        """Convert business unit model to response schema."""
        category = business_unit.business_unit_category
        town = business_unit.town

        return BusinessUnitResponse(
            id=business_unit.id,
            name=business_unit.name,
            address=business_unit.address,
            phone_number=business_unit.phone_number,
            email=business_unit.email,
            information=business_unit.information,
            picture=business_unit.picture,
            business_unit_category_id=business_unit.business_unit_category_id,
            business_unit_category_name=category.name if category else None,
            town_id=business_unit.town_id,
            town_name=town.name if town else None,
            moderators=[ModeratorResponse.model_validate(user) for user in business_unit.moderators],
        )

    def _to_logbook_response(self, logbook: Logbook) -> LogbookResponse:
        """Convert logbook model to response schema."""
        business_unit = logbook.business_unit

        return LogbookResponse(
            id=logbook.id,
            name=logbook.name,
            picture=logbook.picture,
            business_unit_id=logbook.business_unit_id,
            business_unit_name=business_unit.name if business_unit else None,
            town_name=business_unit.town.name if business_unit and business_unit.town else None,
            notes=[NoteResponse.model_validate(note) for note in logbook.notes],
        )
