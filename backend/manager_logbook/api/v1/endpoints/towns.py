"""
Town API endpoints.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from manager_logbook.db.session import get_db
from manager_logbook.deps.di_container import get_container
from manager_logbook.schemas.town import TownListResponse

router = APIRouter()


@router.get("", response_model=TownListResponse)
async def list_towns(
    db: AsyncSession = Depends(get_db),
) -> TownListResponse:
    """List all towns, reverse alphabetical."""
    controller = get_container().business_unit_controller(session=db)
    return await controller.list_towns()
