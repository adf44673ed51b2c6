"""
API v1 router that aggregates all endpoint routers.
"""

from fastapi import APIRouter

from manager_logbook.api.v1.endpoints import (
    health,
    business_units,
    business_unit_categories,
    towns,
    reviews,
)

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(
    business_units.router,
    prefix="/business-units",
    tags=["business-units"],
)
api_router.include_router(
    business_unit_categories.router,
    prefix="/business-unit-categories",
    tags=["business-unit-categories"],
)
api_router.include_router(
    towns.router,
    prefix="/towns",
    tags=["towns"],
)
api_router.include_router(
    reviews.router,
    prefix="/reviews",
    tags=["reviews"],
)
