"""
Pytest configuration and fixtures.
Provides an in-memory database session, seeded directory data and an API client.
"""

import os

# Set environment variables BEFORE importing the app so Settings picks them up
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

from datetime import datetime
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from manager_logbook.db.base import Base
from manager_logbook.db.session import get_db
from manager_logbook.main import app
from manager_logbook.models import (
    BusinessUnit,
    BusinessUnitCategory,
    Logbook,
    Note,
    Review,
    Town,
    User,
)
from manager_logbook.services.business_validator import BusinessValidator


# Test database URL (in-memory SQLite for testing)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture(scope="function")
async def test_engine():
    """Create an in-memory engine with all tables."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture(scope="function")
def test_session_maker(test_engine):
    return async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture(scope="function")
async def test_db_session(test_session_maker):
    """
    Create a test database session.
    Uses in-memory SQLite for fast tests.
    """
    async with test_session_maker() as session:
        yield session


@pytest.fixture
def mock_validator():
    """Validator double that accepts everything and records calls."""
    return MagicMock(spec=BusinessValidator)


@pytest.fixture
async def seeded(test_session_maker):
    """
    Seed towns, categories, business units, users, logbooks and reviews.

    Seeding uses its own session so tests start with an empty identity map.
    """
    async with test_session_maker() as session:
        sofia = Town(name="Sofia")
        varna = Town(name="Varna")
        plovdiv = Town(name="Plovdiv")
        hotels = BusinessUnitCategory(name="Hotels")
        bars = BusinessUnitCategory(name="Bars")
        session.add_all([sofia, varna, plovdiv, hotels, bars])
        await session.flush()

        grand = BusinessUnit(
            name="Grand Hotel",
            address="1 Vitosha Blvd",
            phone_number="+359 888 123 456",
            email="grand@example.com",
            information="Five star hotel in the centre",
            business_unit_category_id=hotels.id,
            town_id=sofia.id,
        )
        seaside = BusinessUnit(
            name="Seaside Hotel",
            address="5 Primorski Park",
            phone_number="+359 888 654 321",
            email="seaside@example.com",
            information="Hotel by the sea",
            business_unit_category_id=hotels.id,
            town_id=varna.id,
        )
        jazz = BusinessUnit(
            name="Jazz Bar",
            address="12 Rakovski Str",
            phone_number="02 987 6543",
            email="jazz@example.com",
            information="Live music every night",
            business_unit_category_id=bars.id,
            town_id=sofia.id,
        )
        session.add_all([grand, seaside, jazz])
        await session.flush()

        moderator = User(id="moderator-1", user_name="moderator", email="moderator@example.com")
        reception = Logbook(name="Reception", business_unit_id=grand.id)
        kitchen = Logbook(name="Kitchen", business_unit_id=grand.id)
        bar_log = Logbook(name="Bar", business_unit_id=jazz.id)
        session.add_all([moderator, reception, kitchen, bar_log])
        await session.flush()

        session.add_all([
            Note(description="Guest in 204 asked for late checkout", logbook_id=reception.id),
            Note(description="Fridge temperature checked", logbook_id=kitchen.id),
        ])

        review_day = datetime(2024, 3, 15, 10, 30)
        session.add_all([
            Review(
                original_description="Great stay",
                edited_description="Great stay",
                rating=5,
                created_on=review_day,
                business_unit_id=grand.id,
            ),
            Review(
                original_description="Lovely breakfast",
                edited_description="Lovely breakfast",
                rating=4,
                created_on=review_day,
                business_unit_id=grand.id,
            ),
            Review(
                original_description="Noisy at night",
                edited_description="Noisy at night",
                rating=2,
                created_on=datetime(2024, 3, 15, 22, 0),
                business_unit_id=jazz.id,
            ),
            Review(
                original_description="Hidden review",
                edited_description="Hidden review",
                rating=1,
                created_on=datetime(2024, 2, 1, 9, 0),
                is_visible=False,
                business_unit_id=grand.id,
            ),
        ])
        await session.commit()

        return SimpleNamespace(
            sofia=sofia,
            varna=varna,
            plovdiv=plovdiv,
            hotels=hotels,
            bars=bars,
            grand=grand,
            seaside=seaside,
            jazz=jazz,
            moderator=moderator,
            reception=reception,
            kitchen=kitchen,
            review_day=review_day,
        )


@pytest.fixture(scope="function")
async def test_client(test_session_maker):
    """
    Create a test HTTP client whose requests use the in-memory database.
    """
    async def override_get_db():
        async with test_session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
