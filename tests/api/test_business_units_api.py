"""
Business unit, category and town endpoint tests.
"""

import pytest


UNIT_PAYLOAD = {
    "name": "Park Inn",
    "address": "3 Park Lane",
    "phone_number": "+359 2 444 555",
    "email": "park@example.com",
    "information": "Business hotel",
}


@pytest.mark.asyncio
class TestBusinessUnitEndpoints:
    async def test_create_and_get(self, test_client, seeded):
        payload = {**UNIT_PAYLOAD, "business_unit_category_id": seeded.hotels.id, "town_id": seeded.plovdiv.id}

        response = await test_client.post("/api/v1/business-units", json=payload)
        assert response.status_code == 201
        created = response.json()
        assert created["town_name"] == "Plovdiv"

        response = await test_client.get(f"/api/v1/business-units/{created['id']}")
        assert response.status_code == 200
        assert response.json() == created

    async def test_create_invalid_email_is_bad_request(self, test_client, seeded):
        payload = {
            **UNIT_PAYLOAD,
            "email": "broken",
            "business_unit_category_id": seeded.hotels.id,
            "town_id": seeded.plovdiv.id,
        }

        response = await test_client.post("/api/v1/business-units", json=payload)

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Email is not valid"

    async def test_missing_unit_is_not_found(self, test_client, seeded):
        response = await test_client.get("/api/v1/business-units/9999")

        assert response.status_code == 404
        assert response.json()["error"]["message"] == "Business unit not found!"

    async def test_list_newest_first(self, test_client, seeded):
        response = await test_client.get("/api/v1/business-units")

        data = response.json()
        assert data["total"] == 3
        ids = [item["id"] for item in data["items"]]
        assert ids == sorted(ids, reverse=True)

    async def test_partial_update(self, test_client, seeded):
        response = await test_client.put(
            f"/api/v1/business-units/{seeded.jazz.id}",
            json={"information": "Live jazz on weekends"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["information"] == "Live jazz on weekends"
        assert data["name"] == "Jazz Bar"

    async def test_search(self, test_client, seeded):
        response = await test_client.get(
            "/api/v1/business-units/search",
            params={"search": "HOTEL", "category_id": seeded.hotels.id, "town_id": seeded.varna.id},
        )

        assert response.status_code == 200
        assert [item["name"] for item in response.json()["items"]] == ["Seaside Hotel"]

    async def test_logbooks(self, test_client, seeded):
        response = await test_client.get(f"/api/v1/business-units/{seeded.jazz.id}/logbooks")

        assert response.status_code == 200
        items = response.json()["items"]
        assert [item["name"] for item in items] == ["Bar"]
        assert items[0]["town_name"] == "Sofia"

    async def test_assign_category_and_moderator(self, test_client, seeded):
        response = await test_client.put(
            f"/api/v1/business-units/{seeded.jazz.id}/category/{seeded.hotels.id}"
        )
        assert response.status_code == 200
        assert response.json()["business_unit_category_name"] == "Hotels"

        response = await test_client.put(
            f"/api/v1/business-units/{seeded.jazz.id}/moderators/{seeded.moderator.id}"
        )
        assert response.status_code == 200
        assert response.json()["moderators"][0]["user_name"] == "moderator"

    async def test_assign_unknown_moderator(self, test_client, seeded):
        response = await test_client.put(f"/api/v1/business-units/{seeded.jazz.id}/moderators/nobody")

        assert response.status_code == 404
        assert response.json()["error"]["message"] == "User not found!"


@pytest.mark.asyncio
class TestCategoryAndTownEndpoints:
    async def test_category_lifecycle(self, test_client, seeded):
        response = await test_client.post("/api/v1/business-unit-categories", json={"name": "Restaurants"})
        assert response.status_code == 201
        category_id = response.json()["id"]

        response = await test_client.put(
            f"/api/v1/business-unit-categories/{category_id}", json={"name": "Bistros"}
        )
        assert response.json()["name"] == "Bistros"

        response = await test_client.get(f"/api/v1/business-unit-categories/{category_id}")
        assert response.json() == {"id": category_id, "name": "Bistros"}

        response = await test_client.get(f"/api/v1/business-unit-categories/{category_id}/business-units")
        assert response.json() == {"items": [], "total": 0}

    async def test_units_of_missing_category(self, test_client, seeded):
        response = await test_client.get("/api/v1/business-unit-categories/9999/business-units")

        assert response.status_code == 404
        assert response.json()["error"]["message"] == "Business unit category not found!"

    async def test_towns(self, test_client, seeded):
        response = await test_client.get("/api/v1/towns")

        assert [town["name"] for town in response.json()["items"]] == ["Varna", "Sofia", "Plovdiv"]


@pytest.mark.asyncio
async def test_duplicate_category_name_is_created(test_client, seeded):
    response = await test_client.post("/api/v1/business-unit-categories", json={"name": "Hotels"})

    assert response.status_code == 201
    assert response.json()["name"] == "Hotels"
    assert response.json()["id"] != seeded.hotels.id
