"""완료 레시피 테스트"""

from datetime import timedelta

import pytest

from cooking_assistant.services import completed_recipe_service
from cooking_assistant.utils.timestamps import utc_now

RECIPE = {"id": "9", "name": "계란볶음밥"}


def test_record_completion(client, auth_headers):
    response = client.post("/api/completed-recipes", headers=auth_headers, json=RECIPE)

    assert response.status_code == 200
    data = response.json()
    assert data["alreadyCompleted"] is False
    assert data["recipe"]["id"] == "9"
    assert "completedAt" in data["recipe"]


def test_same_recipe_same_day_recorded_once(client, auth_headers):
    client.post("/api/completed-recipes", headers=auth_headers, json=RECIPE)
    second = client.post("/api/completed-recipes", headers=auth_headers, json=RECIPE)

    assert second.json()["alreadyCompleted"] is True
    listed = client.get("/api/completed-recipes", headers=auth_headers).json()["recipes"]
    assert len(listed) == 1


def test_completed_list_is_newest_first(client, auth_headers):
    client.post("/api/completed-recipes", headers=auth_headers, json=RECIPE)
    client.post("/api/completed-recipes", headers=auth_headers, json={"id": "10", "name": "라면 업그레이드"})

    listed = client.get("/api/completed-recipes", headers=auth_headers).json()["recipes"]

    assert [r["id"] for r in listed] == ["10", "9"]


def test_completed_today_ignores_older_records():
    yesterday = (utc_now() - timedelta(days=1)).isoformat()
    records = [{"id": "9", "completedAt": yesterday}]

    assert completed_recipe_service.completed_today(records, "9") is None
    assert completed_recipe_service.completed_today(
        [{"id": "9", "completedAt": utc_now().isoformat()}], "9"
    ) is not None


@pytest.mark.asyncio
async def test_record_completion_requires_id(session_factory):
    async with session_factory() as session:
        with pytest.raises(ValueError):
            await completed_recipe_service.record_completion(session, "u1", {"name": "이름만"})
