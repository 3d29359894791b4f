"""식재료 서비스 및 라우트 테스트"""

from datetime import date, timedelta

import pytest

from cooking_assistant.services import ingredient_service

TODAY = date(2025, 11, 20)


class TestCategorize:
    """이름 기반 자동 분류"""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("대파 한 단", "채소"),
            ("냉동 새우", "해산물"),
            ("우유", "유제품"),
            ("스파게티 면", "곡물"),
            ("파스타", "곡물"),
            ("파인애플", "과일"),
            ("김치", "가공식품"),
            ("고추장", "양념"),
            ("닭가슴살", "육류"),
            ("초콜릿", "기타"),
            ("", "기타"),
        ],
    )
    def test_categorize_ingredient(self, name, expected):
        assert ingredient_service.categorize_ingredient(name) == expected


class TestExpiry:
    def test_expiry_status_levels(self):
        def status(days):
            return ingredient_service.expiry_status((TODAY + timedelta(days=days)).isoformat(), TODAY)

        assert status(-1)["level"] == "expired"
        assert status(0) == {"label": "오늘 만료", "level": "today", "daysLeft": 0}
        assert status(2) == {"label": "2일 남음", "level": "urgent", "daysLeft": 2}
        assert status(5)["level"] == "warning"
        assert status(10)["level"] == "ok"

    def test_expiry_status_without_date(self):
        assert ingredient_service.expiry_status(None, TODAY) is None

    def test_expiry_accepts_timestamps(self):
        assert ingredient_service.days_until_expiry("2025-11-22T00:00:00.000Z", TODAY) == 2

    def test_is_expiring_soon(self):
        def item(days):
            return {"expiryDate": (TODAY + timedelta(days=days)).isoformat()}

        assert ingredient_service.is_expiring_soon(item(0), TODAY)
        assert ingredient_service.is_expiring_soon(item(3), TODAY)
        assert not ingredient_service.is_expiring_soon(item(4), TODAY)
        assert not ingredient_service.is_expiring_soon(item(-1), TODAY)
        assert not ingredient_service.is_expiring_soon({}, TODAY)

    def test_sort_by_expiry_puts_undated_last(self):
        items = [
            {"name": "소금"},
            {"name": "우유", "expiryDate": "2025-11-25"},
            {"name": "두부", "expiryDate": "2025-11-21"},
        ]

        names = [i["name"] for i in ingredient_service.sort_by_expiry(items)]

        assert names == ["두부", "우유", "소금"]

    def test_summarize_by_location(self):
        items = [
            {"name": "우유", "location": "냉장실", "expiryDate": "2025-11-21"},
            {"name": "두부", "location": "냉장실", "expiryDate": "2025-12-30"},
            {"name": "만두", "location": "냉동실"},
        ]

        summary = ingredient_service.summarize_by_location(items, TODAY)

        assert summary["total"] == 3
        assert summary["expiringCount"] == 1
        by_location = {loc["location"]: loc for loc in summary["locations"]}
        assert by_location["냉장실"] == {"location": "냉장실", "count": 2, "expiringCount": 1}
        assert by_location["냉동실"]["count"] == 1
        assert by_location["실온"]["count"] == 0


def _add(client, headers, **data):
    response = client.post("/api/ingredients", headers=headers, json=data)
    assert response.status_code == 200, response.text
    return response.json()["ingredient"]


def test_add_ingredient(client, auth_headers, logged_in):
    ingredient = _add(
        client, auth_headers, name="양파", quantity=2, unit="개", location="냉장실", expiryDate="2099-01-01"
    )

    assert ingredient["id"]
    assert ingredient["userId"] == logged_in["user"]["id"]
    assert ingredient["category"] == "채소"
    assert ingredient["createdAt"]

    listed = client.get("/api/ingredients", headers=auth_headers).json()["ingredients"]
    assert [i["id"] for i in listed] == [ingredient["id"]]
    assert listed[0]["expiryStatus"]["level"] == "ok"


def test_add_ingredient_keeps_explicit_category(client, auth_headers):
    ingredient = _add(client, auth_headers, name="양파", category="기타")

    assert ingredient["category"] == "기타"


def test_add_ingredient_ignores_client_id(client, auth_headers, logged_in):
    """요청 본문의 id/userId는 무시하고 서버에서 부여"""
    first = _add(client, auth_headers, name="양파", id="dup", userId="someone-else")
    second = _add(client, auth_headers, name="양파", id="dup")

    assert first["id"] != "dup"
    assert second["id"] != "dup"
    assert first["id"] != second["id"]
    assert first["userId"] == logged_in["user"]["id"]

    listed = client.get("/api/ingredients", headers=auth_headers).json()["ingredients"]
    assert sorted(i["id"] for i in listed) == sorted([first["id"], second["id"]])

    assert client.delete(f"/api/ingredients/{first['id']}", headers=auth_headers).status_code == 200
    remaining = client.get("/api/ingredients", headers=auth_headers).json()["ingredients"]
    assert [i["id"] for i in remaining] == [second["id"]]


def test_add_ingredient_validation(client, auth_headers):
    missing_name = client.post("/api/ingredients", headers=auth_headers, json={"quantity": 1})
    bad_location = client.post("/api/ingredients", headers=auth_headers, json={"name": "우유", "location": "창고"})

    assert missing_name.status_code == 400
    assert bad_location.status_code == 400


def test_list_filters_by_location(client, auth_headers):
    _add(client, auth_headers, name="우유", location="냉장실")
    _add(client, auth_headers, name="만두", location="냉동실")

    response = client.get("/api/ingredients", headers=auth_headers, params={"location": "냉동실"})

    assert [i["name"] for i in response.json()["ingredients"]] == ["만두"]


def test_update_ingredient(client, auth_headers):
    ingredient = _add(client, auth_headers, name="우유", quantity=1)

    response = client.put(
        f"/api/ingredients/{ingredient['id']}",
        headers=auth_headers,
        json={"quantity": 3, "id": "hijack", "userId": "other"},
    )

    assert response.status_code == 200
    updated = response.json()["ingredient"]
    assert updated["id"] == ingredient["id"]
    assert updated["userId"] == ingredient["userId"]
    assert updated["quantity"] == 3
    assert updated["name"] == "우유"
    assert "updatedAt" in updated


def test_update_missing_ingredient(client, auth_headers):
    response = client.put("/api/ingredients/nope", headers=auth_headers, json={"quantity": 1})

    assert response.status_code == 404
    assert response.json() == {"error": "Ingredient not found"}


def test_delete_ingredient(client, auth_headers):
    first = _add(client, auth_headers, name="우유")
    second = _add(client, auth_headers, name="두부")

    response = client.delete(f"/api/ingredients/{first['id']}", headers=auth_headers)
    assert response.status_code == 200

    listed = client.get("/api/ingredients", headers=auth_headers).json()["ingredients"]
    assert [i["id"] for i in listed] == [second["id"]]
    assert client.delete(f"/api/ingredients/{first['id']}", headers=auth_headers).status_code == 404


def test_ingredients_are_per_user(client, auth_headers, register):
    _add(client, auth_headers, name="우유")
    other = register(email="other@example.com", name="다른 사람")
    other_headers = {"Authorization": f"Bearer {other['accessToken']}"}

    assert client.get("/api/ingredients", headers=other_headers).json()["ingredients"] == []


def test_ingredient_summary(client, auth_headers):
    soon = (date.today() + timedelta(days=1)).isoformat()
    _add(client, auth_headers, name="우유", location="냉장실", expiryDate=soon)
    _add(client, auth_headers, name="만두", location="냉동실")

    response = client.get("/api/ingredients/summary", headers=auth_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 2
    assert data["expiringCount"] == 1
