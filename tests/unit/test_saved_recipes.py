"""저장 레시피 라우트 테스트"""

RECIPE = {"id": "1", "name": "김치볶음밥", "category": "한식", "cookingTime": 20}


def test_save_and_list(client, auth_headers):
    response = client.post("/api/saved-recipes", headers=auth_headers, json=RECIPE)

    assert response.status_code == 200
    saved = response.json()["recipe"]
    assert saved["id"] == "1"
    assert saved["cookingTime"] == 20
    assert "savedAt" in saved

    listed = client.get("/api/saved-recipes", headers=auth_headers).json()["recipes"]
    assert [r["id"] for r in listed] == ["1"]


def test_numeric_id_is_normalized(client, auth_headers):
    response = client.post("/api/saved-recipes", headers=auth_headers, json={"id": 7, "name": "토마토 파스타"})

    assert response.json()["recipe"]["id"] == "7"


def test_save_duplicate(client, auth_headers):
    client.post("/api/saved-recipes", headers=auth_headers, json=RECIPE)
    response = client.post("/api/saved-recipes", headers=auth_headers, json=RECIPE)

    assert response.status_code == 400
    assert response.json() == {"error": "Recipe already saved"}


def test_save_requires_id(client, auth_headers):
    response = client.post("/api/saved-recipes", headers=auth_headers, json={"name": "이름만"})

    assert response.status_code == 400


def test_toggle_is_idempotent_per_id(client, auth_headers):
    """두 번 토글하면 원래 목록"""
    client.post("/api/saved-recipes", headers=auth_headers, json={"id": "3", "name": "된장찌개"})
    before = client.get("/api/saved-recipes", headers=auth_headers).json()["recipes"]

    first = client.post("/api/saved-recipes/toggle", headers=auth_headers, json=RECIPE).json()
    assert first["saved"] is True
    assert [r["id"] for r in first["recipes"]] == ["1", "3"]

    second = client.post("/api/saved-recipes/toggle", headers=auth_headers, json=RECIPE).json()
    assert second["saved"] is False
    assert second["recipes"] == before


def test_remove_saved_recipe(client, auth_headers):
    client.post("/api/saved-recipes", headers=auth_headers, json=RECIPE)

    response = client.delete("/api/saved-recipes/1", headers=auth_headers)

    assert response.status_code == 200
    assert client.get("/api/saved-recipes", headers=auth_headers).json()["recipes"] == []
    assert client.delete("/api/saved-recipes/1", headers=auth_headers).status_code == 404


def test_saved_recipes_require_auth(client):
    assert client.get("/api/saved-recipes").status_code == 401
    assert client.post("/api/saved-recipes/toggle", json=RECIPE).status_code == 401
