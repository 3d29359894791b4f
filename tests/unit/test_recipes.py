"""레시피 카탈로그 / 추천 테스트"""

from cooking_assistant.data import recipe_catalog
from cooking_assistant.services.recommendation_service import (
    CookingContext,
    recipe_allergens,
    recommend_recipes,
)


def _ids(recipes):
    return [recipe["id"] for recipe in recipes]


class TestCatalog:
    def test_recipe_ids_are_unique(self):
        ids = _ids(recipe_catalog.RECIPES)
        assert len(ids) == len(set(ids))

    def test_every_recipe_has_steps_and_ingredients(self):
        for recipe in recipe_catalog.RECIPES:
            assert recipe["category"] in recipe_catalog.RECIPE_CATEGORIES
            assert recipe["steps"], recipe["name"]
            assert recipe["ingredients"], recipe["name"]
            assert all(step["duration"] > 0 for step in recipe["steps"])

    def test_list_recipes_by_category(self):
        assert len(recipe_catalog.list_recipes()) == len(recipe_catalog.RECIPES)
        assert len(recipe_catalog.list_recipes("전체")) == len(recipe_catalog.RECIPES)
        assert {r["category"] for r in recipe_catalog.list_recipes("일식")} == {"일식"}

    def test_find_recipe_by_name_ignores_spaces(self):
        assert recipe_catalog.find_recipe_by_name("토마토파스타 만들래")["id"] == "7"
        assert recipe_catalog.find_recipe_by_name("오늘은 새우볶음밥")["id"] == "8"
        assert recipe_catalog.find_recipe_by_name("아무거나") is None

    def test_detail_hides_matching_keys(self):
        detail = recipe_catalog.recipe_detail(recipe_catalog.get_recipe("1"))

        assert "match" not in detail["ingredients"][0]
        assert "always" not in detail["ingredients"][0]


class TestRecommendation:
    def test_ingredient_triggers(self):
        context = CookingContext(ingredients=["김치", "두부"])

        recipes = recommend_recipes({}, context)

        assert _ids(recipes)[:2] == ["1", "3"]
        assert "7" not in _ids(recipes)

    def test_fallback_fills_to_three(self):
        recipes = recommend_recipes({}, CookingContext(ingredients=[]))

        assert _ids(recipes) == ["9", "10"]

    def test_fallback_after_single_match(self):
        recipes = recommend_recipes({}, CookingContext(ingredients=["토마토"]))

        assert _ids(recipes) == ["7", "9", "10"]

    def test_profile_preferences(self):
        profile = {"preferredCuisines": ["한식", "양식"], "dietaryGoals": "healthy-eating"}

        recipes = recommend_recipes(profile, CookingContext(ingredients=[]))

        assert _ids(recipes) == ["6", "11", "4"]

    def test_korean_difficulty_for_beginner(self):
        beginner = recommend_recipes({"preferredCuisines": ["한식"], "cookingLevel": "beginner"}, CookingContext())
        expert = recommend_recipes({"preferredCuisines": ["한식"], "cookingLevel": "advanced"}, CookingContext())

        assert next(r for r in beginner if r["id"] == "6")["difficulty"] == "초급"
        assert next(r for r in expert if r["id"] == "6")["difficulty"] == "중급"

    def test_no_duplicate_recipes(self):
        profile = {"preferredCuisines": ["한식", "양식", "한식"], "dietaryGoals": "low-carb"}

        recipes = recommend_recipes(profile, CookingContext(ingredients=["김치", "된장", "토마토"]))

        assert len(_ids(recipes)) == len(set(_ids(recipes)))

    def test_without_context_every_ingredient_is_owned(self):
        recipes = recommend_recipes({})

        assert _ids(recipes) == ["1", "3", "7"]
        assert recipes[0]["missingIngredients"] == ["김가루"]

    def test_missing_ingredients_marked(self):
        recipe = recommend_recipes({}, CookingContext(ingredients=["김치", "밥"]))[0]

        owned = {ing["name"]: ing["hasIt"] for ing in recipe["ingredients"]}
        assert owned["김치"] is True
        assert owned["밥"] is True
        assert owned["달걀"] is False
        assert "달걀" in recipe["missingIngredients"]

    def test_allergens_flagged(self):
        recipe = recipe_catalog.get_recipe("8")

        assert recipe_allergens(recipe, ["갑각류", "땅콩"]) == ["갑각류"]
        assert recipe_allergens(recipe, []) == []


def test_list_recipes_route(client, auth_headers):
    response = client.get("/api/recipes", headers=auth_headers, params={"category": "중식"})

    assert response.status_code == 200
    data = response.json()
    assert data["categories"] == list(recipe_catalog.RECIPE_CATEGORIES)
    assert data["recipes"]
    assert all(recipe["category"] == "중식" for recipe in data["recipes"])
    assert "steps" not in data["recipes"][0]


def test_get_recipe_route(client, auth_headers):
    response = client.get("/api/recipes/2", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["recipe"]["name"] == "스파게티 까르보나라"
    assert client.get("/api/recipes/999", headers=auth_headers).status_code == 404


def test_recipes_require_auth(client):
    assert client.get("/api/recipes").status_code == 401


def test_recommendations_with_ingredients(client, auth_headers):
    response = client.post(
        "/api/recipes/recommendations",
        headers=auth_headers,
        json={"ingredients": ["된장"], "cookingTime": "30분", "numberOfPeople": "2인분"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["usedContext"] is True
    assert _ids(data["recipes"]) == ["3", "9", "10"]


def test_recommendations_use_inventory_and_profile(client, auth_headers):
    client.post("/api/ingredients", headers=auth_headers, json={"name": "김치"})
    client.put("/api/profile", headers=auth_headers, json={"allergies": ["달걀"], "preferredCuisines": ["양식"]})

    response = client.post("/api/recipes/recommendations", headers=auth_headers, json={"useInventory": True})

    recipes = response.json()["recipes"]
    assert _ids(recipes)[:2] == ["1", "11"]
    assert recipes[0]["allergens"] == ["달걀"]
