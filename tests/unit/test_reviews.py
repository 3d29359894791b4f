"""리뷰 / 피드백 라우트 테스트"""


def _review(client, headers, recipe_id="1", rating=5, text="맛있어요"):
    return client.post(
        "/api/reviews",
        headers=headers,
        json={"recipeId": recipe_id, "recipeName": "김치볶음밥", "rating": rating, "review": text},
    )


def test_create_review(client, auth_headers, logged_in):
    response = _review(client, auth_headers)

    assert response.status_code == 200
    review = response.json()["review"]
    assert review["id"].startswith("review_")
    assert review["userId"] == logged_in["user"]["id"]
    assert review["userName"] == "요리사"
    assert review["userInitial"] == "요"
    assert review["ratingLabel"] == "최고예요!"
    assert review["image"] is None


def test_review_rating_range(client, auth_headers):
    assert _review(client, auth_headers, rating=0).status_code == 400
    assert _review(client, auth_headers, rating=6).status_code == 400


def test_list_reviews_newest_first_and_filtered(client, auth_headers, register):
    _review(client, auth_headers, recipe_id="1", text="첫 번째")
    _review(client, auth_headers, recipe_id=3, text="두 번째")
    other = register(email="other@example.com", name="민수")
    _review(client, {"Authorization": f"Bearer {other['accessToken']}"}, recipe_id="1", text="세 번째")

    all_reviews = client.get("/api/reviews", headers=auth_headers).json()["reviews"]
    assert [r["review"] for r in all_reviews] == ["세 번째", "두 번째", "첫 번째"]

    filtered = client.get("/api/reviews", headers=auth_headers, params={"recipeId": "1"}).json()["reviews"]
    assert [r["review"] for r in filtered] == ["세 번째", "첫 번째"]


def test_create_feedback(client, auth_headers):
    response = client.post(
        "/api/feedback",
        headers=auth_headers,
        json={"recipeId": 1, "rating": 4, "tags": ["맛있었어요", "쉬웠어요"], "comment": "또 할게요"},
    )

    assert response.status_code == 200
    feedback = response.json()["feedback"]
    assert feedback["recipeId"] == "1"
    assert feedback["timeRating"] == 3
    assert feedback["difficultyRating"] == 3
    assert feedback["tags"] == ["맛있었어요", "쉬웠어요"]


def test_feedback_unknown_tag(client, auth_headers):
    response = client.post(
        "/api/feedback",
        headers=auth_headers,
        json={"recipeId": "1", "rating": 4, "tags": ["별로"]},
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Unknown feedback tags: 별로"}
