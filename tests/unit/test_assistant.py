"""음성 보조 대화 테스트"""

import pytest

from cooking_assistant.services import assistant_service as assistant


@pytest.fixture
def conversation():
    return assistant.new_conversation()


def test_named_recipe_is_suggested(conversation):
    reply, to_start = assistant.respond(conversation, "김치볶음밥 만들고 싶어")

    assert conversation["state"] == assistant.STATE_RECIPE_SUGGESTED
    assert conversation["recipeId"] == "1"
    assert reply.startswith("김치볶음밥을(를) 추천드려요!")
    assert to_start is None


def test_affirmative_marks_ready(conversation):
    assistant.respond(conversation, "된장찌개 알려줘")

    reply, to_start = assistant.respond(conversation, "네 시작할게요")

    assert conversation["state"] == assistant.STATE_READY_TO_COOK
    assert to_start["id"] == "3"
    assert "된장찌개" in reply


def test_affirmative_without_suggestion_is_help(conversation):
    reply, to_start = assistant.respond(conversation, "좋아")

    assert reply == assistant.HELP_REPLY
    assert to_start is None
    assert conversation["state"] == assistant.STATE_IDLE


def test_category_request(conversation):
    reply, _ = assistant.respond(conversation, "일식 레시피 추천해줘")

    assert conversation["state"] == assistant.STATE_RECIPE_SUGGESTED
    assert conversation["recipeId"] == "12"


def test_category_request_cycles(conversation):
    assistant.respond(conversation, "일식 메뉴 추천해줘")
    assistant.respond(conversation, "일식 메뉴 다른 거 추천해줘")

    assert conversation["recipeId"] == "13"


def test_salad_alias(conversation):
    assistant.respond(conversation, "샐러드 요리 추천해줘")

    assert conversation["recipeId"] == "4"


def test_request_without_category_asks(conversation):
    reply, _ = assistant.respond(conversation, "오늘 뭐 먹고 싶은데 추천해줘")

    assert reply == assistant.ASK_CATEGORY_REPLY
    assert conversation["state"] == assistant.STATE_IDLE


def test_negation_returns_to_idle(conversation):
    assistant.respond(conversation, "비빔밥 만들고 싶어")

    reply, _ = assistant.respond(conversation, "아니 괜찮아")

    assert reply == assistant.NEGATION_REPLY
    assert conversation["state"] == assistant.STATE_IDLE
    assert conversation["recipeId"] is None


def test_unrelated_message_is_help(conversation):
    reply, _ = assistant.respond(conversation, "오늘 날씨 어때")

    assert reply == assistant.HELP_REPLY


def test_handle_message_records_history(conversation):
    assistant.handle_message(conversation, "규동 먹고 싶어")
    assistant.handle_message(conversation, "응")

    messages = conversation["messages"]
    assert [m["type"] for m in messages] == ["user", "assistant", "user", "assistant"]
    assert messages[-1]["recipeToStart"]["id"] == "13"


def test_assistant_routes(client, auth_headers):
    first = client.post("/api/assistant/messages", headers=auth_headers, json={"message": "마파두부 어떻게 만들어?"})
    assert first.status_code == 200
    data = first.json()
    assert data["state"] == "recipe_suggested"
    assert data["recipe"]["id"] == "14"
    assert data["recipeToStart"] is None

    second = client.post("/api/assistant/messages", headers=auth_headers, json={"message": "네"}).json()
    assert second["state"] == "ready_to_cook"
    assert second["recipeToStart"]["name"] == "마파두부"
    assert len(second["messages"]) == 4

    assert client.delete("/api/assistant/messages", headers=auth_headers).status_code == 200
    fresh = client.post("/api/assistant/messages", headers=auth_headers, json={"message": "안녕"}).json()
    assert fresh["state"] == "idle"
    assert len(fresh["messages"]) == 2


def test_assistant_requires_message(client, auth_headers):
    response = client.post("/api/assistant/messages", headers=auth_headers, json={})

    assert response.status_code == 400
