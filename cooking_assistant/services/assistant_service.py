"""AI 음성 보조 화면의 텍스트 대화 (규칙 기반)

상태 흐름: idle -> recipe_suggested -> ready_to_cook
부정 표현이 나오면 언제든 idle로 돌아간다.
"""
import logging
import re
import uuid
from typing import Any, Optional

from cooking_assistant.data import recipe_catalog
from cooking_assistant.utils.timestamps import now_iso

logger = logging.getLogger(__name__)

NAMESPACE = "assistant"
MAX_MESSAGES = 100

STATE_IDLE = "idle"
STATE_RECIPE_SUGGESTED = "recipe_suggested"
STATE_READY_TO_COOK = "ready_to_cook"

AFFIRMATIVE_KEYWORDS = ("네", "응", "좋아", "시작")

RECIPE_NEGATION_KEYWORDS = [
    "레시피 말고",
    "레시피 필요 없어",
    "레시피 필요없어",
    "아니",
    "아니요",
    "아니오",
    "싫어",
    "됐어",
    "괜찮아",
]

RECIPE_REQUEST_PATTERNS = [
    re.compile(
        r"(레시피|조리법|요리법|요리|메뉴|만드는\s?법|만드는\s?방법).*(알려|추천|보여|찾아|줄|해줘|부탁|가능|가르쳐)"
    ),
    re.compile(
        r"(알려|추천|보여|찾아|줄|해줘|부탁|가능|가르쳐).*(레시피|조리법|요리법|요리|메뉴|만드는\s?법|만드는\s?방법)"
    ),
    re.compile(r"(어떻게|방법).*(만들|요리해)"),
    re.compile(r"(먹고\s?싶|만들고\s?싶)"),
]

# 발화 속 분류 표현 -> 카탈로그 카테고리
CATEGORY_ALIASES = {
    "한식": "한식",
    "양식": "양식",
    "중식": "중식",
    "일식": "일식",
    "샐러드": "기타",
}

NEGATION_REPLY = "알겠습니다. 다른 요리가 필요하시면 언제든 말씀해주세요!"
ASK_CATEGORY_REPLY = "어떤 종류의 요리를 원하세요? 한식, 양식, 중식, 일식, 샐러드 중에서 말씀해주세요!"
HELP_REPLY = (
    "만들고 싶은 요리 이름을 말씀해주시거나 '한식 레시피 추천해줘'처럼 요청해주세요. "
    "예: '김치볶음밥 만들고 싶어', '양식 메뉴 추천해줘'"
)


def _normalize(text: str) -> str:
    return (text or "").strip().lower()


def _matches_recipe_request(text: str) -> bool:
    return any(pattern.search(text) for pattern in RECIPE_REQUEST_PATTERNS)


def _has_negation(text: str) -> bool:
    return any(keyword in text for keyword in RECIPE_NEGATION_KEYWORDS)


def _is_affirmative(text: str) -> bool:
    return any(keyword in text for keyword in AFFIRMATIVE_KEYWORDS)


def _mentioned_category(text: str) -> Optional[str]:
    for alias, category in CATEGORY_ALIASES.items():
        if alias in text:
            return category
    return None


def new_conversation() -> dict[str, Any]:
    return {"state": STATE_IDLE, "recipeId": None, "messages": []}


def _append(conversation: dict[str, Any], role: str, text: str, **extra: Any) -> None:
    conversation["messages"].append(
        {"id": uuid.uuid4().hex, "type": role, "text": text, "timestamp": now_iso(), **extra}
    )
    if len(conversation["messages"]) > MAX_MESSAGES:
        del conversation["messages"][: len(conversation["messages"]) - MAX_MESSAGES]


def _pick_from_category(category: str, current_id: Optional[str]) -> Optional[dict[str, Any]]:
    """카테고리에서 현재 제안한 레시피 다음 것을 고름 (순환)"""
    candidates = recipe_catalog.list_recipes(category)
    if not candidates:
        return None
    ids = [recipe["id"] for recipe in candidates]
    if current_id in ids:
        return candidates[(ids.index(current_id) + 1) % len(candidates)]
    return candidates[0]


def _suggestion_text(recipe: dict[str, Any]) -> str:
    ingredients = ", ".join(f"{ing['name']} {ing['amount']}" for ing in recipe["ingredients"])
    return (
        f"{recipe['name']}을(를) 추천드려요! {recipe['description']}\n"
        f"조리 시간: {recipe['cookingTime']}분 / 난이도: {recipe['difficulty']}\n\n"
        f"필요한 재료: {ingredients}\n\n"
        "이 요리를 시작할까요? '네' 또는 '시작'이라고 말씀해주세요."
    )


def _suggest(conversation: dict[str, Any], recipe: dict[str, Any]) -> str:
    conversation["state"] = STATE_RECIPE_SUGGESTED
    conversation["recipeId"] = recipe["id"]
    return _suggestion_text(recipe)


def respond(conversation: dict[str, Any], message: str) -> tuple[str, Optional[dict[str, Any]]]:
    """
    발화에 대한 응답과 (준비 완료 시) 시작할 레시피

    1. 부정 표현 -> idle
    2. 제안 중/준비 완료 상태에서 긍정 -> ready_to_cook
    3. 레시피 이름 언급 -> 해당 레시피 제안
    4. 요청 패턴 + 분류 -> 분류에서 레시피 제안, 분류 없으면 분류 질문
    5. 그 외 도움말
    """
    text = _normalize(message)
    current = recipe_catalog.get_recipe(conversation["recipeId"]) if conversation.get("recipeId") else None
    named = recipe_catalog.find_recipe_by_name(text)

    if _has_negation(text):
        conversation["state"] = STATE_IDLE
        conversation["recipeId"] = None
        return NEGATION_REPLY, None

    if (
        current
        and conversation["state"] in (STATE_RECIPE_SUGGESTED, STATE_READY_TO_COOK)
        and _is_affirmative(text)
        and (named is None or named["id"] == current["id"])
    ):
        conversation["state"] = STATE_READY_TO_COOK
        reply = f"좋습니다! {current['name']} 요리를 시작할게요. 재료를 확인하고 조리를 시작해보세요!"
        return reply, recipe_catalog.recipe_summary(current)

    if named:
        return _suggest(conversation, named), None

    if _matches_recipe_request(text):
        category = _mentioned_category(text)
        if category is None:
            return ASK_CATEGORY_REPLY, None
        recipe = _pick_from_category(category, conversation.get("recipeId"))
        if recipe is None:
            return ASK_CATEGORY_REPLY, None
        return _suggest(conversation, recipe), None

    return HELP_REPLY, None


def handle_message(conversation: dict[str, Any], message: str) -> tuple[str, Optional[dict[str, Any]]]:
    """대화 기록에 발화와 응답을 추가"""
    _append(conversation, "user", message)
    reply, recipe_to_start = respond(conversation, message)
    extra = {"recipeToStart": recipe_to_start} if recipe_to_start else {}
    _append(conversation, "assistant", reply, **extra)
    logger.debug("Assistant state=%s recipe=%s", conversation["state"], conversation.get("recipeId"))
    return reply, recipe_to_start


def conversation_view(
    conversation: dict[str, Any],
    reply: str,
    recipe_to_start: Optional[dict[str, Any]],
) -> dict[str, Any]:
    recipe = recipe_catalog.get_recipe(conversation["recipeId"]) if conversation.get("recipeId") else None
    return {
        "reply": reply,
        "state": conversation["state"],
        "recipe": recipe_catalog.recipe_summary(recipe) if recipe else None,
        "recipeToStart": recipe_to_start,
        "messages": conversation["messages"],
    }
