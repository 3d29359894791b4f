"""AI 조리 진행 (규칙 기반 대화 + 단계 진행)

사용자 메시지를 소문자로 바꾼 뒤 키워드 포함 여부로 응답 템플릿을 고른다.
먼저 매칭된 규칙이 우선한다.

세션 상태의 currentStep 값:
    0       재료 확인 단계
    1..n    n개 조리 단계 중 현재 단계
isComplete가 True가 되면 마지막 단계까지 끝난 상태다.
"""
import logging
import uuid
from typing import Any, Optional

from cooking_assistant.data import recipe_catalog
from cooking_assistant.services.recommendation_service import recipe_allergens
from cooking_assistant.utils.timestamps import now_iso

logger = logging.getLogger(__name__)

NAMESPACE = "cooking"
MAX_MESSAGES = 200

RESTART_KEYWORDS = ("처음", "다시")
ADVANCE_KEYWORDS = ("다음", "넘어", "완료", "됐", "했어", "했습니다", "끝", "준비", "시작")
COMPLETE_KEYWORDS = ("완료", "끝")
HEAT_KEYWORDS = ("불", "화력")
TIME_KEYWORDS = ("시간", "얼마나")
INGREDIENT_KEYWORDS = ("재료", "없", "대체")
TEMPERATURE_KEYWORDS = ("온도",)
QUESTION_BEFORE_RESTART_KEYWORDS = HEAT_KEYWORDS + TIME_KEYWORDS + INGREDIENT_KEYWORDS + TEMPERATURE_KEYWORDS
HEALTH_KEYWORDS = ("건강", "칼로리", "영양")
TASTE_KEYWORDS = ("맛", "간")
TOOL_KEYWORDS = ("도구", "프라이팬", "냄비")
GREETING_KEYWORDS = ("안녕", "hi", "hello")
HELP_KEYWORDS = ("도움", "help", "모르겠")

HEAT_REPLY = (
    "불 조절은 요리의 핵심입니다. 약불은 1-2단계, 중불은 3-4단계, 강불은 5-6단계를 말합니다. "
    "대부분의 볶음 요리는 중불~중강불에서 진행하시면 됩니다."
)
TEMPERATURE_REPLY = (
    "오븐을 사용하는 요리가 아니라면 특별히 온도를 재실 필요는 없습니다. "
    "프라이팬이나 냄비의 경우 중불로 시작해서 필요에 따라 조절하시면 됩니다."
)
HEALTH_REPLY = (
    "건강하게 요리하시려면 기름의 양을 조금 줄이고, 채소를 더 추가하시는 것을 추천드립니다. "
    "소금 대신 허브나 향신료로 간을 맞추면 더욱 건강한 요리가 됩니다."
)
TASTE_REPLY = (
    "간을 보실 때는 조금씩 맛을 보면서 조절하세요. "
    "나중에 더 추가할 수는 있어도 짠 것을 되돌릴 수는 없으니 처음엔 적게 넣는 것이 좋습니다."
)
TOOL_REPLY = (
    "이 요리에는 기본적인 조리 도구가 필요합니다. 프라이팬, 칼, 도마는 필수이고, "
    "레시피에 따라 냄비나 볼 등이 추가로 필요할 수 있습니다."
)
GREETING_REPLY = (
    "안녕하세요! 요리를 진행하시려면 '다음' 또는 '시작'이라고 말씀해주세요. "
    "궁금한 점이 있으시면 언제든 질문해주세요!"
)
HELP_REPLY = (
    "제가 도와드릴게요! 요리 중 다음과 같은 질문을 할 수 있습니다:\n"
    "• '다음' - 다음 단계로 이동\n"
    "• '불 조절은 어떻게?' - 화력 관련 도움\n"
    "• '시간이 얼마나?' - 소요 시간 안내\n"
    "• '재료가 없어' - 대체 재료 추천\n"
    "• '처음부터' - 처음부터 다시 시작"
)
RESTART_REPLY = "처음부터 다시 시작하겠습니다. 재료를 다시 한번 확인해주세요!"
COMPLETE_THANKS_REPLY = "수고하셨습니다! 맛있게 드세요! 🎉"
COMPLETE_HINT_REPLY = "요리가 완료되었습니다. '요리 완료' 버튼을 눌러주세요!"
PREPARING_FALLBACK = "재료 준비가 완료되셨다면 '다음' 또는 '시작'이라고 말씀해주세요. 궁금한 점이 있으시면 언제든 질문해주세요!"
COOKING_FALLBACK = (
    "현재 진행 중인 단계에 집중해주세요. 질문이 있으시면 구체적으로 말씀해주시고, "
    "단계를 완료하셨다면 '다음'이라고 말씀해주세요."
)


class NoActiveStepError(ValueError):
    """재료 확인 단계이거나 이미 완료되어 진행 중인 단계가 없음"""


def _contains(text: str, keywords: tuple[str, ...]) -> bool:
    return any(keyword in text for keyword in keywords)


def _message(role: str, content: str) -> dict[str, Any]:
    return {"id": uuid.uuid4().hex, "role": role, "content": content, "timestamp": now_iso()}


def _append(state: dict[str, Any], role: str, content: str) -> None:
    state["messages"].append(_message(role, content))
    if len(state["messages"]) > MAX_MESSAGES:
        del state["messages"][: len(state["messages"]) - MAX_MESSAGES]


def resolve_recipe(state: dict[str, Any]) -> dict[str, Any]:
    recipe = recipe_catalog.get_recipe(state["recipeId"])
    if recipe is None:
        raise LookupError("Recipe not found")
    return recipe


def format_timer(seconds: int) -> str:
    """초를 m:ss 형식으로"""
    minutes, secs = divmod(max(seconds, 0), 60)
    return f"{minutes}:{secs:02d}"


def progress_percent(state: dict[str, Any]) -> float:
    total = state["totalSteps"]
    if not total:
        return 0.0
    return round(len(state["completedSteps"]) / total * 100, 1)


def _step_text(recipe: dict[str, Any], number: int) -> str:
    step = recipe["steps"][number - 1]
    total = len(recipe["steps"])
    return (
        f"[{number}단계/{total}단계]\n{step['instruction']}\n\n"
        f"💡 팁: {step['tip']}\n\n완료하시면 \"다음\"이라고 말씀해주세요."
    )


def start_session(recipe: dict[str, Any], allergies: Optional[list[str]] = None) -> dict[str, Any]:
    """
    조리 세션 시작

    인사 + 레시피 설명, 알러지 경고(해당 시), 재료 목록과 시작 안내 메시지를 만든다.
    """
    state = {
        "recipeId": recipe["id"],
        "recipeName": recipe["name"],
        "currentStep": 0,
        "totalSteps": len(recipe["steps"]),
        "completedSteps": [],
        "isComplete": False,
        "startedAt": now_iso(),
        "messages": [],
    }
    _append(state, "assistant", f"안녕하세요! {recipe['name']} 조리를 시작하겠습니다. 😊\n\n{recipe['description']}")

    allergens = recipe_allergens(recipe, allergies or [])
    if allergens:
        _append(
            state,
            "assistant",
            f"⚠️ 알러지 경고: 이 레시피에는 {', '.join(allergens)}이(가) 포함되어 있습니다. "
            "알러지가 있으시다면 이 요리를 만들지 마세요.",
        )

    ingredient_lines = "\n".join(f"• {ing['name']}: {ing['amount']}" for ing in recipe["ingredients"])
    _append(
        state,
        "assistant",
        f"필요한 재료:\n{ingredient_lines}\n\n"
        f"조리 시간: {recipe['cookingTime']}분\n난이도: {recipe['difficulty']}\n\n"
        "준비가 되셨다면 \"시작\" 또는 \"다음\"이라고 말씀해주세요!",
    )
    return state


def advance(state: dict[str, Any], recipe: dict[str, Any]) -> str:
    """
    다음 단계로 진행

    재료 확인(0) -> 1단계, k단계 -> k+1단계, 마지막 단계 -> 완료
    """
    total = len(recipe["steps"])
    current = state["currentStep"]

    if state["isComplete"]:
        return COMPLETE_HINT_REPLY

    if current == 0:
        state["currentStep"] = 1
        return f"좋습니다! 그럼 요리를 시작하겠습니다.\n\n{_step_text(recipe, 1)}"

    if current not in state["completedSteps"]:
        state["completedSteps"].append(current)

    if current >= total:
        state["isComplete"] = True
        return f"축하합니다! {recipe['name']}이(가) 완성되었습니다! 🎉\n\n맛있게 드시고, '요리 완료' 버튼을 눌러주세요."

    state["currentStep"] = current + 1
    return f"잘하셨습니다! 다음 단계로 넘어가겠습니다.\n\n{_step_text(recipe, current + 1)}"


def go_back(state: dict[str, Any], recipe: dict[str, Any]) -> str:
    """이전 단계로 (완료 상태에서는 마지막 단계로 되돌림)"""
    total = len(recipe["steps"])
    if state["isComplete"]:
        state["isComplete"] = False
        target = total
    else:
        target = state["currentStep"] - 1

    if target <= 0:
        state["currentStep"] = 0
        state["completedSteps"] = []
        return "재료 확인 단계입니다. 준비가 되셨다면 \"시작\" 또는 \"다음\"이라고 말씀해주세요!"

    state["currentStep"] = target
    state["completedSteps"] = [n for n in state["completedSteps"] if n < target]
    return f"이전 단계로 돌아갑니다.\n\n{_step_text(recipe, target)}"


def restart(state: dict[str, Any]) -> str:
    state["currentStep"] = 0
    state["completedSteps"] = []
    state["isComplete"] = False
    return RESTART_REPLY


def current_timer(state: dict[str, Any], recipe: dict[str, Any]) -> dict[str, Any]:
    """현재 단계 타이머 (분 -> 초)"""
    current = state["currentStep"]
    if state["isComplete"] or current <= 0:
        raise NoActiveStepError("No active cooking step")
    duration = recipe["steps"][current - 1].get("duration") or 0
    seconds = duration * 60
    return {"step": current, "durationMinutes": duration, "seconds": seconds, "display": format_timer(seconds)}


def _time_reply(state: dict[str, Any], recipe: dict[str, Any]) -> str:
    current = state["currentStep"]
    if 0 < current <= len(recipe["steps"]) and not state["isComplete"]:
        duration = recipe["steps"][current - 1].get("duration")
        return (
            f"현재 단계는 보통 {duration}분 정도 소요됩니다. 재료의 상태를 보면서 진행해주세요. "
            "색이 변하거나 향이 나기 시작하면 다음 단계로 넘어가셔도 됩니다."
        )
    return f"{recipe['name']}의 전체 조리 시간은 약 {recipe['cookingTime']}분입니다."


def _ingredient_reply(text: str, recipe: dict[str, Any]) -> str:
    """언급한 재료의 대체 재료 안내, 특정 재료가 없으면 대체 가능 목록"""
    for ingredient in recipe["ingredients"]:
        if ingredient["name"] in text:
            alternatives = [alt for alt in ingredient["alternatives"] if alt != "없이"]
            if alternatives:
                reply = f"{ingredient['name']} 대신 {', '.join(alternatives)}을(를) 사용하셔도 됩니다."
                if ingredient["optional"] or "없이" in ingredient["alternatives"]:
                    reply += " 없이 만드셔도 괜찮아요."
                return reply
            if ingredient["optional"] or "없이" in ingredient["alternatives"]:
                return f"{ingredient['name']}은(는) 선택 재료라서 없이 만드셔도 괜찮아요."
            return f"{ingredient['name']}은(는) 이 요리의 필수 재료라서 대체하기 어렵습니다. 가까운 마트에서 준비해주세요."

    substitutable = [ing for ing in recipe["ingredients"] if ing["alternatives"]]
    if not substitutable:
        return "없는 재료가 있으신가요? 구체적으로 어떤 재료가 없으신지 말씀해주시면 대체 재료를 추천해드릴게요!"
    lines = "\n".join(f"• {ing['name']} → {', '.join(ing['alternatives'])}" for ing in substitutable)
    return (
        "없는 재료가 있으신가요? 이 레시피에서 대체할 수 있는 재료는 다음과 같습니다:\n"
        f"{lines}\n\n구체적으로 어떤 재료가 없으신지 말씀해주세요!"
    )


def route_message(state: dict[str, Any], recipe: dict[str, Any], message: str) -> str:
    """
    사용자 메시지에 대한 응답 결정 (세션 상태를 갱신함)

    규칙 순서:
        1. 완료 상태
        2. 처음부터 다시 (화력/시간/재료/온도 질문이 아닐 때)
        3. 다음 단계 진행
        4. 화력/시간/재료/온도/건강/맛/도구/인사/도움말 질문
        5. 단계별 기본 안내
    """
    text = message.lower()

    if state["isComplete"]:
        return COMPLETE_THANKS_REPLY if _contains(text, COMPLETE_KEYWORDS) else COMPLETE_HINT_REPLY

    # "다시 시작"은 진행보다 먼저, "재료 다시 알려줘" 같은 질문보다는 나중
    if _contains(text, RESTART_KEYWORDS) and not _contains(text, QUESTION_BEFORE_RESTART_KEYWORDS):
        return restart(state)

    if _contains(text, ADVANCE_KEYWORDS):
        return advance(state, recipe)

    if _contains(text, HEAT_KEYWORDS):
        return HEAT_REPLY
    if _contains(text, TIME_KEYWORDS):
        return _time_reply(state, recipe)
    if _contains(text, INGREDIENT_KEYWORDS):
        return _ingredient_reply(text, recipe)
    if _contains(text, TEMPERATURE_KEYWORDS):
        return TEMPERATURE_REPLY
    if _contains(text, HEALTH_KEYWORDS):
        return HEALTH_REPLY
    if _contains(text, TASTE_KEYWORDS):
        return TASTE_REPLY
    if _contains(text, TOOL_KEYWORDS):
        return TOOL_REPLY
    if _contains(text, GREETING_KEYWORDS):
        return GREETING_REPLY
    if _contains(text, HELP_KEYWORDS):
        return HELP_REPLY

    return PREPARING_FALLBACK if state["currentStep"] == 0 else COOKING_FALLBACK


def handle_message(state: dict[str, Any], message: str) -> str:
    """사용자 메시지를 기록하고 응답을 기록한 뒤 응답을 반환"""
    recipe = resolve_recipe(state)
    _append(state, "user", message)
    reply = route_message(state, recipe, message)
    _append(state, "assistant", reply)
    return reply


def handle_control(state: dict[str, Any], action: str) -> str:
    """버튼 조작 (next / previous) - 응답 메시지를 기록"""
    recipe = resolve_recipe(state)
    reply = advance(state, recipe) if action == "next" else go_back(state, recipe)
    _append(state, "assistant", reply)
    return reply


def session_view(state: dict[str, Any]) -> dict[str, Any]:
    """응답용 세션 정보 (현재 단계 안내 포함)"""
    recipe = resolve_recipe(state)
    current = state["currentStep"]
    step = None
    if 0 < current <= len(recipe["steps"]):
        raw = recipe["steps"][current - 1]
        step = {"number": current, **raw}
    return {
        **state,
        "progress": progress_percent(state),
        "currentStepDetail": step,
    }
