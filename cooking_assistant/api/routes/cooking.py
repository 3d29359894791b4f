"""AI 조리 진행 라우트

세션은 사용자당 하나이며 대화 상태 저장소(Redis 또는 메모리)에 TTL과 함께 보관됩니다.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from cooking_assistant.api.dependencies import require_authentication
from cooking_assistant.api.schemas.common import SuccessResponse
from cooking_assistant.api.schemas.cooking import (
    ChatMessageRequest,
    CookingReplyResponse,
    CookingSessionResponse,
    CookingSessionStartRequest,
    CookingTimerResponse,
)
from cooking_assistant.data import recipe_catalog
from cooking_assistant.db.session import get_session
from cooking_assistant.services import cooking_session_service, profile_service
from cooking_assistant.services.conversation_store import ConversationStore, get_conversation_store
from cooking_assistant.utils.timestamps import now_iso

logger = logging.getLogger(__name__)

router = APIRouter()

NAMESPACE = cooking_session_service.NAMESPACE


async def _load_state(store: ConversationStore, user_id: str) -> dict:
    state = await store.get(NAMESPACE, user_id)
    if not state:
        raise HTTPException(status_code=404, detail="No active cooking session")
    return state


@router.post("/sessions", response_model=CookingSessionResponse)
async def start_cooking_session(
    request: CookingSessionStartRequest,
    user: dict = Depends(require_authentication),
    session: AsyncSession = Depends(get_session),
    store: ConversationStore = Depends(get_conversation_store),
) -> CookingSessionResponse:
    """
    조리 세션 시작

    기존 세션은 덮어씁니다. 프로필 알레르기와 겹치는 재료가 있으면 경고 메시지가 포함됩니다.
    """
    recipe = recipe_catalog.get_recipe(request.recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")

    profile = await profile_service.get_profile(session, user["id"])
    state = cooking_session_service.start_session(recipe, profile_service.profile_allergies(profile))
    await store.set(NAMESPACE, user["id"], state)
    logger.info("👨‍🍳 조리 시작 - user_id=%s, recipe=%s", user["id"], recipe["name"])
    return CookingSessionResponse(session=cooking_session_service.session_view(state))


@router.get("/sessions/current", response_model=CookingSessionResponse)
async def get_current_session(
    user: dict = Depends(require_authentication),
    store: ConversationStore = Depends(get_conversation_store),
) -> CookingSessionResponse:
    """진행 중인 조리 세션"""
    state = await _load_state(store, user["id"])
    return CookingSessionResponse(session=cooking_session_service.session_view(state))


@router.delete("/sessions/current", response_model=SuccessResponse)
async def end_current_session(
    user: dict = Depends(require_authentication),
    store: ConversationStore = Depends(get_conversation_store),
) -> SuccessResponse:
    """조리 세션 종료"""
    await store.delete(NAMESPACE, user["id"])
    return SuccessResponse(success=True)


@router.post("/sessions/current/messages", response_model=CookingReplyResponse)
async def send_cooking_message(
    request: ChatMessageRequest,
    user: dict = Depends(require_authentication),
    store: ConversationStore = Depends(get_conversation_store),
) -> CookingReplyResponse:
    """조리 중 대화 ("다음", "불 조절은?", "재료가 없어" ...)"""
    state = await _load_state(store, user["id"])
    reply = cooking_session_service.handle_message(state, request.message)
    await store.set(NAMESPACE, user["id"], state)
    return CookingReplyResponse(reply=reply, session=cooking_session_service.session_view(state))


@router.post("/sessions/current/next", response_model=CookingReplyResponse)
async def next_step(
    user: dict = Depends(require_authentication),
    store: ConversationStore = Depends(get_conversation_store),
) -> CookingReplyResponse:
    """다음 단계 버튼"""
    state = await _load_state(store, user["id"])
    reply = cooking_session_service.handle_control(state, "next")
    await store.set(NAMESPACE, user["id"], state)
    return CookingReplyResponse(reply=reply, session=cooking_session_service.session_view(state))


@router.post("/sessions/current/previous", response_model=CookingReplyResponse)
async def previous_step(
    user: dict = Depends(require_authentication),
    store: ConversationStore = Depends(get_conversation_store),
) -> CookingReplyResponse:
    """이전 단계 버튼"""
    state = await _load_state(store, user["id"])
    reply = cooking_session_service.handle_control(state, "previous")
    await store.set(NAMESPACE, user["id"], state)
    return CookingReplyResponse(reply=reply, session=cooking_session_service.session_view(state))


@router.post("/sessions/current/timer", response_model=CookingTimerResponse)
async def start_step_timer(
    user: dict = Depends(require_authentication),
    store: ConversationStore = Depends(get_conversation_store),
) -> CookingTimerResponse:
    """현재 단계 타이머 시작 (단계 소요 시간 기준)"""
    state = await _load_state(store, user["id"])
    recipe = cooking_session_service.resolve_recipe(state)
    try:
        timer = cooking_session_service.current_timer(state, recipe)
    except cooking_session_service.NoActiveStepError as e:
        raise HTTPException(status_code=400, detail=str(e))

    timer["startedAt"] = now_iso()
    state["timer"] = timer
    await store.set(NAMESPACE, user["id"], state)
    return CookingTimerResponse(timer=timer)
