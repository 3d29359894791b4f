"""AI 음성 보조 대화 라우트 (텍스트 입력)"""
from fastapi import APIRouter, Depends

from cooking_assistant.api.dependencies import require_authentication
from cooking_assistant.api.schemas.common import SuccessResponse
from cooking_assistant.api.schemas.cooking import AssistantReplyResponse, ChatMessageRequest
from cooking_assistant.services import assistant_service
from cooking_assistant.services.conversation_store import ConversationStore, get_conversation_store

router = APIRouter()

NAMESPACE = assistant_service.NAMESPACE


@router.post("/messages", response_model=AssistantReplyResponse)
async def send_assistant_message(
    request: ChatMessageRequest,
    user: dict = Depends(require_authentication),
    store: ConversationStore = Depends(get_conversation_store),
):
    """
    음성 보조에게 말하기

    요리 이름이나 "한식 레시피 추천해줘" 같은 요청에 레시피를 제안하고,
    "네"/"시작"으로 수락하면 recipeToStart에 시작할 레시피를 담아 돌려줍니다.
    """
    conversation = await store.get(NAMESPACE, user["id"]) or assistant_service.new_conversation()
    reply, recipe_to_start = assistant_service.handle_message(conversation, request.message)
    await store.set(NAMESPACE, user["id"], conversation)
    return assistant_service.conversation_view(conversation, reply, recipe_to_start)


@router.delete("/messages", response_model=SuccessResponse)
async def clear_assistant_messages(
    user: dict = Depends(require_authentication),
    store: ConversationStore = Depends(get_conversation_store),
) -> SuccessResponse:
    """대화 내역 삭제 (상태 초기화)"""
    await store.delete(NAMESPACE, user["id"])
    return SuccessResponse(success=True)
