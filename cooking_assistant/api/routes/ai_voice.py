"""AI 음성 프록시 라우트 (STT -> LLM -> TTS)"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from fastapi.responses import JSONResponse

from cooking_assistant.api.dependencies import require_authentication
from cooking_assistant.api.schemas.voice import (
    TextToSpeechRequest,
    TextToSpeechResponse,
    VoiceReplyResponse,
)
from cooking_assistant.services.voice_service import (
    VoiceProcessingError,
    VoiceService,
    get_voice_service,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/stt", response_model=VoiceReplyResponse)
async def speech_to_text(
    audio: Optional[UploadFile] = File(None),
    current_step: Optional[str] = Form(None, alias="currentStep"),
    recipe_name: Optional[str] = Form(None, alias="recipeName"),
    user: dict = Depends(require_authentication),
    voice_service: VoiceService = Depends(get_voice_service),
):
    """
    음성 질문 처리

    업로드된 음성(webm/opus)을 텍스트로 바꾸고, 조리 맥락을 담아 AI 답변을 생성한 뒤
    답변 음성(data URL)까지 함께 반환합니다.
    Google 키가 없으면 데모 응답, OpenAI 키가 없으면 고정 응답을 돌려줍니다.
    """
    if audio is None:
        raise HTTPException(status_code=400, detail="No audio file provided")

    content = await audio.read()
    if not content:
        raise HTTPException(status_code=400, detail="No audio file provided")

    try:
        result = await voice_service.process_voice(content, recipe_name, current_step)
    except VoiceProcessingError as e:
        logger.error("❌ STT 처리 실패 - user_id=%s: %s", user["id"], e)
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to process voice input", "details": str(e)},
        )
    return result


@router.post("/tts", response_model=TextToSpeechResponse)
async def text_to_speech(
    request: TextToSpeechRequest,
    user: dict = Depends(require_authentication),
    voice_service: VoiceService = Depends(get_voice_service),
):
    """텍스트를 음성(data:audio/mp3;base64,...)으로 변환. 키가 없거나 실패하면 audioUrl은 null"""
    if not request.text or not request.text.strip():
        raise HTTPException(status_code=400, detail="No text provided")

    audio_url = await voice_service.synthesize(request.text)
    return {"audioUrl": audio_url}
