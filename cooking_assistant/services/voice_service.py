"""음성 입력/출력 프록시 - Google Speech-to-Text, Text-to-Speech, LangChain ChatOpenAI"""
from __future__ import annotations

import base64
import logging
from typing import Any, Optional

import httpx
from langchain_core.messages import HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI

from cooking_assistant.core.config import Settings, get_settings

logger = logging.getLogger(__name__)

UNRECOGNIZED_TRANSCRIPT = "음성을 인식할 수 없습니다."
DEMO_TRANSCRIPT = "음성이 인식되었습니다. (데모 모드)"
DEMO_RESPONSE = "네, 잘 들었습니다. 다음 단계로 진행하세요."
MISSING_LLM_RESPONSE = "네, 잘 들었습니다. OpenAI 설정이 필요합니다."
EMPTY_LLM_RESPONSE = "죄송합니다. 응답을 생성할 수 없습니다."


class VoiceProcessingError(RuntimeError):
    """외부 음성/LLM API 호출 실패"""


def build_system_prompt(recipe_name: Optional[str], current_step: Optional[str]) -> str:
    return (
        f"당신은 친절한 요리 보조 AI입니다. 사용자가 {recipe_name or '요리'}를 만들고 있으며, "
        f"현재 {current_step or '조리 중'}입니다. 사용자의 질문이나 요청에 대해 간단하고 명확하게 답변해주세요. "
        "응답은 2-3문장으로 짧게 해주세요."
    )


class VoiceService:
    """STT -> LLM 답변 -> TTS 파이프라인"""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.settings.voice_request_timeout)

    async def transcribe(self, audio: bytes) -> str:
        """Google Speech-to-Text (WEBM_OPUS, 48kHz)"""
        payload = {
            "config": {
                "encoding": "WEBM_OPUS",
                "sampleRateHertz": 48000,
                "languageCode": self.settings.speech_language_code,
                "enableAutomaticPunctuation": True,
            },
            "audio": {"content": base64.b64encode(audio).decode("ascii")},
        }
        async with self._client() as client:
            response = await client.post(
                self.settings.google_speech_url,
                params={"key": self.settings.google_cloud_api_key},
                json=payload,
            )
        if response.status_code != 200:
            logger.error("❌ Google Speech API 오류: %s", response.text)
            raise VoiceProcessingError("Failed to transcribe audio")

        try:
            data = response.json()
        except ValueError as e:
            logger.error("❌ Google Speech API 응답 해석 실패: %s", response.text)
            raise VoiceProcessingError("Invalid response from speech API") from e

        try:
            transcript = data["results"][0]["alternatives"][0]["transcript"]
        except (KeyError, IndexError, TypeError):
            transcript = None
        return transcript or UNRECOGNIZED_TRANSCRIPT

    async def generate_reply(
        self,
        text: str,
        recipe_name: Optional[str] = None,
        current_step: Optional[str] = None,
    ) -> str:
        """조리 맥락을 담은 짧은 답변 (2-3문장)"""
        llm = ChatOpenAI(
            api_key=self.settings.openai_api_key,
            model=self.settings.openai_model,
            temperature=0.7,
            max_tokens=150,
        )
        messages = [
            SystemMessage(content=build_system_prompt(recipe_name, current_step)),
            HumanMessage(content=text),
        ]
        try:
            result = await llm.ainvoke(messages)
        except Exception as e:
            logger.error("❌ OpenAI 호출 실패: %s", e)
            raise VoiceProcessingError("Failed to get GPT response") from e

        content = result.content if isinstance(result.content, str) else ""
        return content.strip() or EMPTY_LLM_RESPONSE

    async def synthesize(self, text: str) -> Optional[str]:
        """
        Google Text-to-Speech

        성공하면 data URL(`data:audio/mp3;base64,...`)을, 키가 없거나 실패하면 None을 반환합니다.
        """
        if not self.settings.google_cloud_api_key:
            logger.warning("⚠️ GOOGLE_CLOUD_API_KEY 미설정 - TTS 생략")
            return None

        payload = {
            "input": {"text": text},
            "voice": {
                "languageCode": self.settings.speech_language_code,
                "name": self.settings.tts_voice_name,
                "ssmlGender": "FEMALE",
            },
            "audioConfig": {"audioEncoding": "MP3", "speakingRate": 1.0, "pitch": 0.0},
        }
        try:
            async with self._client() as client:
                response = await client.post(
                    self.settings.google_tts_url,
                    params={"key": self.settings.google_cloud_api_key},
                    json=payload,
                )
        except httpx.HTTPError as e:
            logger.error("❌ Google TTS 요청 실패: %s", e)
            return None

        if response.status_code != 200:
            logger.error("❌ Google TTS API 오류: %s", response.text)
            return None

        try:
            data = response.json()
        except ValueError:
            logger.error("❌ Google TTS 응답 해석 실패: %s", response.text)
            return None

        audio_content = data.get("audioContent") if isinstance(data, dict) else None
        if not audio_content:
            return None
        return f"data:audio/mp3;base64,{audio_content}"

    async def process_voice(
        self,
        audio: bytes,
        recipe_name: Optional[str] = None,
        current_step: Optional[str] = None,
    ) -> dict[str, Any]:
        """음성 질문 -> {text, response, audioUrl}"""
        if not self.settings.google_cloud_api_key:
            logger.warning("⚠️ GOOGLE_CLOUD_API_KEY 미설정 - 데모 응답 반환")
            return {"text": DEMO_TRANSCRIPT, "response": DEMO_RESPONSE, "audioUrl": None}

        try:
            transcript = await self.transcribe(audio)
        except httpx.HTTPError as e:
            raise VoiceProcessingError(str(e)) from e
        logger.info("🎙️ 음성 인식 결과: %s", transcript)

        if not self.settings.openai_api_key:
            logger.warning("⚠️ OPENAI_API_KEY 미설정 - 고정 응답 반환")
            return {"text": transcript, "response": MISSING_LLM_RESPONSE, "audioUrl": None}

        reply = await self.generate_reply(transcript, recipe_name, current_step)
        audio_url = await self.synthesize(reply)
        return {"text": transcript, "response": reply, "audioUrl": audio_url}


def get_voice_service() -> VoiceService:
    return VoiceService()
