"""AI 음성 프록시 스키마"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class VoiceReplyResponse(BaseModel):
    """음성 질문 처리 결과"""

    model_config = ConfigDict(populate_by_name=True)

    text: str
    response: str
    audio_url: Optional[str] = Field(None, alias="audioUrl")


class TextToSpeechRequest(BaseModel):
    text: Optional[str] = None


class TextToSpeechResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    audio_url: Optional[str] = Field(None, alias="audioUrl")
