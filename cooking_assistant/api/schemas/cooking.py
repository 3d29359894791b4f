"""AI 조리 진행 / 음성 보조 대화 스키마"""
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CookingSessionStartRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    recipe_id: Union[str, int] = Field(..., alias="recipeId")

    @field_validator("recipe_id")
    @classmethod
    def normalize_recipe_id(cls, v):
        return str(v)


class ChatMessageRequest(BaseModel):
    """사용자 발화 (텍스트 또는 음성 인식 결과)"""

    message: str = Field(..., min_length=1, max_length=500)

    @field_validator("message")
    @classmethod
    def strip_message(cls, v: str) -> str:
        stripped = v.strip()
        if not stripped:
            raise ValueError("message must not be blank")
        return stripped


class CookingSessionResponse(BaseModel):
    session: dict[str, Any]


class CookingReplyResponse(BaseModel):
    """메시지/단계 조작에 대한 응답"""

    reply: str
    session: dict[str, Any]


class CookingTimerResponse(BaseModel):
    timer: dict[str, Any]


class AssistantReplyResponse(BaseModel):
    """음성 보조 대화 응답"""

    model_config = ConfigDict(populate_by_name=True)

    reply: str
    state: str
    recipe: Optional[dict[str, Any]] = None
    recipe_to_start: Optional[dict[str, Any]] = Field(None, alias="recipeToStart")
    messages: list[dict[str, Any]]
