"""사용자 프로필 스키마"""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class ProfileUpdateRequest(BaseModel):
    """
    프로필 수정 요청

    알려진 필드는 타입을 검증하고, 그 밖의 키는 그대로 저장한다 (불투명 JSON).
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    name: Optional[str] = None
    preferred_cuisines: Optional[list[str]] = Field(None, alias="preferredCuisines")
    allergies: Optional[list[str]] = None
    available_tools: Optional[list[str]] = Field(None, alias="availableTools")
    disliked_ingredients: Optional[list[str]] = Field(None, alias="dislikedIngredients")
    cooking_time: Optional[str] = Field(None, alias="cookingTime")
    servings: Optional[str] = None
    spice_level: Optional[str] = Field(None, alias="spiceLevel")
    restrictions: Optional[list[str]] = None
    health_conditions: Optional[list[str]] = Field(None, alias="healthConditions")
    dietary_goals: Optional[str] = Field(None, alias="dietaryGoals")
    cooking_level: Optional[str] = Field(None, alias="cookingLevel")

    def to_patch(self) -> dict[str, Any]:
        """요청에 실제로 들어온 키만 camelCase로 반환"""
        return self.model_dump(by_alias=True, exclude_unset=True)


class ProfileResponse(BaseModel):
    """프로필 응답 - {profile: {...}}"""

    profile: dict[str, Any]
