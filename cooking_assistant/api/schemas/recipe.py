"""레시피 관련 스키마"""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class RecipeListResponse(BaseModel):
    """레시피 목록 응답"""

    recipes: list[dict[str, Any]]
    categories: list[str]


class RecipeDetailResponse(BaseModel):
    """레시피 상세 응답"""

    recipe: dict[str, Any]


class RecommendationRequest(BaseModel):
    """
    레시피 추천 요청

    ingredients와 useInventory를 모두 생략하면 재료 정보 없이 프로필만으로 추천합니다.
    """

    model_config = ConfigDict(populate_by_name=True)

    ingredients: Optional[list[str]] = Field(None, description="보유 재료 이름 목록")
    cooking_time: Optional[str] = Field(None, alias="cookingTime")
    number_of_people: Optional[str] = Field(None, alias="numberOfPeople")
    preferences: list[str] = Field(default_factory=list, description="맛/조리 선호 (매운 맛, 간단한 조리 ...)")
    use_inventory: bool = Field(False, alias="useInventory", description="저장된 식재료 목록을 재료로 사용")


class RecommendationResponse(BaseModel):
    """추천 결과"""

    model_config = ConfigDict(populate_by_name=True)

    recipes: list[dict[str, Any]]
    used_context: bool = Field(alias="usedContext")
