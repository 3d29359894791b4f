"""리뷰 / 피드백 스키마"""
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ReviewCreateRequest(BaseModel):
    """레시피 리뷰 작성 요청"""

    model_config = ConfigDict(populate_by_name=True)

    recipe_id: Union[str, int] = Field(..., alias="recipeId")
    recipe_name: str = Field(..., alias="recipeName")
    rating: int = Field(..., ge=1, le=5, description="별점 (1-5)")
    review: str = Field("", description="리뷰 내용")
    image: Optional[str] = Field(None, description="사진 (data URL 또는 이미지 URL)")

    @field_validator("recipe_id")
    @classmethod
    def normalize_recipe_id(cls, v):
        return str(v)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class ReviewListResponse(BaseModel):
    reviews: list[dict[str, Any]]


class ReviewResponse(BaseModel):
    review: dict[str, Any]


class FeedbackCreateRequest(BaseModel):
    """조리 후 피드백 요청"""

    model_config = ConfigDict(populate_by_name=True)

    recipe_id: Union[str, int] = Field(..., alias="recipeId")
    rating: int = Field(..., ge=1, le=5, description="전체 만족도")
    time_rating: int = Field(3, ge=1, le=5, alias="timeRating", description="조리 시간 평가")
    difficulty_rating: int = Field(3, ge=1, le=5, alias="difficultyRating", description="난이도 평가")
    tags: list[str] = Field(default_factory=list)
    comment: str = ""

    @field_validator("recipe_id")
    @classmethod
    def normalize_recipe_id(cls, v):
        return str(v)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class FeedbackResponse(BaseModel):
    feedback: dict[str, Any]
