"""저장/완료 레시피 스키마"""
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RecipeSnapshot(BaseModel):
    """
    레시피 스냅샷

    화면에 보이던 레시피 정보를 그대로 저장한다. id 외의 필드는 자유 형식.
    """

    model_config = ConfigDict(extra="allow")

    id: Optional[Union[str, int]] = Field(None, description="레시피 id")
    name: Optional[str] = None

    @field_validator("id")
    @classmethod
    def normalize_id(cls, v):
        return str(v) if v is not None else None

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class SavedRecipeListResponse(BaseModel):
    recipes: list[dict[str, Any]]


class SavedRecipeResponse(BaseModel):
    recipe: dict[str, Any]


class ToggleSavedRecipeResponse(BaseModel):
    """토글 결과 - 토글 후 저장 여부와 전체 목록"""

    saved: bool
    recipes: list[dict[str, Any]]


class CompletedRecipeResponse(BaseModel):
    """완료 기록 결과"""

    model_config = ConfigDict(populate_by_name=True)

    recipe: dict[str, Any]
    already_completed: bool = Field(alias="alreadyCompleted")
