"""식재료 관련 스키마"""
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cooking_assistant.services.ingredient_service import STORAGE_LOCATIONS


class IngredientBase(BaseModel):
    """식재료 공통 필드"""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    category: Optional[str] = Field(None, description="분류 (없으면 이름으로 자동 분류)")
    quantity: Optional[Union[str, int, float]] = Field(None, description="수량")
    unit: Optional[str] = Field(None, description="단위 (개, g, ml ...)")
    expiry_date: Optional[str] = Field(None, alias="expiryDate", description="유통기한 (ISO 8601)")
    location: Optional[str] = Field(None, description="보관 위치 (냉장실/냉동실/실온)")
    notes: Optional[str] = None

    @field_validator("location")
    @classmethod
    def validate_location(cls, v):
        if v is not None and v not in STORAGE_LOCATIONS:
            raise ValueError(f"location must be one of {', '.join(STORAGE_LOCATIONS)}")
        return v

    def to_patch(self) -> dict[str, Any]:
        """요청에 들어온 키만 camelCase로 반환"""
        return self.model_dump(by_alias=True, exclude_unset=True)


class IngredientCreateRequest(IngredientBase):
    """식재료 추가 요청"""

    name: str = Field(..., min_length=1, description="식재료 이름")


class IngredientUpdateRequest(IngredientBase):
    """식재료 수정 요청 (부분 수정)"""

    name: Optional[str] = Field(None, min_length=1, description="식재료 이름")


class IngredientListResponse(BaseModel):
    """식재료 목록 응답"""

    ingredients: list[dict[str, Any]]


class IngredientResponse(BaseModel):
    """식재료 단건 응답"""

    ingredient: dict[str, Any]


class LocationSummary(BaseModel):
    """보관 위치별 요약"""

    model_config = ConfigDict(populate_by_name=True)

    location: str
    count: int
    expiring_count: int = Field(alias="expiringCount")


class IngredientSummaryResponse(BaseModel):
    """보관 위치별 식재료 요약 응답"""

    model_config = ConfigDict(populate_by_name=True)

    total: int
    expiring_count: int = Field(alias="expiringCount")
    locations: list[LocationSummary]
