"""식재료 관련 라우트"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from cooking_assistant.api.dependencies import require_authentication
from cooking_assistant.api.schemas.common import SuccessResponse
from cooking_assistant.api.schemas.ingredient import (
    IngredientCreateRequest,
    IngredientListResponse,
    IngredientResponse,
    IngredientSummaryResponse,
    IngredientUpdateRequest,
)
from cooking_assistant.db.session import get_session
from cooking_assistant.services import ingredient_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=IngredientListResponse)
async def list_ingredients(
    location: Optional[str] = Query(None, description="보관 위치 필터 (냉장실/냉동실/실온)"),
    user: dict = Depends(require_authentication),
    session: AsyncSession = Depends(get_session),
) -> IngredientListResponse:
    """
    보유 식재료 목록

    유통기한이 가까운 순으로 정렬되며 각 항목에 expiryStatus 라벨이 붙습니다.
    """
    try:
        ingredients = await ingredient_service.list_ingredients(session, user["id"], location=location)
    except Exception:
        logger.exception("Error fetching ingredients")
        raise HTTPException(status_code=500, detail="Failed to fetch ingredients")

    return IngredientListResponse(
        ingredients=[ingredient_service.with_expiry_status(ing) for ing in ingredients]
    )


@router.get("/summary", response_model=IngredientSummaryResponse)
async def get_ingredient_summary(
    user: dict = Depends(require_authentication),
    session: AsyncSession = Depends(get_session),
) -> IngredientSummaryResponse:
    """보관 위치별 식재료 개수와 3일 이내 만료 개수"""
    ingredients = await ingredient_service.list_ingredients(session, user["id"])
    return IngredientSummaryResponse(**ingredient_service.summarize_by_location(ingredients))


@router.post("", response_model=IngredientResponse)
async def add_ingredient(
    request: IngredientCreateRequest,
    user: dict = Depends(require_authentication),
    session: AsyncSession = Depends(get_session),
) -> IngredientResponse:
    """
    식재료 추가

    - id, userId, createdAt은 서버에서 부여
    - category를 보내지 않으면 이름으로 자동 분류
    """
    try:
        ingredient = await ingredient_service.add_ingredient(session, user["id"], request.to_patch())
    except Exception:
        logger.exception("Error adding ingredient")
        raise HTTPException(status_code=500, detail="Failed to add ingredient")

    return IngredientResponse(ingredient=ingredient)


@router.put("/{ingredient_id}", response_model=IngredientResponse)
async def update_ingredient(
    ingredient_id: str,
    request: IngredientUpdateRequest,
    user: dict = Depends(require_authentication),
    session: AsyncSession = Depends(get_session),
) -> IngredientResponse:
    """식재료 수정 (보낸 필드만 병합)"""
    try:
        ingredient = await ingredient_service.update_ingredient(
            session, user["id"], ingredient_id, request.to_patch()
        )
    except ingredient_service.IngredientNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return IngredientResponse(ingredient=ingredient)


@router.delete("/{ingredient_id}", response_model=SuccessResponse)
async def delete_ingredient(
    ingredient_id: str,
    user: dict = Depends(require_authentication),
    session: AsyncSession = Depends(get_session),
) -> SuccessResponse:
    """식재료 삭제"""
    try:
        await ingredient_service.delete_ingredient(session, user["id"], ingredient_id)
    except ingredient_service.IngredientNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return SuccessResponse(success=True)
