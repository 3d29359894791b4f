"""레시피 목록/상세/추천 라우트"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from cooking_assistant.api.dependencies import require_authentication
from cooking_assistant.api.schemas.recipe import (
    RecipeDetailResponse,
    RecipeListResponse,
    RecommendationRequest,
    RecommendationResponse,
)
from cooking_assistant.data import recipe_catalog
from cooking_assistant.db.session import get_session
from cooking_assistant.services import ingredient_service, profile_service, recommendation_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=RecipeListResponse)
async def list_recipes(
    category: Optional[str] = Query(None, description="카테고리 (전체/한식/양식/중식/일식/기타)"),
    user: dict = Depends(require_authentication),
) -> RecipeListResponse:
    """카테고리별 레시피 목록"""
    recipes = recipe_catalog.list_recipes(category)
    return RecipeListResponse(
        recipes=[recipe_catalog.recipe_summary(recipe) for recipe in recipes],
        categories=list(recipe_catalog.RECIPE_CATEGORIES),
    )


@router.post("/recommendations", response_model=RecommendationResponse)
async def recommend_recipes(
    request: RecommendationRequest,
    user: dict = Depends(require_authentication),
    session: AsyncSession = Depends(get_session),
) -> RecommendationResponse:
    """
    맞춤 레시피 추천

    1. 보유 재료(요청 또는 저장된 식재료)로 김치볶음밥/된장찌개/토마토 파스타 판단
    2. 프로필의 선호 요리와 식단 목표로 추가 추천
    3. 3개 미만이면 기본 레시피로 채움
    """
    profile = await profile_service.get_profile(session, user["id"]) or {}

    context = None
    if request.ingredients is not None or request.use_inventory:
        names = list(request.ingredients or [])
        if request.use_inventory:
            names.extend(await ingredient_service.ingredient_names(session, user["id"]))
        context = recommendation_service.CookingContext(
            ingredients=names,
            cooking_time=request.cooking_time,
            number_of_people=request.number_of_people,
            preferences=request.preferences,
        )

    recipes = recommendation_service.recommend_recipes(profile, context)
    logger.info(
        "🍳 추천 완료 - user_id=%s, 재료 %s개, 추천 %s개",
        user["id"],
        len(context.ingredients) if context else 0,
        len(recipes),
    )
    return RecommendationResponse(recipes=recipes, usedContext=context is not None)


@router.get("/{recipe_id}", response_model=RecipeDetailResponse)
async def get_recipe(
    recipe_id: str,
    user: dict = Depends(require_authentication),
) -> RecipeDetailResponse:
    """레시피 상세 (재료, 조리 단계, 팁, 영양 정보)"""
    recipe = recipe_catalog.get_recipe(recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return RecipeDetailResponse(recipe=recipe_catalog.recipe_detail(recipe))
