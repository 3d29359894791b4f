"""완료한 레시피 라우트"""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from cooking_assistant.api.dependencies import require_authentication
from cooking_assistant.api.schemas.saved_recipe import (
    CompletedRecipeResponse,
    RecipeSnapshot,
    SavedRecipeListResponse,
)
from cooking_assistant.db.session import get_session
from cooking_assistant.services import completed_recipe_service

router = APIRouter()


@router.get("", response_model=SavedRecipeListResponse)
async def list_completed_recipes(
    user: dict = Depends(require_authentication),
    session: AsyncSession = Depends(get_session),
) -> SavedRecipeListResponse:
    """완료한 레시피 (최신순)"""
    recipes = await completed_recipe_service.list_completed_recipes(session, user["id"])
    return SavedRecipeListResponse(recipes=recipes)


@router.post("", response_model=CompletedRecipeResponse)
async def record_completed_recipe(
    request: RecipeSnapshot,
    user: dict = Depends(require_authentication),
    session: AsyncSession = Depends(get_session),
) -> CompletedRecipeResponse:
    """
    요리 완료 기록

    같은 레시피를 오늘 이미 완료했다면 새로 기록하지 않고 alreadyCompleted=true를 반환합니다.
    """
    try:
        recipe, already = await completed_recipe_service.record_completion(
            session, user["id"], request.to_dict()
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return CompletedRecipeResponse(recipe=recipe, alreadyCompleted=already)
