"""저장 레시피 라우트"""
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from cooking_assistant.api.dependencies import require_authentication
from cooking_assistant.api.schemas.common import SuccessResponse
from cooking_assistant.api.schemas.saved_recipe import (
    RecipeSnapshot,
    SavedRecipeListResponse,
    SavedRecipeResponse,
    ToggleSavedRecipeResponse,
)
from cooking_assistant.db.session import get_session
from cooking_assistant.services import saved_recipe_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=SavedRecipeListResponse)
async def list_saved_recipes(
    user: dict = Depends(require_authentication),
    session: AsyncSession = Depends(get_session),
) -> SavedRecipeListResponse:
    """저장한 레시피 목록"""
    try:
        recipes = await saved_recipe_service.list_saved_recipes(session, user["id"])
    except Exception:
        logger.exception("Error fetching saved recipes")
        raise HTTPException(status_code=500, detail="Failed to fetch saved recipes")
    return SavedRecipeListResponse(recipes=recipes)


@router.post("", response_model=SavedRecipeResponse)
async def save_recipe(
    request: RecipeSnapshot,
    user: dict = Depends(require_authentication),
    session: AsyncSession = Depends(get_session),
) -> SavedRecipeResponse:
    """레시피 저장 - 이미 저장된 id면 400"""
    try:
        recipe = await saved_recipe_service.save_recipe(session, user["id"], request.to_dict())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return SavedRecipeResponse(recipe=recipe)


@router.post("/toggle", response_model=ToggleSavedRecipeResponse)
async def toggle_saved_recipe(
    request: RecipeSnapshot,
    user: dict = Depends(require_authentication),
    session: AsyncSession = Depends(get_session),
) -> ToggleSavedRecipeResponse:
    """저장/저장 해제 토글"""
    try:
        saved, recipes = await saved_recipe_service.toggle_saved_recipe(
            session, user["id"], request.to_dict()
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return ToggleSavedRecipeResponse(saved=saved, recipes=recipes)


@router.delete("/{recipe_id}", response_model=SuccessResponse)
async def remove_saved_recipe(
    recipe_id: str,
    user: dict = Depends(require_authentication),
    session: AsyncSession = Depends(get_session),
) -> SuccessResponse:
    """저장 해제"""
    try:
        await saved_recipe_service.remove_saved_recipe(session, user["id"], recipe_id)
    except saved_recipe_service.SavedRecipeNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return SuccessResponse(success=True)
