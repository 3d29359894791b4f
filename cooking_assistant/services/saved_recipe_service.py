"""저장(찜)한 레시피 서비스"""
import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from cooking_assistant.db import kv_store
from cooking_assistant.utils.timestamps import now_iso

logger = logging.getLogger(__name__)


class RecipeAlreadySavedError(ValueError):
    """이미 저장된 레시피"""


class SavedRecipeNotFoundError(LookupError):
    """저장 목록에 없는 레시피"""


def _key(user_id: str) -> str:
    return kv_store.user_key(user_id, "saved_recipes")


async def list_saved_recipes(session: AsyncSession, user_id: str) -> list[dict[str, Any]]:
    return await kv_store.get(session, _key(user_id)) or []


async def save_recipe(session: AsyncSession, user_id: str, recipe: dict[str, Any]) -> dict[str, Any]:
    """
    레시피 스냅샷 저장 (savedAt 추가, 목록 끝에 추가)

    Raises:
        ValueError: id가 없는 경우
        RecipeAlreadySavedError: 같은 id가 이미 저장된 경우
    """
    recipe_id = recipe.get("id")
    if recipe_id in (None, ""):
        raise ValueError("Recipe id is required")

    saved = await list_saved_recipes(session, user_id)
    if any(r.get("id") == recipe_id for r in saved):
        raise RecipeAlreadySavedError("Recipe already saved")

    saved_recipe = {**recipe, "savedAt": now_iso()}
    saved.append(saved_recipe)
    await kv_store.set(session, _key(user_id), saved)
    logger.info("✅ 레시피 저장: %s (user_id=%s)", recipe.get("name"), user_id)
    return saved_recipe


async def remove_saved_recipe(session: AsyncSession, user_id: str, recipe_id: str) -> None:
    """저장 해제 - 목록에 없으면 SavedRecipeNotFoundError"""
    saved = await list_saved_recipes(session, user_id)
    remaining = [r for r in saved if str(r.get("id")) != str(recipe_id)]
    if len(remaining) == len(saved):
        raise SavedRecipeNotFoundError("Recipe not found")

    await kv_store.set(session, _key(user_id), remaining)
    logger.info("❌ 레시피 저장 해제: %s (user_id=%s)", recipe_id, user_id)


async def toggle_saved_recipe(
    session: AsyncSession,
    user_id: str,
    recipe: dict[str, Any],
) -> tuple[bool, list[dict[str, Any]]]:
    """
    저장/저장 해제 토글

    저장되어 있지 않으면 맨 앞에 추가하고, 저장되어 있으면 제거한다.
    두 번 토글하면 원래 목록으로 돌아온다.

    Returns:
        (토글 후 저장 여부, 갱신된 목록)
    """
    recipe_id = recipe.get("id")
    if recipe_id in (None, ""):
        raise ValueError("Recipe id is required")

    saved = await list_saved_recipes(session, user_id)
    if any(r.get("id") == recipe_id for r in saved):
        updated = [r for r in saved if r.get("id") != recipe_id]
        is_saved = False
    else:
        updated = [{**recipe, "savedAt": now_iso()}, *saved]
        is_saved = True

    await kv_store.set(session, _key(user_id), updated)
    return is_saved, updated
