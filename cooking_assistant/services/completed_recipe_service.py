"""완료한 레시피 기록 서비스"""
import logging
from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from cooking_assistant.db import kv_store
from cooking_assistant.utils.timestamps import now_iso, parse_iso_date, utc_now

logger = logging.getLogger(__name__)


def _key(user_id: str) -> str:
    return kv_store.user_key(user_id, "completed_recipes")


async def list_completed_recipes(session: AsyncSession, user_id: str) -> list[dict[str, Any]]:
    """완료 기록 (최신순)"""
    return await kv_store.get(session, _key(user_id)) or []


def completed_today(
    completed: list[dict[str, Any]],
    recipe_id: str,
) -> Optional[dict[str, Any]]:
    """같은 레시피를 오늘(UTC 기준) 이미 완료했으면 그 기록을 반환"""
    today = utc_now().date()
    for record in completed:
        if str(record.get("id")) == str(recipe_id) and parse_iso_date(record.get("completedAt")) == today:
            return record
    return None


async def record_completion(
    session: AsyncSession,
    user_id: str,
    recipe: dict[str, Any],
) -> tuple[dict[str, Any], bool]:
    """
    요리 완료 기록 (같은 날 같은 레시피는 한 번만)

    Returns:
        (기록, 이미 오늘 완료했는지 여부)
    """
    recipe_id = recipe.get("id")
    if recipe_id in (None, ""):
        raise ValueError("Recipe id is required")

    completed = await list_completed_recipes(session, user_id)
    existing = completed_today(completed, recipe_id)
    if existing:
        logger.info("⚠️ 오늘 이미 완료한 레시피: %s", recipe.get("name"))
        return existing, True

    record = {**recipe, "completedAt": now_iso()}
    await kv_store.set(session, _key(user_id), [record, *completed])
    logger.info("✅ 레시피 완료 저장: %s 총 %d개", recipe.get("name"), len(completed) + 1)
    return record, False
