"""사용자 프로필 서비스"""
import logging
from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from cooking_assistant.db import kv_store
from cooking_assistant.utils.timestamps import now_iso

logger = logging.getLogger(__name__)


class ProfileNotFoundError(LookupError):
    """프로필이 존재하지 않음"""


async def get_profile(session: AsyncSession, user_id: str) -> Optional[dict[str, Any]]:
    """사용자 프로필 조회"""
    return await kv_store.get(session, kv_store.user_key(user_id, "profile"))


async def update_profile(
    session: AsyncSession,
    user_id: str,
    patch: dict[str, Any],
) -> dict[str, Any]:
    """
    프로필 수정 (얕은 병합)

    기존 프로필 위에 patch를 덮어쓰고, id는 항상 요청한 사용자로 고정하며
    updatedAt을 갱신한다.
    """
    existing = await get_profile(session, user_id) or {}
    updated = {
        **existing,
        **patch,
        "id": user_id,
        "updatedAt": now_iso(),
    }
    await kv_store.set(session, kv_store.user_key(user_id, "profile"), updated)
    logger.info("Profile updated: user_id=%s keys=%s", user_id, sorted(patch))
    return updated


def profile_allergies(profile: Optional[dict[str, Any]]) -> list[str]:
    """프로필의 알레르기 목록 (없으면 빈 리스트)"""
    if not profile:
        return []
    return [a for a in profile.get("allergies") or [] if isinstance(a, str) and a.strip()]
