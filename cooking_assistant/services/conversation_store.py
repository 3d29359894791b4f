"""대화/조리 세션 상태 저장소

Redis가 설정되어 있으면 TTL을 걸어 Redis에 저장하고,
없으면 프로세스 메모리에 같은 TTL로 보관한다.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Dict, Optional

import redis.asyncio as redis

from cooking_assistant.core.config import get_settings
from cooking_assistant.db.redis_session import get_redis_client
from cooking_assistant.utils.timestamps import utc_now

logger = logging.getLogger(__name__)

_MEMORY: Dict[str, "_MemoryEntry"] = {}


@dataclass
class _MemoryEntry:
    value: dict
    expires_at: datetime


def _evict_expired(now: datetime) -> None:
    """만료된 메모리 세션 정리"""
    expired = [key for key, entry in _MEMORY.items() if entry.expires_at <= now]
    for key in expired:
        _MEMORY.pop(key, None)


class ConversationStore:
    """사용자별 세션 상태 (namespace: cooking / assistant)"""

    def __init__(self, redis_client: Optional[redis.Redis], ttl_seconds: int):
        self.redis_client = redis_client
        self.ttl = ttl_seconds

    @staticmethod
    def _key(namespace: str, user_id: str) -> str:
        return f"session:{namespace}:{user_id}"

    async def get(self, namespace: str, user_id: str) -> Optional[dict[str, Any]]:
        key = self._key(namespace, user_id)
        if self.redis_client:
            raw = await self.redis_client.get(key)
            return json.loads(raw) if raw else None

        entry = _MEMORY.get(key)
        if entry is None:
            return None
        if entry.expires_at <= utc_now():
            _MEMORY.pop(key, None)
            return None
        return entry.value

    async def set(self, namespace: str, user_id: str, value: dict[str, Any]) -> None:
        key = self._key(namespace, user_id)
        if self.redis_client:
            await self.redis_client.set(key, json.dumps(value, ensure_ascii=False), ex=self.ttl)
            return
        now = utc_now()
        _evict_expired(now)
        _MEMORY[key] = _MemoryEntry(value=value, expires_at=now + timedelta(seconds=self.ttl))

    async def delete(self, namespace: str, user_id: str) -> None:
        key = self._key(namespace, user_id)
        if self.redis_client:
            await self.redis_client.delete(key)
            return
        _MEMORY.pop(key, None)


def clear_memory_store() -> None:
    """프로세스 메모리 저장소 비우기 (테스트용)"""
    _MEMORY.clear()


def get_conversation_store() -> ConversationStore:
    """FastAPI 의존성 - 현재 설정의 저장소"""
    return ConversationStore(get_redis_client(), get_settings().assistant_session_ttl)
