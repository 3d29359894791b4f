"""대화 상태 저장소 테스트"""

import json
from datetime import timedelta
from unittest.mock import AsyncMock

import pytest

from cooking_assistant.services import conversation_store
from cooking_assistant.services.conversation_store import ConversationStore, clear_memory_store


@pytest.fixture(autouse=True)
def _clean_memory():
    clear_memory_store()
    yield
    clear_memory_store()


@pytest.mark.asyncio
async def test_memory_store_round_trip():
    store = ConversationStore(None, ttl_seconds=60)

    await store.set("cooking", "u1", {"currentStep": 2})

    assert await store.get("cooking", "u1") == {"currentStep": 2}
    assert await store.get("assistant", "u1") is None
    assert await store.get("cooking", "u2") is None

    await store.delete("cooking", "u1")
    assert await store.get("cooking", "u1") is None


@pytest.mark.asyncio
async def test_memory_store_expires(monkeypatch):
    store = ConversationStore(None, ttl_seconds=60)
    await store.set("assistant", "u1", {"state": "idle"})

    later = conversation_store.utc_now() + timedelta(seconds=61)
    monkeypatch.setattr(conversation_store, "utc_now", lambda: later)

    assert await store.get("assistant", "u1") is None


@pytest.mark.asyncio
async def test_memory_store_sweeps_expired_sessions_on_set(monkeypatch):
    """다시 조회되지 않는 만료 세션도 다음 저장 시 정리"""
    store = ConversationStore(None, ttl_seconds=60)
    await store.set("cooking", "gone", {"currentStep": 1})
    await store.set("assistant", "gone", {"state": "idle"})

    later = conversation_store.utc_now() + timedelta(seconds=61)
    monkeypatch.setattr(conversation_store, "utc_now", lambda: later)
    await store.set("cooking", "u2", {"currentStep": 0})

    assert set(conversation_store._MEMORY) == {"session:cooking:u2"}


@pytest.mark.asyncio
async def test_redis_store_uses_ttl():
    redis_client = AsyncMock()
    redis_client.get.return_value = json.dumps({"state": "idle"})
    store = ConversationStore(redis_client, ttl_seconds=120)

    await store.set("assistant", "u1", {"state": "recipe_suggested"})
    value = await store.get("assistant", "u1")
    await store.delete("assistant", "u1")

    redis_client.set.assert_awaited_once_with(
        "session:assistant:u1", json.dumps({"state": "recipe_suggested"}, ensure_ascii=False), ex=120
    )
    redis_client.get.assert_awaited_once_with("session:assistant:u1")
    redis_client.delete.assert_awaited_once_with("session:assistant:u1")
    assert value == {"state": "idle"}
