"""키-값 저장소 테스트"""

import pytest

from cooking_assistant.db import kv_store


@pytest.mark.asyncio
async def test_set_get_delete(session_factory):
    async with session_factory() as session:
        assert await kv_store.get(session, "missing") is None

        await kv_store.set(session, "reviews", [{"id": "r1"}])
        assert await kv_store.get(session, "reviews") == [{"id": "r1"}]

        await kv_store.set(session, "reviews", [{"id": "r2"}, {"id": "r1"}])
        assert await kv_store.get(session, "reviews") == [{"id": "r2"}, {"id": "r1"}]

        await kv_store.delete(session, "reviews")
        assert await kv_store.get(session, "reviews") is None


@pytest.mark.asyncio
async def test_value_persists_across_sessions(session_factory):
    async with session_factory() as session:
        await kv_store.set(session, kv_store.user_key("u1", "profile"), {"name": "요리사"})

    async with session_factory() as session:
        assert await kv_store.get(session, "users:u1:profile") == {"name": "요리사"}


@pytest.mark.asyncio
async def test_in_place_mutation_is_saved(session_factory):
    """같은 리스트 객체를 수정해 다시 저장해도 반영"""
    async with session_factory() as session:
        await kv_store.set(session, "feedback", [])
        items = await kv_store.get(session, "feedback")
        items.append({"id": "f1"})
        await kv_store.set(session, "feedback", items)

    async with session_factory() as session:
        assert await kv_store.get(session, "feedback") == [{"id": "f1"}]


@pytest.mark.asyncio
async def test_mset_mget_mdel(session_factory):
    async with session_factory() as session:
        await kv_store.mset(session, {"a": 1, "b": {"x": True}, "c": "text"})

        assert await kv_store.mget(session, ["c", "missing", "a"]) == ["text", None, 1]
        assert await kv_store.mget(session, []) == []

        await kv_store.mdel(session, ["a", "b"])
        assert await kv_store.mget(session, ["a", "b", "c"]) == [None, None, "text"]


@pytest.mark.asyncio
async def test_get_by_prefix(session_factory):
    async with session_factory() as session:
        await kv_store.mset(
            session,
            {
                "users:u1:profile": {"id": "u1"},
                "users:u1:ingredients": [],
                "users:u10:profile": {"id": "u10"},
                "users:u_1:profile": {"id": "u_1"},
            },
        )

        result = await kv_store.get_by_prefix(session, "users:u1:")

    assert result == {"users:u1:profile": {"id": "u1"}, "users:u1:ingredients": []}
