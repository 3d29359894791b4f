"""키-값 저장소 - kv_store 테이블 위의 얇은 get/set 계층

모든 사용자 데이터(프로필, 식재료, 저장/완료 레시피, 리뷰 등)는 문자열 키 아래
불투명한 JSON 값으로 저장된다. 쓰기 연산은 호출마다 즉시 커밋한다.
"""
from typing import Any, Iterable

from sqlalchemy import delete as sql_delete
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.attributes import flag_modified

from cooking_assistant.db.models import KVEntry


def user_key(user_id: str, name: str) -> str:
    """사용자별 키 생성 (예: users:<id>:ingredients)"""
    return f"users:{user_id}:{name}"


async def get(session: AsyncSession, key: str) -> Any:
    """키에 저장된 값 조회 (없으면 None)"""
    result = await session.execute(select(KVEntry.value).where(KVEntry.key == key))
    return result.scalar_one_or_none()


async def set(session: AsyncSession, key: str, value: Any) -> None:
    """키에 값 저장 (덮어쓰기)"""
    await _upsert(session, key, value)
    await session.commit()


async def delete(session: AsyncSession, key: str) -> None:
    """키 삭제"""
    await session.execute(sql_delete(KVEntry).where(KVEntry.key == key))
    await session.commit()


async def mget(session: AsyncSession, keys: Iterable[str]) -> list[Any]:
    """여러 키를 한 번에 조회 (입력 순서 유지, 없는 키는 None)"""
    keys = list(keys)
    if not keys:
        return []
    result = await session.execute(select(KVEntry.key, KVEntry.value).where(KVEntry.key.in_(keys)))
    found = {row.key: row.value for row in result.all()}
    return [found.get(key) for key in keys]


async def mset(session: AsyncSession, items: dict[str, Any]) -> None:
    """여러 키를 한 번에 저장"""
    for key, value in items.items():
        await _upsert(session, key, value)
    await session.commit()


async def mdel(session: AsyncSession, keys: Iterable[str]) -> None:
    """여러 키를 한 번에 삭제"""
    keys = list(keys)
    if not keys:
        return
    await session.execute(sql_delete(KVEntry).where(KVEntry.key.in_(keys)))
    await session.commit()


async def get_by_prefix(session: AsyncSession, prefix: str) -> dict[str, Any]:
    """접두사로 시작하는 모든 키-값 조회"""
    result = await session.execute(
        select(KVEntry.key, KVEntry.value).where(KVEntry.key.startswith(prefix, autoescape=True))
    )
    return {row.key: row.value for row in result.all()}


async def _upsert(session: AsyncSession, key: str, value: Any) -> None:
    entry = await session.get(KVEntry, key)
    if entry is None:
        session.add(KVEntry(key=key, value=value))
        await session.flush()
        return
    entry.value = value
    # 같은 리스트/딕셔너리 객체를 수정해 다시 넣는 경우에도 변경으로 인식
    flag_modified(entry, "value")
    await session.flush()
