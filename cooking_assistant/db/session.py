from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from cooking_assistant.core.config import get_settings

settings = get_settings()


def _engine_options(database_url: str) -> dict:
    """SQLite는 커넥션 풀 옵션을 받지 않으므로 서버형 DB에만 적용"""
    if database_url.startswith("sqlite"):
        return {}
    return {
        "pool_pre_ping": True,  # 연결 사용 전 유효성 검사
        "pool_size": 5,  # 연결 풀 크기
        "max_overflow": 10,  # 최대 추가 연결 수
        "pool_recycle": 3600,  # 1시간마다 연결 재생성
    }


engine: AsyncEngine = create_async_engine(
    str(settings.database_url),
    echo=False,
    **_engine_options(str(settings.database_url)),
)

SessionLocal = async_sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
    expire_on_commit=False,
    class_=AsyncSession,
)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield a database session for request scope injections."""
    async with SessionLocal() as session:
        yield session


async def create_tables(bind: AsyncEngine | None = None) -> None:
    """kv_store 테이블 생성 (로컬/테스트 환경용)"""
    from cooking_assistant.db.base import Base
    from cooking_assistant.db import models  # noqa: F401 - registers models

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
