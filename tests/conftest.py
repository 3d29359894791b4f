import asyncio
from collections.abc import AsyncGenerator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import pool
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from cooking_assistant.db.session import create_tables, get_session
from cooking_assistant.main import app
from cooking_assistant.services.conversation_store import (
    ConversationStore,
    clear_memory_store,
    get_conversation_store,
)

TEST_PASSWORD = "password123"


@pytest.fixture
def session_factory(tmp_path):
    """테스트마다 새 SQLite 파일 DB"""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        poolclass=pool.NullPool,
    )
    asyncio.run(create_tables(engine))
    factory = async_sessionmaker(bind=engine, expire_on_commit=False, class_=AsyncSession)
    yield factory
    asyncio.run(engine.dispose())


@pytest.fixture
def client(session_factory) -> TestClient:
    """DB 세션과 대화 저장소를 테스트용으로 교체한 TestClient"""

    async def override_get_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_conversation_store] = lambda: ConversationStore(None, 3600)
    clear_memory_store()
    yield TestClient(app)
    app.dependency_overrides.clear()
    clear_memory_store()


def _signup_and_login(client: TestClient, email: str, name: str) -> dict:
    signup = client.post("/api/signup", json={"email": email, "password": TEST_PASSWORD, "name": name})
    assert signup.status_code == 200, signup.text
    login = client.post("/api/login", json={"email": email, "password": TEST_PASSWORD})
    assert login.status_code == 200, login.text
    return login.json()


@pytest.fixture
def register(client):
    """회원가입 후 로그인 응답을 돌려주는 함수"""

    def _register(email: str = "cook@example.com", name: str = "요리사") -> dict:
        return _signup_and_login(client, email, name)

    return _register


@pytest.fixture
def logged_in(register) -> dict:
    return register()


@pytest.fixture
def auth_headers(logged_in) -> dict:
    return {"Authorization": f"Bearer {logged_in['accessToken']}"}
