"""인증 관련 서비스 로직 - 키-값 저장소 기반"""
import logging
import uuid

from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer
from passlib.context import CryptContext
from sqlalchemy.ext.asyncio import AsyncSession

from cooking_assistant.core.config import get_settings
from cooking_assistant.db import kv_store
from cooking_assistant.utils.timestamps import now_iso

logger = logging.getLogger(__name__)

# 비밀번호 해싱
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


class InvalidTokenError(Exception):
    """액세스 토큰이 없거나 위조/만료된 경우"""


def hash_password(password: str) -> str:
    """비밀번호 해싱"""
    # bcrypt는 72바이트 제한이 있으므로 잘라줌
    password_bytes = password.encode("utf-8")[:72]
    return pwd_context.hash(password_bytes.decode("utf-8", errors="ignore"))


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """비밀번호 검증"""
    password_bytes = plain_password.encode("utf-8")[:72]
    return pwd_context.verify(password_bytes.decode("utf-8", errors="ignore"), hashed_password)


def _serializer() -> URLSafeTimedSerializer:
    settings = get_settings()
    return URLSafeTimedSerializer(settings.token_secret_key, salt=settings.token_salt)


def issue_access_token(user_id: str) -> str:
    """사용자 ID를 서명한 Bearer 토큰 발급"""
    return _serializer().dumps({"uid": user_id})


def read_access_token(token: str) -> str:
    """
    Bearer 토큰 검증 후 사용자 ID 반환

    Raises:
        InvalidTokenError: 서명이 틀렸거나 만료된 토큰
    """
    settings = get_settings()
    try:
        payload = _serializer().loads(token, max_age=settings.token_max_age)
    except SignatureExpired as exc:
        raise InvalidTokenError("Token expired") from exc
    except BadSignature as exc:
        raise InvalidTokenError("Invalid token") from exc

    user_id = payload.get("uid") if isinstance(payload, dict) else None
    if not user_id:
        raise InvalidTokenError("Invalid token")
    return user_id


def _email_key(email: str) -> str:
    return f"auth:email:{email.strip().lower()}"


def public_user(account: dict) -> dict:
    """비밀번호 해시를 제외한 사용자 정보"""
    return {"id": account["id"], "email": account["email"], "name": account["name"]}


async def get_account(session: AsyncSession, user_id: str) -> dict | None:
    """user_id로 계정 조회"""
    return await kv_store.get(session, kv_store.user_key(user_id, "account"))


async def get_account_by_email(session: AsyncSession, email: str) -> dict | None:
    """이메일로 계정 조회"""
    user_id = await kv_store.get(session, _email_key(email))
    if not user_id:
        return None
    return await get_account(session, user_id)


async def create_user(session: AsyncSession, email: str, password: str, name: str) -> dict:
    """
    새 사용자 생성

    계정과 함께 빈 프로필, 빈 식재료/저장 레시피/완료 레시피 목록을 초기화한다.

    Args:
        session: DB 세션
        email: 이메일 (고유)
        password: 비밀번호
        name: 표시 이름

    Returns:
        공개 사용자 정보 {id, email, name}
    """
    if await get_account_by_email(session, email):
        raise ValueError("User with this email already exists")

    user_id = str(uuid.uuid4())
    created_at = now_iso()
    account = {
        "id": user_id,
        "email": email,
        "name": name,
        "passwordHash": hash_password(password),
        "createdAt": created_at,
    }

    await kv_store.mset(
        session,
        {
            _email_key(email): user_id,
            kv_store.user_key(user_id, "account"): account,
            kv_store.user_key(user_id, "profile"): {
                "id": user_id,
                "email": email,
                "name": name,
                "createdAt": created_at,
            },
            kv_store.user_key(user_id, "ingredients"): [],
            kv_store.user_key(user_id, "saved_recipes"): [],
            kv_store.user_key(user_id, "completed_recipes"): [],
        },
    )
    logger.info("User created: %s", user_id)
    return public_user(account)


async def authenticate_user(session: AsyncSession, email: str, password: str) -> dict | None:
    """
    사용자 인증 (이메일 로그인)

    Returns:
        인증 성공 시 계정 dict, 실패 시 None
    """
    account = await get_account_by_email(session, email)
    if not account:
        return None

    if not verify_password(password, account["passwordHash"]):
        return None

    return account


async def change_password(
    session: AsyncSession,
    user_id: str,
    current_password: str,
    new_password: str,
) -> None:
    """비밀번호 변경 - 현재 비밀번호가 틀리면 PermissionError"""
    account = await get_account(session, user_id)
    if not account:
        raise LookupError("User not found")
    if not verify_password(current_password, account["passwordHash"]):
        raise PermissionError("Current password is incorrect")

    account["passwordHash"] = hash_password(new_password)
    account["updatedAt"] = now_iso()
    await kv_store.set(session, kv_store.user_key(user_id, "account"), account)


async def delete_user(session: AsyncSession, user_id: str) -> None:
    """계정과 users:<id>:* 아래의 모든 데이터 삭제"""
    account = await get_account(session, user_id)
    user_keys = await kv_store.get_by_prefix(session, f"users:{user_id}:")
    keys = list(user_keys)
    if account:
        keys.append(_email_key(account["email"]))
    await kv_store.mdel(session, keys)
    logger.info("User deleted: %s (%d keys)", user_id, len(keys))
