"""API 의존성"""
import logging

from fastapi import Depends, Header, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from cooking_assistant.db.session import get_session
from cooking_assistant.services import auth_service

logger = logging.getLogger(__name__)


def extract_bearer_token(authorization: str | None) -> str:
    """Authorization 헤더에서 Bearer 토큰만 추출"""
    if not authorization:
        raise HTTPException(status_code=401, detail="No authorization token provided")

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise HTTPException(status_code=401, detail="Unauthorized")
    return token.strip()


async def require_authentication(
    authorization: str | None = Header(None),
    session: AsyncSession = Depends(get_session),
) -> dict:
    """
    인증 필수 의존성

    Bearer 토큰을 검증하고 공개 사용자 정보 {id, email, name}를 반환합니다.
    사용 예:
        @router.get("/protected")
        async def protected_route(user: dict = Depends(require_authentication)):
            ...
    """
    token = extract_bearer_token(authorization)
    try:
        user_id = auth_service.read_access_token(token)
    except auth_service.InvalidTokenError as exc:
        logger.info("Rejected access token: %s", exc)
        raise HTTPException(status_code=401, detail="Unauthorized")

    account = await auth_service.get_account(session, user_id)
    if not account:
        # 토큰은 유효하지만 계정이 삭제된 경우
        raise HTTPException(status_code=401, detail="Unauthorized")

    return auth_service.public_user(account)
