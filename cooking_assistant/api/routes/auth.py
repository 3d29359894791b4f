"""인증 관련 라우트 (Bearer 토큰 기반)"""
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from cooking_assistant.api.dependencies import require_authentication
from cooking_assistant.api.schemas.auth import (
    LoginRequest,
    LoginResponse,
    PasswordChangeRequest,
    PublicUser,
    SignupRequest,
    SignupResponse,
)
from cooking_assistant.api.schemas.common import SuccessResponse
from cooking_assistant.db.session import get_session
from cooking_assistant.services import auth_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/signup", response_model=SignupResponse)
async def signup(
    signup_data: SignupRequest,
    session: AsyncSession = Depends(get_session),
) -> SignupResponse:
    """
    회원가입

    - 이메일은 고유해야 함
    - 프로필, 식재료, 저장 레시피 목록을 함께 초기화
    """
    try:
        user = await auth_service.create_user(
            session=session,
            email=signup_data.email,
            password=signup_data.password,
            name=signup_data.name,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception:
        logger.exception("Signup error")
        raise HTTPException(status_code=500, detail="Internal server error during signup")

    return SignupResponse(success=True, user=PublicUser(**user))


@router.post("/login", response_model=LoginResponse)
async def login(
    login_data: LoginRequest,
    session: AsyncSession = Depends(get_session),
) -> LoginResponse:
    """
    로그인 (이메일 기반)

    - 성공 시 Bearer 액세스 토큰 발급
    """
    account = await auth_service.authenticate_user(
        session=session,
        email=login_data.email,
        password=login_data.password,
    )

    if not account:
        raise HTTPException(status_code=401, detail="Invalid email or password")

    logger.info("🔐 로그인 성공 - User ID: %s", account["id"])
    return LoginResponse(
        success=True,
        accessToken=auth_service.issue_access_token(account["id"]),
        user=PublicUser(**auth_service.public_user(account)),
    )


@router.get("/me", response_model=PublicUser)
async def get_current_user(user: dict = Depends(require_authentication)) -> PublicUser:
    """현재 로그인한 사용자 정보 조회"""
    return PublicUser(**user)


@router.put("/account/password", response_model=SuccessResponse)
async def change_password(
    request: PasswordChangeRequest,
    user: dict = Depends(require_authentication),
    session: AsyncSession = Depends(get_session),
) -> SuccessResponse:
    """비밀번호 변경 (새 비밀번호 6자 이상)"""
    if len(request.new_password) < 6:
        raise HTTPException(status_code=400, detail="New password must be at least 6 characters")

    try:
        await auth_service.change_password(
            session,
            user["id"],
            current_password=request.current_password,
            new_password=request.new_password,
        )
    except PermissionError as e:
        raise HTTPException(status_code=401, detail=str(e))
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return SuccessResponse(success=True)


@router.delete("/account", response_model=SuccessResponse)
async def delete_account(
    user: dict = Depends(require_authentication),
    session: AsyncSession = Depends(get_session),
) -> SuccessResponse:
    """계정 및 모든 사용자 데이터 삭제"""
    try:
        await auth_service.delete_user(session, user["id"])
    except Exception:
        logger.exception("Error deleting account")
        raise HTTPException(status_code=500, detail="Failed to delete account")
    return SuccessResponse(success=True)
