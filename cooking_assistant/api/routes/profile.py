"""사용자 프로필 라우트"""
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from cooking_assistant.api.dependencies import require_authentication
from cooking_assistant.api.schemas.profile import ProfileResponse, ProfileUpdateRequest
from cooking_assistant.db.session import get_session
from cooking_assistant.services import profile_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=ProfileResponse)
async def get_profile(
    user: dict = Depends(require_authentication),
    session: AsyncSession = Depends(get_session),
) -> ProfileResponse:
    """내 프로필 조회"""
    try:
        profile = await profile_service.get_profile(session, user["id"])
    except Exception:
        logger.exception("Error fetching profile")
        raise HTTPException(status_code=500, detail="Failed to fetch profile")

    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")

    return ProfileResponse(profile=profile)


@router.put("", response_model=ProfileResponse)
async def update_profile(
    request: ProfileUpdateRequest,
    user: dict = Depends(require_authentication),
    session: AsyncSession = Depends(get_session),
) -> ProfileResponse:
    """
    내 프로필 수정

    선호 요리, 알레르기, 보유 조리도구, 식단 제한 등을 기존 프로필에 병합합니다.
    """
    try:
        profile = await profile_service.update_profile(session, user["id"], request.to_patch())
    except Exception:
        logger.exception("Error updating profile")
        raise HTTPException(status_code=500, detail="Failed to update profile")

    return ProfileResponse(profile=profile)
