"""리뷰 / 피드백 라우트"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from cooking_assistant.api.dependencies import require_authentication
from cooking_assistant.api.schemas.review import (
    FeedbackCreateRequest,
    FeedbackResponse,
    ReviewCreateRequest,
    ReviewListResponse,
    ReviewResponse,
)
from cooking_assistant.db.session import get_session
from cooking_assistant.services import review_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/reviews", response_model=ReviewResponse)
async def create_review(
    request: ReviewCreateRequest,
    user: dict = Depends(require_authentication),
    session: AsyncSession = Depends(get_session),
) -> ReviewResponse:
    """
    레시피 리뷰 작성

    작성자 이름과 이니셜은 로그인한 사용자 정보로 채워집니다.
    """
    review = await review_service.add_review(session, user, request.to_dict())
    return ReviewResponse(review=review)


@router.get("/reviews", response_model=ReviewListResponse)
async def list_reviews(
    recipe_id: Optional[str] = Query(None, alias="recipeId"),
    user: dict = Depends(require_authentication),
    session: AsyncSession = Depends(get_session),
) -> ReviewListResponse:
    """커뮤니티 리뷰 목록 (최신순)"""
    reviews = await review_service.list_reviews(session, recipe_id)
    return ReviewListResponse(reviews=reviews)


@router.post("/feedback", response_model=FeedbackResponse)
async def create_feedback(
    request: FeedbackCreateRequest,
    user: dict = Depends(require_authentication),
    session: AsyncSession = Depends(get_session),
) -> FeedbackResponse:
    """조리 후 피드백 (별점, 시간/난이도 평가, 태그, 코멘트)"""
    try:
        feedback = await review_service.add_feedback(session, user["id"], request.to_dict())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return FeedbackResponse(feedback=feedback)
