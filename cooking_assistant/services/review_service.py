"""리뷰 / 피드백 서비스

리뷰는 커뮤니티에 공개되는 전체 목록(reviews)에, 피드백은 조리 직후의
평가 기록(feedback)에 최신순으로 쌓인다.
"""
import logging
import uuid
from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from cooking_assistant.db import kv_store
from cooking_assistant.utils.timestamps import now_iso

logger = logging.getLogger(__name__)

REVIEWS_KEY = "reviews"
FEEDBACK_KEY = "feedback"

FEEDBACK_TAGS = (
    "맛있었어요",
    "쉬웠어요",
    "어려웠어요",
    "시간이 오래 걸렸어요",
    "빠르게 완성했어요",
    "재료가 부족했어요",
    "다시 만들고 싶어요",
    "가족이 좋아했어요",
)

RATING_LABELS = {1: "아쉬워요", 2: "별로예요", 3: "괜찮아요", 4: "좋아요", 5: "최고예요!"}


def _initial(name: str) -> str:
    return name[:1].upper() if name else "?"


async def add_review(session: AsyncSession, user: dict, data: dict[str, Any]) -> dict[str, Any]:
    """리뷰 작성 - 목록 맨 앞에 추가"""
    user_name = user.get("name") or "익명 사용자"
    review = {
        "id": f"review_{uuid.uuid4().hex}",
        **data,
        "userId": user["id"],
        "userName": user_name,
        "userInitial": _initial(user_name),
        "ratingLabel": RATING_LABELS.get(data.get("rating")),
        "createdAt": now_iso(),
    }

    reviews = await kv_store.get(session, REVIEWS_KEY) or []
    await kv_store.set(session, REVIEWS_KEY, [review, *reviews])
    logger.info("Review added: recipe=%s rating=%s", data.get("recipeId"), data.get("rating"))
    return review


async def list_reviews(session: AsyncSession, recipe_id: Optional[str] = None) -> list[dict[str, Any]]:
    """리뷰 목록 (최신순, recipe_id로 필터 가능)"""
    reviews = await kv_store.get(session, REVIEWS_KEY) or []
    if recipe_id is not None:
        reviews = [r for r in reviews if str(r.get("recipeId")) == str(recipe_id)]
    return reviews


async def add_feedback(session: AsyncSession, user_id: str, data: dict[str, Any]) -> dict[str, Any]:
    """조리 후 피드백 저장"""
    unknown = [tag for tag in data.get("tags") or [] if tag not in FEEDBACK_TAGS]
    if unknown:
        raise ValueError(f"Unknown feedback tags: {', '.join(unknown)}")

    feedback = {
        "id": str(uuid.uuid4()),
        **data,
        "userId": user_id,
        "createdAt": now_iso(),
    }
    entries = await kv_store.get(session, FEEDBACK_KEY) or []
    await kv_store.set(session, FEEDBACK_KEY, [feedback, *entries])
    return feedback
