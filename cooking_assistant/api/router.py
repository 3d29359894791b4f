"""API 라우터"""
from fastapi import APIRouter

from cooking_assistant.api.routes import (
    ai_voice,
    assistant,
    auth,
    completed_recipes,
    cooking,
    health,
    ingredients,
    navigation,
    profile,
    recipes,
    reviews,
    saved_recipes,
)
from cooking_assistant.api.schemas.common import ErrorResponse

# 에러 응답은 모두 {"error", "details"?} 형태
ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}

api_router = APIRouter(responses=ERROR_RESPONSES)

# 인증 관련 라우트 (/signup, /login, /me, /account)
api_router.include_router(auth.router, tags=["authentication"])

# 사용자 프로필
api_router.include_router(profile.router, prefix="/profile", tags=["profile"])

# 냉장고 식재료
api_router.include_router(ingredients.router, prefix="/ingredients", tags=["ingredients"])

# 저장한 레시피 / 완료한 레시피
api_router.include_router(saved_recipes.router, prefix="/saved-recipes", tags=["saved-recipes"])
api_router.include_router(completed_recipes.router, prefix="/completed-recipes", tags=["completed-recipes"])

# 리뷰 및 피드백 (/reviews, /feedback)
api_router.include_router(reviews.router, tags=["reviews"])

# 레시피 목록 및 추천
api_router.include_router(recipes.router, prefix="/recipes", tags=["recipes"])

# 화면 이동 상태
api_router.include_router(navigation.router, prefix="/navigation", tags=["navigation"])

# AI 조리 진행 / 음성 보조 대화
api_router.include_router(cooking.router, prefix="/cooking", tags=["cooking"])
api_router.include_router(assistant.router, prefix="/assistant", tags=["assistant"])

# AI 음성 프록시
api_router.include_router(ai_voice.router, prefix="/ai/voice", tags=["ai-voice"])

api_router.include_router(health.router, prefix="/health", tags=["health"])
