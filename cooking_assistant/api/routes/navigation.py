"""화면 이동 라우트"""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from cooking_assistant.api.dependencies import require_authentication
from cooking_assistant.api.schemas.navigation import (
    NavigateRequest,
    NavigationEventRequest,
    NavigationStateResponse,
)
from cooking_assistant.db.session import get_session
from cooking_assistant.services import navigation_service

router = APIRouter()


@router.get("", response_model=NavigationStateResponse)
async def get_navigation(
    user: dict = Depends(require_authentication),
    session: AsyncSession = Depends(get_session),
):
    """현재 화면, 히스토리, 하단 탭/뒤로가기 표시 여부"""
    controller = await navigation_service.load_navigation(session, user["id"])
    return controller.to_response()


@router.post("/navigate", response_model=NavigationStateResponse)
async def navigate(
    request: NavigateRequest,
    user: dict = Depends(require_authentication),
    session: AsyncSession = Depends(get_session),
):
    """화면 이동 (addToHistory=false면 히스토리에 쌓지 않음)"""
    controller = await navigation_service.load_navigation(session, user["id"])
    controller.navigate(request.step, add_to_history=request.add_to_history)
    await navigation_service.save_navigation(session, user["id"], controller)
    return controller.to_response()


@router.post("/back", response_model=NavigationStateResponse)
async def back(
    user: dict = Depends(require_authentication),
    session: AsyncSession = Depends(get_session),
):
    """뒤로가기"""
    controller = await navigation_service.load_navigation(session, user["id"])
    controller.back()
    await navigation_service.save_navigation(session, user["id"], controller)
    return controller.to_response()


@router.post("/home", response_model=NavigationStateResponse)
async def home(
    user: dict = Depends(require_authentication),
    session: AsyncSession = Depends(get_session),
):
    """홈으로 (히스토리 초기화)"""
    controller = await navigation_service.load_navigation(session, user["id"])
    controller.home()
    await navigation_service.save_navigation(session, user["id"], controller)
    return controller.to_response()


@router.post("/events", response_model=NavigationStateResponse)
async def handle_event(
    request: NavigationEventRequest,
    user: dict = Depends(require_authentication),
    session: AsyncSession = Depends(get_session),
):
    """화면 흐름 이벤트 (레시피 선택, 요리 완료, 리뷰 완료 등)"""
    controller = await navigation_service.load_navigation(session, user["id"])
    try:
        await navigation_service.apply_event(
            session, user["id"], controller, request.event, request.payload
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    await navigation_service.save_navigation(session, user["id"], controller)
    return controller.to_response()
