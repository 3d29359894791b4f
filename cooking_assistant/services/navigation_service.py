"""화면 이동(내비게이션) 상태 관리

앱 화면을 AppStep 열거형으로 표현하고, 뒤로가기를 위한 히스토리 스택을
사용자별로 저장한다 (users:<id>:navigation).
"""
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from cooking_assistant.db import kv_store
from cooking_assistant.services import completed_recipe_service

logger = logging.getLogger(__name__)


class AppStep(str, Enum):
    AUTH = "auth"
    HOME = "home"
    PROFILE = "profile"
    PROFILE_COMPLETE = "profile-complete"
    INGREDIENTS = "ingredients"
    RECOMMENDATIONS = "recommendations"
    RECIPE = "recipe"
    FEEDBACK = "feedback"
    VOICE_ASSISTANT = "voice-assistant"
    INGREDIENT_CHECK = "ingredient-check"
    COOKING_IN_PROGRESS = "cooking-in-progress"
    RECIPE_LIST = "recipe-list"
    SAVED = "saved"
    MYPAGE = "mypage"
    INGREDIENTS_MANAGEMENT = "ingredients-management"
    ACCOUNT_SETTINGS = "account-settings"
    RECIPE_REVIEW = "recipe-review"
    COMMUNITY = "community"
    COMPLETED_RECIPES = "completed-recipes"


class NavigationEvent(str, Enum):
    PROFILE_SAVED = "profile-saved"
    RECIPE_SELECTED = "recipe-selected"
    COOKING_STARTED = "cooking-started"
    COOKING_FINISHED = "cooking-finished"
    INGREDIENT_CHECK_CONFIRMED = "ingredient-check-confirmed"
    REVIEW_FINISHED = "review-finished"
    FEEDBACK_FINISHED = "feedback-finished"
    CATEGORY_SELECTED = "category-selected"
    LOGGED_IN = "logged-in"
    LOGGED_OUT = "logged-out"


# 하단 탭 매핑 (없는 화면은 home 탭)
BOTTOM_TABS: dict[AppStep, str] = {
    AppStep.HOME: "home",
    AppStep.RECIPE_LIST: "recipe",
    AppStep.VOICE_ASSISTANT: "ai",
    AppStep.INGREDIENT_CHECK: "ai",
    AppStep.COOKING_IN_PROGRESS: "ai",
    AppStep.INGREDIENTS_MANAGEMENT: "ingredients",
    AppStep.MYPAGE: "mypage",
    AppStep.PROFILE: "mypage",
    AppStep.ACCOUNT_SETTINGS: "mypage",
    AppStep.SAVED: "mypage",
    AppStep.COMPLETED_RECIPES: "mypage",
}


@dataclass
class NavigationController:
    """현재 화면 + 히스토리 스택"""

    current_step: AppStep = AppStep.HOME
    history: list[AppStep] = field(default_factory=list)
    authenticated: bool = True
    selected_recipe: Optional[dict[str, Any]] = None
    selected_category: Optional[str] = None

    def navigate(self, step: AppStep, add_to_history: bool = True) -> None:
        """
        화면 이동

        로그인 화면에서 이동하거나 같은 화면으로 이동하는 경우에는 히스토리에 쌓지 않는다.
        """
        if add_to_history and self.current_step != AppStep.AUTH and self.current_step != step:
            self.history.append(self.current_step)
        self.current_step = step

    def back(self) -> None:
        """이전 화면으로 (히스토리가 없으면 홈)"""
        if self.history:
            self.current_step = self.history.pop()
        else:
            self.current_step = AppStep.HOME

    def home(self) -> None:
        self.history.clear()
        self.current_step = AppStep.HOME

    def login(self) -> None:
        self.authenticated = True
        self.home()

    def logout(self) -> None:
        self.authenticated = False
        self.selected_recipe = None
        self.selected_category = None
        self.history.clear()
        self.current_step = AppStep.AUTH

    @property
    def active_tab(self) -> str:
        return BOTTOM_TABS.get(self.current_step, "home")

    @property
    def show_back_button(self) -> bool:
        return self.current_step not in (AppStep.HOME, AppStep.AUTH)

    @property
    def show_navigation(self) -> bool:
        return self.authenticated and self.current_step != AppStep.AUTH

    def to_state(self) -> dict[str, Any]:
        """저장용 상태"""
        return {
            "currentStep": self.current_step.value,
            "history": [step.value for step in self.history],
            "authenticated": self.authenticated,
            "selectedRecipe": self.selected_recipe,
            "selectedCategory": self.selected_category,
        }

    def to_response(self) -> dict[str, Any]:
        """응답용 상태 (파생 값 포함)"""
        return {
            **self.to_state(),
            "activeTab": self.active_tab,
            "showBackButton": self.show_back_button,
            "showNavigation": self.show_navigation,
        }

    @classmethod
    def from_state(cls, state: Optional[dict[str, Any]]) -> "NavigationController":
        if not state:
            return cls()
        return cls(
            current_step=AppStep(state.get("currentStep", AppStep.HOME.value)),
            history=[AppStep(step) for step in state.get("history") or []],
            authenticated=state.get("authenticated", True),
            selected_recipe=state.get("selectedRecipe"),
            selected_category=state.get("selectedCategory"),
        )


def _key(user_id: str) -> str:
    return kv_store.user_key(user_id, "navigation")


async def load_navigation(session: AsyncSession, user_id: str) -> NavigationController:
    state = await kv_store.get(session, _key(user_id))
    return NavigationController.from_state(state)


async def save_navigation(session: AsyncSession, user_id: str, controller: NavigationController) -> None:
    await kv_store.set(session, _key(user_id), controller.to_state())


async def _record_selected_completion(
    session: AsyncSession,
    user_id: str,
    controller: NavigationController,
) -> None:
    """선택된 레시피를 완료 기록에 추가 (같은 날 중복 제외)"""
    if controller.selected_recipe and controller.selected_recipe.get("id"):
        await completed_recipe_service.record_completion(session, user_id, controller.selected_recipe)


async def apply_event(
    session: AsyncSession,
    user_id: str,
    controller: NavigationController,
    event: NavigationEvent,
    payload: Optional[dict[str, Any]] = None,
) -> NavigationController:
    """
    화면 흐름 이벤트 처리

    - profile-saved: 이전 화면으로
    - recipe-selected: 레시피 선택 후 상세 화면
    - cooking-started: 레시피 선택 후 재료 확인(AI 조리) 화면
    - cooking-finished: 완료 기록 후 피드백 화면
    - ingredient-check-confirmed: 완료 기록 후 리뷰 화면
    - review-finished / feedback-finished: 선택 해제, 히스토리 초기화, 홈
    - category-selected: 카테고리 기억 후 레시피 목록
    - logged-in / logged-out: 로그인/로그아웃 처리
    """
    payload = payload or {}

    if event == NavigationEvent.PROFILE_SAVED:
        controller.back()
    elif event in (NavigationEvent.RECIPE_SELECTED, NavigationEvent.COOKING_STARTED):
        recipe = payload.get("recipe")
        if not isinstance(recipe, dict) or not recipe.get("id"):
            raise ValueError("recipe with id is required")
        controller.selected_recipe = recipe
        target = AppStep.RECIPE if event == NavigationEvent.RECIPE_SELECTED else AppStep.INGREDIENT_CHECK
        controller.navigate(target)
    elif event == NavigationEvent.COOKING_FINISHED:
        await _record_selected_completion(session, user_id, controller)
        controller.navigate(AppStep.FEEDBACK)
    elif event == NavigationEvent.INGREDIENT_CHECK_CONFIRMED:
        await _record_selected_completion(session, user_id, controller)
        controller.navigate(AppStep.RECIPE_REVIEW)
    elif event in (NavigationEvent.REVIEW_FINISHED, NavigationEvent.FEEDBACK_FINISHED):
        controller.selected_recipe = None
        controller.home()
    elif event == NavigationEvent.CATEGORY_SELECTED:
        category = payload.get("category")
        if not category:
            raise ValueError("category is required")
        controller.selected_category = category
        controller.navigate(AppStep.RECIPE_LIST)
    elif event == NavigationEvent.LOGGED_IN:
        controller.login()
    elif event == NavigationEvent.LOGGED_OUT:
        controller.logout()

    logger.debug("Navigation event %s -> %s", event.value, controller.current_step.value)
    return controller
