"""화면 이동 스키마"""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from cooking_assistant.services.navigation_service import AppStep, NavigationEvent


class NavigateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    step: AppStep
    add_to_history: bool = Field(True, alias="addToHistory")


class NavigationEventRequest(BaseModel):
    """화면 흐름 이벤트 (payload는 이벤트별로 recipe/category 등)"""

    event: NavigationEvent
    payload: dict[str, Any] = Field(default_factory=dict)


class NavigationStateResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    current_step: AppStep = Field(alias="currentStep")
    history: list[AppStep]
    authenticated: bool
    selected_recipe: Optional[dict[str, Any]] = Field(None, alias="selectedRecipe")
    selected_category: Optional[str] = Field(None, alias="selectedCategory")
    active_tab: str = Field(alias="activeTab")
    show_back_button: bool = Field(alias="showBackButton")
    show_navigation: bool = Field(alias="showNavigation")
