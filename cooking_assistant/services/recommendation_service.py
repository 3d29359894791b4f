"""레시피 추천 서비스 (규칙 기반 목업 추천)

보유 재료(컨텍스트)와 프로필 태그로 정적 카탈로그에서 레시피를 골라낸다.
"""
from dataclasses import dataclass, field
from typing import Any, Optional, Protocol

from cooking_assistant.data import recipe_catalog

MIN_RECOMMENDATIONS = 3
HEALTHY_GOALS = ("healthy-eating", "low-carb")

# (레시피 id, 트리거 재료) - 트리거 중 하나라도 있으면 추천
INGREDIENT_RULES: list[tuple[str, tuple[str, ...]]] = [
    ("1", ("김치", "쌀", "달걀")),  # 김치볶음밥
    ("3", ("된장", "두부", "감자")),  # 된장찌개
    ("7", ("토마토", "면", "마늘")),  # 토마토 파스타
]
KOREAN_PREFERENCE_RECIPE = "6"  # 비빔밥
WESTERN_PREFERENCE_RECIPE = "11"  # 크림 파스타
HEALTHY_RECIPE = "4"  # 치킨 샐러드
FALLBACK_RECIPES = ("9", "10")  # 계란볶음밥, 라면 업그레이드


@dataclass
class CookingContext:
    """사용자가 입력한 조리 상황"""

    ingredients: list[str] = field(default_factory=list)
    cooking_time: Optional[str] = None
    number_of_people: Optional[str] = None
    preferences: list[str] = field(default_factory=list)

    def has_ingredient(self, name: str) -> bool:
        """보유 재료 중 하나가 name에 포함되거나 name이 보유 재료에 포함되면 True"""
        owned = [item.strip() for item in self.ingredients if item and item.strip()]
        return any(item in name or name in item for item in owned)


def has_ingredient(context: Optional[CookingContext], name: str) -> bool:
    """컨텍스트가 없으면 모든 재료를 가진 것으로 본다"""
    if context is None:
        return True
    return context.has_ingredient(name)


class RecommendationStrategy(Protocol):
    """추천 전략 인터페이스"""

    def recommend(self, profile: dict[str, Any], context: Optional[CookingContext]) -> list[dict[str, Any]]:
        ...


class RuleBasedStrategy:
    """재료 트리거 + 프로필 태그 규칙 추천"""

    def recommend(self, profile: dict[str, Any], context: Optional[CookingContext]) -> list[dict[str, Any]]:
        picked: list[str] = []
        overrides: dict[str, dict[str, Any]] = {}

        for recipe_id, triggers in INGREDIENT_RULES:
            if any(has_ingredient(context, trigger) for trigger in triggers):
                picked.append(recipe_id)

        cuisines = profile.get("preferredCuisines") or []
        if "한식" in cuisines and KOREAN_PREFERENCE_RECIPE not in picked:
            picked.append(KOREAN_PREFERENCE_RECIPE)
            # 초보자에게는 비빔밥 난이도를 낮춰서 안내
            difficulty = "초급" if profile.get("cookingLevel") == "beginner" else "중급"
            overrides[KOREAN_PREFERENCE_RECIPE] = {"difficulty": difficulty}

        if "양식" in cuisines and WESTERN_PREFERENCE_RECIPE not in picked:
            picked.append(WESTERN_PREFERENCE_RECIPE)

        if profile.get("dietaryGoals") in HEALTHY_GOALS and HEALTHY_RECIPE not in picked:
            picked.append(HEALTHY_RECIPE)

        if len(picked) < MIN_RECOMMENDATIONS:
            for recipe_id in FALLBACK_RECIPES:
                if recipe_id not in picked:
                    picked.append(recipe_id)

        allergies = profile.get("allergies") or []
        results = []
        for recipe_id in picked:
            recipe = recipe_catalog.get_recipe(recipe_id)
            if recipe is None:
                continue
            results.append(
                annotate_recipe({**recipe, **overrides.get(recipe_id, {})}, context, allergies)
            )
        return results


def ingredient_owned(ingredient: dict[str, Any], context: Optional[CookingContext]) -> bool:
    """카탈로그 재료의 보유 여부"""
    if ingredient.get("always"):
        return True
    match = ingredient.get("match") or ()
    return any(has_ingredient(context, keyword) for keyword in match)


def recipe_allergens(recipe: dict[str, Any], allergies: list[str]) -> list[str]:
    """레시피 재료 중 사용자 알레르기에 해당하는 항목 (중복 제거, 순서 유지)"""
    found: list[str] = []
    for ingredient in recipe["ingredients"]:
        for candidate in (ingredient.get("allergen"), ingredient["name"]):
            if candidate and candidate in allergies and candidate not in found:
                found.append(candidate)
    return found


def annotate_recipe(
    recipe: dict[str, Any],
    context: Optional[CookingContext],
    allergies: list[str],
) -> dict[str, Any]:
    """레시피 상세에 hasIt / missingIngredients / allergens 추가"""
    detail = recipe_catalog.recipe_detail(recipe)
    ingredients = []
    for raw, public in zip(recipe["ingredients"], detail["ingredients"]):
        ingredients.append({**public, "hasIt": ingredient_owned(raw, context)})

    detail["ingredients"] = ingredients
    detail["missingIngredients"] = [ing["name"] for ing in ingredients if not ing["hasIt"]]
    detail["allergens"] = recipe_allergens(recipe, allergies)
    return detail


def get_recommendation_strategy() -> RecommendationStrategy:
    """전략 팩토리"""
    return RuleBasedStrategy()


def recommend_recipes(
    profile: Optional[dict[str, Any]],
    context: Optional[CookingContext] = None,
    strategy: Optional[RecommendationStrategy] = None,
) -> list[dict[str, Any]]:
    """프로필과 조리 상황으로 추천 레시피 목록 생성 (id 중복 없음)"""
    strategy = strategy or get_recommendation_strategy()
    return strategy.recommend(profile or {}, context)
