"""식재료 재고 서비스 - 사용자별 식재료 배열 CRUD"""
import logging
import uuid
from datetime import date
from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from cooking_assistant.db import kv_store
from cooking_assistant.utils.timestamps import now_iso, parse_iso_date

logger = logging.getLogger(__name__)

STORAGE_LOCATIONS = ("냉장실", "냉동실", "실온")
EXPIRING_SOON_DAYS = 3

# 같은 길이로 겹치면 먼저 나온 분류 사용
CATEGORY_KEYWORDS: list[tuple[str, list[str]]] = [
    ("채소", [
        "양파", "당근", "감자", "고구마", "배추", "무", "오이", "호박", "가지", "브로콜리",
        "양배추", "시금치", "상추", "깻잎", "부추", "파", "대파", "쪽파", "마늘", "생강",
        "고추", "피망", "파프리카", "토마토", "버섯", "느타리버섯", "표고버섯", "양송이버섯", "팽이버섯",
    ]),
    ("과일", [
        "사과", "배", "바나나", "포도", "딸기", "수박", "참외", "멜론", "복숭아", "자두",
        "오렌지", "귤", "레몬", "키위", "망고", "파인애플", "체리", "블루베리", "아보카도",
    ]),
    ("육류", [
        "소고기", "돼지고기", "닭고기", "오리고기", "양고기", "삼겹살", "목살", "안심",
        "등심", "갈비", "닭가슴살", "닭다리", "베이컨", "소시지", "햄", "스팸",
    ]),
    ("해산물", [
        "고등어", "삼치", "갈치", "광어", "연어", "참치", "명태", "조기", "새우", "오징어",
        "문어", "낙지", "조개", "홍합", "굴", "바지락", "전복", "게", "꽃게",
    ]),
    ("유제품", ["우유", "치즈", "요거트", "요구르트", "버터", "생크림", "크림", "계란", "달걀"]),
    ("곡물", [
        "쌀", "현미", "찹쌀", "밀가루", "면", "국수", "라면", "스파게티", "파스타",
        "쌀국수", "당면", "빵", "식빵", "떡", "시리얼",
    ]),
    ("양념", [
        "소금", "설탕", "간장", "된장", "고추장", "고춧가루", "후추", "식초", "참기름",
        "들기름", "올리브유", "식용유", "카레", "케첩", "마요네즈", "머스타드", "굴소스", "맛술", "미림",
    ]),
    ("가공식품", ["두부", "유부", "어묵", "김", "김치", "콩나물", "숙주", "묵", "만두"]),
]
DEFAULT_CATEGORY = "기타"


class IngredientNotFoundError(LookupError):
    """해당 id의 식재료가 없음"""


def categorize_ingredient(name: str) -> str:
    """
    식재료 이름으로 분류 자동 지정

    가장 길게 일치하는 키워드의 분류를 사용한다 ("파스타"는 "파"가 아닌 곡물).
    "대파 한 단" -> "채소", "냉동 새우" -> "해산물", 매칭이 없으면 "기타"
    """
    lowered = (name or "").lower().strip()
    if not lowered:
        return DEFAULT_CATEGORY
    best_category, best_length = DEFAULT_CATEGORY, 0
    for category, keywords in CATEGORY_KEYWORDS:
        for keyword in keywords:
            if keyword in lowered and len(keyword) > best_length:
                best_category, best_length = category, len(keyword)
    return best_category


def days_until_expiry(expiry_date: Optional[str], today: Optional[date] = None) -> Optional[int]:
    """유통기한까지 남은 일수 (지났으면 음수, 날짜 없으면 None)"""
    expiry = parse_iso_date(expiry_date)
    if expiry is None:
        return None
    return (expiry - (today or date.today())).days


def expiry_status(expiry_date: Optional[str], today: Optional[date] = None) -> Optional[dict[str, Any]]:
    """
    유통기한 상태 라벨

    Returns:
        {"label", "level", "daysLeft"} 또는 유통기한이 없으면 None
        level: expired / today / urgent(3일 이내) / warning(7일 이내) / ok
    """
    days = days_until_expiry(expiry_date, today)
    if days is None:
        return None
    if days < 0:
        return {"label": "유통기한 지남", "level": "expired", "daysLeft": days}
    if days == 0:
        return {"label": "오늘 만료", "level": "today", "daysLeft": 0}
    if days <= EXPIRING_SOON_DAYS:
        level = "urgent"
    elif days <= 7:
        level = "warning"
    else:
        level = "ok"
    return {"label": f"{days}일 남음", "level": level, "daysLeft": days}


def is_expiring_soon(ingredient: dict[str, Any], today: Optional[date] = None) -> bool:
    """오늘 포함 3일 이내 만료 예정 여부 (이미 지난 것은 제외)"""
    days = days_until_expiry(ingredient.get("expiryDate"), today)
    return days is not None and 0 <= days <= EXPIRING_SOON_DAYS


def sort_by_expiry(ingredients: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """유통기한이 가까운 순으로 정렬 (유통기한 없는 항목은 뒤로)"""
    def sort_key(item: dict[str, Any]):
        expiry = parse_iso_date(item.get("expiryDate"))
        return (expiry is None, expiry or date.max)

    return sorted(ingredients, key=sort_key)


def with_expiry_status(ingredient: dict[str, Any], today: Optional[date] = None) -> dict[str, Any]:
    return {**ingredient, "expiryStatus": expiry_status(ingredient.get("expiryDate"), today)}


async def list_ingredients(
    session: AsyncSession,
    user_id: str,
    location: Optional[str] = None,
) -> list[dict[str, Any]]:
    """사용자 식재료 목록 (유통기한 임박 순)"""
    ingredients = await kv_store.get(session, kv_store.user_key(user_id, "ingredients")) or []
    if location:
        ingredients = [ing for ing in ingredients if ing.get("location") == location]
    return sort_by_expiry(ingredients)


async def add_ingredient(session: AsyncSession, user_id: str, data: dict[str, Any]) -> dict[str, Any]:
    """식재료 추가 - id/userId/createdAt 부여, 분류가 없으면 자동 분류"""
    key = kv_store.user_key(user_id, "ingredients")
    ingredients = await kv_store.get(session, key) or []

    # id/소유자는 서버에서 부여
    fields = {k: v for k, v in data.items() if k not in ("id", "userId")}
    new_ingredient = {
        "id": str(uuid.uuid4()),
        **fields,
        "userId": user_id,
        "createdAt": now_iso(),
    }
    if not new_ingredient.get("category"):
        new_ingredient["category"] = categorize_ingredient(new_ingredient.get("name", ""))

    ingredients.append(new_ingredient)
    await kv_store.set(session, key, ingredients)
    logger.info("  ➕ %s: 새로 추가 (user_id=%s)", new_ingredient.get("name"), user_id)
    return new_ingredient


async def update_ingredient(
    session: AsyncSession,
    user_id: str,
    ingredient_id: str,
    data: dict[str, Any],
) -> dict[str, Any]:
    """식재료 수정 (병합) - 없는 id면 IngredientNotFoundError"""
    key = kv_store.user_key(user_id, "ingredients")
    ingredients = await kv_store.get(session, key) or []

    index = next((i for i, ing in enumerate(ingredients) if ing.get("id") == ingredient_id), None)
    if index is None:
        raise IngredientNotFoundError("Ingredient not found")

    # id/소유자는 수정 불가
    patch = {k: v for k, v in data.items() if k not in ("id", "userId")}
    ingredients[index] = {
        **ingredients[index],
        **patch,
        "updatedAt": now_iso(),
    }
    await kv_store.set(session, key, ingredients)
    return ingredients[index]


async def delete_ingredient(session: AsyncSession, user_id: str, ingredient_id: str) -> None:
    """식재료 삭제 - 없는 id면 IngredientNotFoundError"""
    key = kv_store.user_key(user_id, "ingredients")
    ingredients = await kv_store.get(session, key) or []

    remaining = [ing for ing in ingredients if ing.get("id") != ingredient_id]
    if len(remaining) == len(ingredients):
        raise IngredientNotFoundError("Ingredient not found")

    await kv_store.set(session, key, remaining)


async def ingredient_names(session: AsyncSession, user_id: str) -> list[str]:
    """보유 식재료 이름 목록 (추천 컨텍스트용)"""
    ingredients = await kv_store.get(session, kv_store.user_key(user_id, "ingredients")) or []
    return [ing["name"] for ing in ingredients if ing.get("name")]


def summarize_by_location(ingredients: list[dict[str, Any]], today: Optional[date] = None) -> dict[str, Any]:
    """보관 위치별 개수와 임박 개수 요약"""
    locations = []
    for location in STORAGE_LOCATIONS:
        items = [ing for ing in ingredients if ing.get("location") == location]
        locations.append({
            "location": location,
            "count": len(items),
            "expiringCount": sum(1 for ing in items if is_expiring_soon(ing, today)),
        })
    return {
        "total": len(ingredients),
        "expiringCount": sum(1 for ing in ingredients if is_expiring_soon(ing, today)),
        "locations": locations,
    }
