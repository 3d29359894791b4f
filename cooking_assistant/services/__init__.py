"""Services package - 비즈니스 로직 (사용자별 데이터는 kv_store에 저장)"""
# noqa: D104

from . import auth_service
from . import ingredient_service
from . import profile_service
from . import recommendation_service

__all__ = [
    "auth_service",
    "ingredient_service",
    "profile_service",
    "recommendation_service",
]
