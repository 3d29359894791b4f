"""공통 스키마"""
from typing import Any

from pydantic import BaseModel


class SuccessResponse(BaseModel):
    """단순 성공 응답"""

    success: bool = True


class ErrorResponse(BaseModel):
    """에러 응답 - 모든 에러는 {error} 형태로 내려간다"""

    error: str
    details: Any | None = None
