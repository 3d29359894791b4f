"""시간 관련 유틸리티 함수"""
from datetime import date, datetime, timezone


def utc_now() -> datetime:
    """현재 UTC 시각 (timezone-aware)"""
    return datetime.now(timezone.utc)


def now_iso() -> str:
    """
    현재 시각을 ISO 8601 문자열로 반환

    저장소에 들어가는 createdAt/updatedAt/savedAt 값은 모두 이 형식을 쓴다.
    예: "2025-11-20T03:12:45.123456+00:00"
    """
    return utc_now().isoformat()


def parse_iso_date(value: str | None) -> date | None:
    """
    ISO 날짜/시각 문자열에서 날짜 부분만 추출

    "2025-11-20", "2025-11-20T00:00:00.000Z" 모두 허용하며,
    해석할 수 없는 값이면 None을 반환한다.
    """
    if not value:
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        pass
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        return None
