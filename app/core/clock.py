"""날짜/시간 유틸

아젠다 관련성 판단은 UTC가 아닌 사용자의 로컬 달력 날짜 기준입니다.
서버에서 today를 계산할 때는 항상 local_today()를 사용합니다.
"""

from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

from app.core.config import get_settings


def utc_now() -> datetime:
    """현재 시각 (UTC)"""
    return datetime.now(timezone.utc)


def local_today(tz_name: str | None = None) -> date:
    """설정된 타임존 기준 오늘 날짜"""
    tz = ZoneInfo(tz_name or get_settings().local_timezone)
    return datetime.now(tz).date()


def resolve_today(today: date | None = None) -> date:
    """클라이언트가 보낸 today 우선, 없으면 서버 로컬 날짜"""
    return today if today is not None else local_today()
