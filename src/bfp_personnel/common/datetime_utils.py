from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional

from ..core.constants import DAYS_PER_YEAR


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_optional_date(value: Optional[str]) -> Optional[date]:
    v = (value or "").strip()
    if not v:
        return None
    return parse_iso_date(v[:10])


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def today_local() -> date:
    return now_local().date()


def coerce_date(value: Any) -> Optional[date]:
    """Accept date, datetime or ISO strings as stored by either backend."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return parse_iso_date(str(value).strip()[:10])
    except ValueError:
        return None


def inclusive_days(start: date, end: date) -> int:
    return (end - start).days + 1


def years_since(value: Any, *, today: Optional[date] = None) -> int:
    """Whole years elapsed since ``value``; 0 when the date is missing or invalid."""
    d = coerce_date(value)
    if d is None:
        return 0
    today = today or today_local()
    return int((today - d).days // DAYS_PER_YEAR)
