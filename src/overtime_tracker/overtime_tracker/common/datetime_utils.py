from __future__ import annotations

import re
from datetime import date, datetime, time, timedelta
from typing import Union

from ..core.constants import DATE_FORMAT, TIME_FORMAT
from ..core.exceptions import InvalidTimeFormat, ValidationError

_TIME_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*$")

DateLike = Union[date, str]
TimeLike = Union[time, str]


def parse_iso_date(value: DateLike) -> date:
    """Parse YYYY-MM-DD string into date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(str(value).strip(), DATE_FORMAT).date()
    except ValueError as e:
        raise ValidationError(f"날짜 형식이 올바르지 않습니다: {value!r}") from e


def parse_hhmm(value: TimeLike) -> time:
    """Parse an 'H:MM' / 'HH:MM' string (or pass a time through).

    Seconds are dropped; the classifier works on whole minutes.
    """
    if isinstance(value, time):
        return value.replace(second=0, microsecond=0)

    m = _TIME_RE.match(value or "") if isinstance(value, str) else None
    if not m:
        raise InvalidTimeFormat(f"시간 형식이 올바르지 않습니다: {value!r}")

    hour, minute = int(m.group(1)), int(m.group(2))
    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        raise InvalidTimeFormat(f"시간 범위가 올바르지 않습니다: {value!r}")
    return time(hour=hour, minute=minute)


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def format_hhmm(value: time) -> str:
    return value.strftime(TIME_FORMAT)


def minute_of_day(value: datetime) -> int:
    return value.hour * 60 + value.minute


def is_weekend(value: date) -> bool:
    """Saturday and Sunday."""
    return value.weekday() >= 5


def week_bounds(anchor: date) -> tuple[date, date]:
    """Monday..Sunday week containing anchor (inclusive)."""
    start = anchor - timedelta(days=anchor.weekday())
    return start, start + timedelta(days=6)


def month_bounds(anchor: date) -> tuple[date, date]:
    start = anchor.replace(day=1)
    if start.month == 12:
        next_month = start.replace(year=start.year + 1, month=1)
    else:
        next_month = start.replace(month=start.month + 1)
    return start, next_month - timedelta(days=1)


def parse_year_month(value: str) -> date:
    """Parse 'YYYY-MM' into the first day of that month."""
    try:
        return datetime.strptime(value.strip(), "%Y-%m").date()
    except (AttributeError, ValueError) as e:
        raise ValidationError(f"월 형식이 올바르지 않습니다: {value!r}") from e


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now().date()
