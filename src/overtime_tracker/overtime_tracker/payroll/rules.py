"""Labor rule table shared by the classifier and the dashboard rollups.

근로기준법(5인 이상 사업장) 기준:
- 점심 휴게 12:00~13:00, 석식 휴게 18:00~18:30 (항상 제외)
- 평일 기본 09:00~18:00, 조기출근 06:00~09:00, 저녁 연장 18:30~22:00,
  심야 연장 22:00~06:00
- 주말: 누적 8시간(480분) 이내/초과 x 낮/심야
"""

from __future__ import annotations

import math
from decimal import Decimal
from fractions import Fraction
from typing import Iterable, Mapping, NamedTuple, Optional

from ..core.constants import (
    DINNER_END,
    DINNER_START,
    EVENING_END,
    LUNCH_END,
    LUNCH_START,
    MINUTES_PER_DAY,
    NIGHT_END,
    NIGHT_START,
    REGULAR_END,
    REGULAR_START,
)
from ..core.enums import PayCategory

MULTIPLIERS: dict[PayCategory, Decimal] = {
    PayCategory.REGULAR: Decimal("1.0"),
    PayCategory.EARLY_OVERTIME: Decimal("1.5"),
    PayCategory.EVENING_OVERTIME: Decimal("1.5"),
    PayCategory.NIGHT_OVERTIME: Decimal("2.0"),
    PayCategory.WEEKEND_DAY_UNDER_8: Decimal("1.5"),
    PayCategory.WEEKEND_NIGHT_UNDER_8: Decimal("2.0"),
    PayCategory.WEEKEND_DAY_OVER_8: Decimal("2.0"),
    PayCategory.WEEKEND_NIGHT_OVER_8: Decimal("2.5"),
}

OVERTIME_CATEGORIES = tuple(c for c in PayCategory if c.is_overtime)
WEEKEND_CATEGORIES = tuple(c for c in PayCategory if c.is_weekend)

# Weekend under-8 category -> the same time of day past the 8h threshold.
OVER_8 = {
    PayCategory.WEEKEND_DAY_UNDER_8: PayCategory.WEEKEND_DAY_OVER_8,
    PayCategory.WEEKEND_NIGHT_UNDER_8: PayCategory.WEEKEND_NIGHT_OVER_8,
}


class DayWindow(NamedTuple):
    """Half-open [start, end) time-of-day window in minutes since midnight.

    category is None for break windows.
    """

    start: int
    end: int
    category: Optional[PayCategory]


# Both tables are chronological and cover the whole day without gaps.
WEEKDAY_WINDOWS: tuple[DayWindow, ...] = (
    DayWindow(0, NIGHT_END, PayCategory.NIGHT_OVERTIME),
    DayWindow(NIGHT_END, REGULAR_START, PayCategory.EARLY_OVERTIME),
    DayWindow(REGULAR_START, LUNCH_START, PayCategory.REGULAR),
    DayWindow(LUNCH_START, LUNCH_END, None),
    DayWindow(LUNCH_END, REGULAR_END, PayCategory.REGULAR),
    DayWindow(DINNER_START, DINNER_END, None),
    DayWindow(DINNER_END, EVENING_END, PayCategory.EVENING_OVERTIME),
    DayWindow(NIGHT_START, MINUTES_PER_DAY, PayCategory.NIGHT_OVERTIME),
)

WEEKEND_WINDOWS: tuple[DayWindow, ...] = (
    DayWindow(0, NIGHT_END, PayCategory.WEEKEND_NIGHT_UNDER_8),
    DayWindow(NIGHT_END, LUNCH_START, PayCategory.WEEKEND_DAY_UNDER_8),
    DayWindow(LUNCH_START, LUNCH_END, None),
    DayWindow(LUNCH_END, DINNER_START, PayCategory.WEEKEND_DAY_UNDER_8),
    DayWindow(DINNER_START, DINNER_END, None),
    DayWindow(DINNER_END, NIGHT_START, PayCategory.WEEKEND_DAY_UNDER_8),
    DayWindow(NIGHT_START, MINUTES_PER_DAY, PayCategory.WEEKEND_NIGHT_UNDER_8),
)


def windows_for(weekend: bool) -> tuple[DayWindow, ...]:
    return WEEKEND_WINDOWS if weekend else WEEKDAY_WINDOWS


def _lookup(windows: tuple[DayWindow, ...], minute: int) -> Optional[PayCategory]:
    for w in windows:
        if w.start <= minute < w.end:
            return w.category
    raise ValueError(f"minute of day out of range: {minute}")


def is_break(minute: int) -> bool:
    return LUNCH_START <= minute < LUNCH_END or DINNER_START <= minute < DINNER_END


def is_night(minute: int) -> bool:
    return minute >= NIGHT_START or minute < NIGHT_END


def weekday_category(minute: int) -> Optional[PayCategory]:
    """Category of a weekday minute, None inside a break."""
    return _lookup(WEEKDAY_WINDOWS, minute)


def weekend_category(minute: int, *, over_threshold: bool) -> Optional[PayCategory]:
    """Category of a weekend minute, None inside a break."""
    base = _lookup(WEEKEND_WINDOWS, minute)
    if base is None:
        return None
    return OVER_8[base] if over_threshold else base


def empty_counts() -> dict[PayCategory, int]:
    return {c: 0 for c in PayCategory}


def weighted_minutes(counts: Mapping[PayCategory, int], categories: Iterable[PayCategory] = tuple(PayCategory)) -> Decimal:
    total = Decimal(0)
    for c in categories:
        total += Decimal(int(counts.get(c, 0))) * MULTIPLIERS[c]
    return total


def pay_for(
    counts: Mapping[PayCategory, int],
    hourly_wage: Decimal,
    categories: Iterable[PayCategory] = tuple(PayCategory),
) -> int:
    """floor(sum(minutes * wage / 60 * multiplier)).

    Exact rational arithmetic: the floor is taken once, over the whole sum.
    """
    if hourly_wage <= 0:
        return 0
    exact = Fraction(hourly_wage) * Fraction(weighted_minutes(counts, categories)) / 60
    return math.floor(exact)
