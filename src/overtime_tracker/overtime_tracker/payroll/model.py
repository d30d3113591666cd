from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from decimal import Decimal
from typing import Any, Mapping

from ..core.enums import PayCategory
from .rules import OVERTIME_CATEGORIES, pay_for

# PayCategory -> (attribute, persisted key)
_FIELDS: dict[PayCategory, tuple[str, str]] = {
    PayCategory.REGULAR: ("regular_minutes", "regularMinutes"),
    PayCategory.EARLY_OVERTIME: ("early_overtime_minutes", "earlyOvertimeMinutes"),
    PayCategory.EVENING_OVERTIME: ("evening_overtime_minutes", "eveningOvertimeMinutes"),
    PayCategory.NIGHT_OVERTIME: ("night_overtime_minutes", "nightOvertimeMinutes"),
    PayCategory.WEEKEND_DAY_UNDER_8: ("weekend_day_under8_minutes", "weekendDayUnder8Minutes"),
    PayCategory.WEEKEND_NIGHT_UNDER_8: ("weekend_night_under8_minutes", "weekendNightUnder8Minutes"),
    PayCategory.WEEKEND_DAY_OVER_8: ("weekend_day_over8_minutes", "weekendDayOver8Minutes"),
    PayCategory.WEEKEND_NIGHT_OVER_8: ("weekend_night_over8_minutes", "weekendNightOver8Minutes"),
}


@dataclass(frozen=True)
class ShiftInput:
    """하루 출퇴근 입력값."""

    work_date: date
    clock_in: time
    clock_out: time
    clock_out_next_day: bool
    hourly_wage: Decimal


@dataclass(frozen=True)
class ShiftResult:
    """하루 계산 결과 (수당 항목별 분리, 분 단위)."""

    regular_minutes: int = 0
    early_overtime_minutes: int = 0
    evening_overtime_minutes: int = 0
    night_overtime_minutes: int = 0
    weekend_day_under8_minutes: int = 0
    weekend_night_under8_minutes: int = 0
    weekend_day_over8_minutes: int = 0
    weekend_night_over8_minutes: int = 0

    total_work_minutes: int = 0
    overtime_minutes: int = 0
    total_pay: int = 0

    @classmethod
    def empty(cls) -> "ShiftResult":
        return cls()

    @classmethod
    def from_counts(cls, counts: Mapping[PayCategory, int], hourly_wage: Decimal) -> "ShiftResult":
        regular = int(counts.get(PayCategory.REGULAR, 0))
        overtime = sum(int(counts.get(c, 0)) for c in OVERTIME_CATEGORIES)
        return cls(
            **{attr: int(counts.get(c, 0)) for c, (attr, _) in _FIELDS.items()},
            total_work_minutes=regular + overtime,
            overtime_minutes=overtime,
            total_pay=pay_for(counts, hourly_wage),
        )

    def minutes(self, category: PayCategory) -> int:
        return getattr(self, _FIELDS[category][0])

    def minutes_by_category(self) -> dict[PayCategory, int]:
        return {c: self.minutes(c) for c in PayCategory}

    @property
    def is_empty(self) -> bool:
        return not any(self.minutes_by_category().values())

    @property
    def weekend_minutes(self) -> int:
        return sum(self.minutes(c) for c in PayCategory if c.is_weekend)

    def to_dict(self) -> dict[str, int]:
        data = {key: self.minutes(c) for c, (_, key) in _FIELDS.items()}
        data["totalWorkMinutes"] = self.total_work_minutes
        data["overtimeMinutes"] = self.overtime_minutes
        data["totalPay"] = self.total_pay
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ShiftResult":
        """Rebuild a stored snapshot verbatim (missing keys read as 0)."""

        def _int(key: str) -> int:
            return int(data.get(key) or 0)

        return cls(
            **{attr: _int(key) for attr, key in _FIELDS.values()},
            total_work_minutes=_int("totalWorkMinutes"),
            overtime_minutes=_int("overtimeMinutes"),
            total_pay=_int("totalPay"),
        )
