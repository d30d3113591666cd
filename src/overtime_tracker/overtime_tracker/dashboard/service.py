from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..common.datetime_utils import format_date, month_bounds, week_bounds
from ..common.formatting import format_minutes, format_won
from ..core.enums import PayCategory
from ..payroll.model import ShiftResult
from ..payroll.rules import MULTIPLIERS, OVERTIME_CATEGORIES, pay_for
from ..records.model import DailyRecord
from ..records.service import RecordService

CATEGORY_LABELS: dict[PayCategory, str] = {
    PayCategory.REGULAR: "기본 근무",
    PayCategory.EARLY_OVERTIME: "조기출근 연장",
    PayCategory.EVENING_OVERTIME: "저녁 야근",
    PayCategory.NIGHT_OVERTIME: "심야 야근",
    PayCategory.WEEKEND_DAY_UNDER_8: "주말(8h이내)낮",
    PayCategory.WEEKEND_NIGHT_UNDER_8: "주말(8h이내)심야",
    PayCategory.WEEKEND_DAY_OVER_8: "주말(8h초과)낮",
    PayCategory.WEEKEND_NIGHT_OVER_8: "주말(8h초과)심야",
}


def overtime_pay(result: ShiftResult, wage: Decimal) -> int:
    """Pay of the non-regular minutes only, floored once."""
    return pay_for(result.minutes_by_category(), wage, OVERTIME_CATEGORIES)


@dataclass(frozen=True)
class PayLine:
    category: PayCategory
    minutes: int
    multiplier: Decimal
    pay: int

    def as_dict(self) -> dict:
        return {
            "category": self.category.value,
            "label": CATEGORY_LABELS[self.category],
            "minutes": self.minutes,
            "minutesText": format_minutes(self.minutes),
            "multiplier": float(self.multiplier),
            "pay": self.pay,
            "payText": format_won(self.pay),
        }


@dataclass(frozen=True)
class DailySummary:
    date_str: str
    record: Optional[DailyRecord]
    lines: list[PayLine] = field(default_factory=list)
    overtime_pay: int = 0

    def as_dict(self) -> dict:
        return {
            "date": self.date_str,
            "record": self.record.to_dict() if self.record else None,
            "lines": [line.as_dict() for line in self.lines],
            "overtimePay": self.overtime_pay,
            "overtimePayText": format_won(self.overtime_pay),
        }


@dataclass(frozen=True)
class PeriodSummary:
    start: date
    end: date
    days: int
    work_minutes: int
    overtime_minutes: int
    overtime_pay: int
    total_pay: int

    def as_dict(self) -> dict:
        return {
            "start": format_date(self.start),
            "end": format_date(self.end),
            "days": self.days,
            "workMinutes": self.work_minutes,
            "workText": format_minutes(self.work_minutes),
            "overtimeMinutes": self.overtime_minutes,
            "overtimeText": format_minutes(self.overtime_minutes),
            "overtimePay": self.overtime_pay,
            "overtimePayText": format_won(self.overtime_pay),
            "totalPay": self.total_pay,
        }


class DashboardService:
    """Daily / weekly / monthly rollups over stored records.

    Overtime pay is recomputed from stored minutes with the current wage and the
    shared multiplier table; total_pay sums the snapshots taken at save time.
    """

    def __init__(self, records: RecordService):
        self._records = records

    def daily(self, anchor: date) -> DailySummary:
        key = format_date(anchor)
        record = self._records.get(anchor)
        if not record:
            return DailySummary(date_str=key, record=None)

        wage = self._records.current_wage()
        lines = []
        for category, minutes in record.result.minutes_by_category().items():
            if minutes <= 0:
                continue
            lines.append(
                PayLine(
                    category=category,
                    minutes=minutes,
                    multiplier=MULTIPLIERS[category],
                    pay=pay_for({category: minutes}, wage, (category,)),
                )
            )
        return DailySummary(date_str=key, record=record, lines=lines, overtime_pay=overtime_pay(record.result, wage))

    def weekly(self, anchor: date) -> PeriodSummary:
        start, end = week_bounds(anchor)
        return self._summarize(start, end, self._records.list_range(start=start, end=end))

    def monthly(self, anchor: date) -> PeriodSummary:
        start, end = month_bounds(anchor)
        return self._summarize(start, end, self._records.list_range(start=start, end=end))

    def _summarize(self, start: date, end: date, records: Sequence[DailyRecord]) -> PeriodSummary:
        wage = self._records.current_wage()
        work = overtime = ot_pay = total = 0
        for r in records:
            work += r.result.total_work_minutes
            overtime += r.result.overtime_minutes
            ot_pay += overtime_pay(r.result, wage)
            total += r.result.total_pay

        return PeriodSummary(
            start=start,
            end=end,
            days=len(records),
            work_minutes=work,
            overtime_minutes=overtime,
            overtime_pay=ot_pay,
            total_pay=total,
        )
