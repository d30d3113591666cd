from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..common.datetime_utils import (
    DateLike,
    TimeLike,
    format_date,
    format_hhmm,
    month_bounds,
    parse_hhmm,
    parse_iso_date,
)
from ..common.validators import Amount, require_positive_amount, to_amount
from ..core.constants import DEFAULT_WAGE
from ..core.exceptions import InvalidTimeFormat, NotFoundError
from ..payroll.classifier import ShiftClassifier
from ..payroll.model import ShiftResult
from .model import DailyRecord
from .repository import RecordRepository

logger = logging.getLogger(__name__)


def _time_str(value: TimeLike) -> str:
    try:
        return format_hhmm(parse_hhmm(value))
    except InvalidTimeFormat:
        return str(value)


class RecordService:
    def __init__(
        self,
        records: RecordRepository,
        *,
        classifier: Optional[ShiftClassifier] = None,
        default_wage: Amount = DEFAULT_WAGE,
    ):
        self._records = records
        self._classifier = classifier or ShiftClassifier()
        self._default_wage = to_amount(default_wage)

    def current_wage(self) -> Decimal:
        stored = self._records.get_wage()
        if stored is not None and stored > 0:
            return stored
        return self._default_wage

    def set_wage(self, amount: Amount) -> Decimal:
        wage = require_positive_amount(amount)
        self._records.set_wage(wage)
        logger.info("Hourly wage set to %s", wage)
        return wage

    def wage_for(self, supplied: Optional[Amount] = None) -> Decimal:
        """Wage a shift is paid at: a positive supplied wage, else the current one."""
        if supplied is None:
            return self.current_wage()
        amount = to_amount(supplied)
        if amount > 0:
            return amount
        current = self.current_wage()
        logger.info("Ignoring non-positive wage %s, keeping %s", amount, current)
        return current

    def preview(
        self,
        work_date: DateLike,
        clock_in: TimeLike,
        clock_out: TimeLike,
        clock_out_next_day: bool = False,
        *,
        wage: Optional[Amount] = None,
    ) -> ShiftResult:
        """Classify a shift with the same wage choice as save, storing nothing."""
        return self._classifier.classify(work_date, clock_in, clock_out, bool(clock_out_next_day), self.wage_for(wage))

    def save(
        self,
        work_date: DateLike,
        clock_in: TimeLike,
        clock_out: TimeLike,
        clock_out_next_day: bool = False,
        *,
        wage: Optional[Amount] = None,
    ) -> DailyRecord:
        """Classify one day and store it, replacing any earlier record of that day.

        A positive wage becomes the new stored wage once the record is stored; a
        missing or non-positive one falls back to the stored wage instead of
        overwriting it.
        """
        day = parse_iso_date(work_date)
        used_wage = self.wage_for(wage)
        stores_wage = wage is not None and used_wage == to_amount(wage)

        result = self._classifier.classify(day, clock_in, clock_out, bool(clock_out_next_day), used_wage)
        record = DailyRecord(
            date_str=format_date(day),
            clock_in=_time_str(clock_in),
            clock_out=_time_str(clock_out),
            clock_out_next_day=bool(clock_out_next_day),
            result=result,
        )
        self._records.put(record)
        if stores_wage:
            self._records.set_wage(used_wage)

        logger.info(
            "Saved %s (%s-%s%s): %s min, pay %s",
            record.date_str,
            record.clock_in,
            record.clock_out,
            " +1d" if record.clock_out_next_day else "",
            result.total_work_minutes,
            result.total_pay,
        )
        return record

    def get(self, work_date: DateLike) -> Optional[DailyRecord]:
        return self._records.get(format_date(parse_iso_date(work_date)))

    def delete(self, work_date: DateLike) -> None:
        key = format_date(parse_iso_date(work_date))
        if not self._records.delete(key):
            raise NotFoundError(f"{key} 기록이 없습니다")
        logger.info("Deleted record %s", key)

    def list_range(self, *, start: date, end: date) -> Sequence[DailyRecord]:
        return self._records.list_range(start=start, end=end)

    def list_month(self, anchor: date) -> Sequence[DailyRecord]:
        start, end = month_bounds(anchor)
        return self._records.list_range(start=start, end=end)
