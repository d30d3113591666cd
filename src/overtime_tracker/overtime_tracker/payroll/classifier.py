"""Shift classifier: (date, clock-in, clock-out, next-day, wage) -> ShiftResult.

Invalid input never raises here; it yields ShiftResult.empty().
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Optional

from ..common.datetime_utils import DateLike, TimeLike, parse_hhmm, parse_iso_date
from ..common.validators import Amount, to_amount
from ..core.constants import MAX_SHIFT_MINUTES
from ..core.exceptions import InvalidShiftSpan, ValidationError
from .calculator.base import BucketCalculator
from .calculator.interval_calculator import IntervalBucketCalculator
from .model import ShiftInput, ShiftResult

logger = logging.getLogger(__name__)


class ShiftClassifier:
    def __init__(self, calculator: Optional[BucketCalculator] = None):
        self._calculator = calculator or IntervalBucketCalculator()

    def normalize(
        self,
        work_date: DateLike,
        clock_in: TimeLike,
        clock_out: TimeLike,
        clock_out_next_day: bool = False,
    ) -> tuple[datetime, datetime]:
        """Resolve the [start, end) span of a shift.

        The end rolls over to the next day when the flag is set or when it is not
        after the start (so identical times mean a 24h shift).
        Raises InvalidTimeFormat / InvalidShiftSpan.
        """
        day = parse_iso_date(work_date)
        start = datetime.combine(day, parse_hhmm(clock_in))
        end = datetime.combine(day, parse_hhmm(clock_out))

        if clock_out_next_day or end <= start:
            end += timedelta(days=1)

        total = int((end - start).total_seconds() // 60)
        if total <= 0 or total > MAX_SHIFT_MINUTES:
            raise InvalidShiftSpan(f"근무 시간이 올바르지 않습니다 ({total}분)")
        return start, end

    def classify(
        self,
        work_date: DateLike,
        clock_in: TimeLike,
        clock_out: TimeLike,
        clock_out_next_day: bool,
        hourly_wage: Amount,
    ) -> ShiftResult:
        wage = to_amount(hourly_wage)

        try:
            start, end = self.normalize(work_date, clock_in, clock_out, clock_out_next_day)
        except ValidationError as e:
            logger.debug("Shift rejected (%s, %s-%s): %s", work_date, clock_in, clock_out, e)
            return ShiftResult.empty()

        counts = self._calculator.bucket(start, end)
        return ShiftResult.from_counts(counts, wage)

    def classify_input(self, shift: ShiftInput) -> ShiftResult:
        return self.classify(
            shift.work_date,
            shift.clock_in,
            shift.clock_out,
            shift.clock_out_next_day,
            shift.hourly_wage,
        )


_default_classifier = ShiftClassifier()


def classify(
    work_date: DateLike,
    clock_in: TimeLike,
    clock_out: TimeLike,
    clock_out_next_day: bool,
    hourly_wage: Amount,
) -> ShiftResult:
    """Classify one shift with the default (interval) calculator."""
    return _default_classifier.classify(work_date, clock_in, clock_out, clock_out_next_day, hourly_wage)
