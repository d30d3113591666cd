from __future__ import annotations

from datetime import datetime, timedelta

from ...common.datetime_utils import is_weekend, minute_of_day
from ...core.constants import WEEKEND_THRESHOLD_MINUTES
from ...core.enums import PayCategory
from ..rules import empty_counts, is_break, weekday_category, weekend_category
from .base import BucketCalculator


class MinuteBucketCalculator(BucketCalculator):
    """Reference rule: walk the shift one minute at a time."""

    def bucket(self, start: datetime, end: datetime) -> dict[PayCategory, int]:
        counts = empty_counts()
        weekend_worked = 0

        total = int((end - start).total_seconds() // 60)
        for i in range(total):
            current = start + timedelta(minutes=i)
            minute = minute_of_day(current)
            if is_break(minute):
                continue

            if is_weekend(current.date()):
                # Counter is bumped before the check: minute 480 is still under 8h.
                weekend_worked += 1
                over = weekend_worked > WEEKEND_THRESHOLD_MINUTES
                counts[weekend_category(minute, over_threshold=over)] += 1
            else:
                counts[weekday_category(minute)] += 1

        return counts
