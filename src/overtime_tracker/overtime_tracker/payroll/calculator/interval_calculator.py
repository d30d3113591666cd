from __future__ import annotations

from datetime import datetime, time, timedelta

from ...common.datetime_utils import is_weekend
from ...core.constants import WEEKEND_THRESHOLD_MINUTES
from ...core.enums import PayCategory
from ..rules import OVER_8, empty_counts, windows_for
from .base import BucketCalculator

ONE_DAY = timedelta(days=1)


def _minutes_since(day_start: datetime, value: datetime) -> int:
    return int((value - day_start).total_seconds() // 60)


class IntervalBucketCalculator(BucketCalculator):
    """Overlap arithmetic between the shift and each day's fixed windows.

    Same results as MinuteBucketCalculator, without the per-minute loop. Days
    and windows are visited in chronological order so the weekend running
    total splits a window exactly at minute 480/481.
    """

    def bucket(self, start: datetime, end: datetime) -> dict[PayCategory, int]:
        counts = empty_counts()
        weekend_worked = 0

        day_start = datetime.combine(start.date(), time.min)
        while day_start < end:
            lo = _minutes_since(day_start, max(start, day_start))
            hi = _minutes_since(day_start, min(end, day_start + ONE_DAY))
            weekend = is_weekend(day_start.date())

            for window in windows_for(weekend):
                overlap = min(hi, window.end) - max(lo, window.start)
                if overlap <= 0 or window.category is None:
                    continue

                if not weekend:
                    counts[window.category] += overlap
                    continue

                under = max(0, min(overlap, WEEKEND_THRESHOLD_MINUTES - weekend_worked))
                counts[window.category] += under
                counts[OVER_8[window.category]] += overlap - under
                weekend_worked += overlap

            day_start += ONE_DAY

        return counts
