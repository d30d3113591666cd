from __future__ import annotations

from enum import Enum


class PayCategory(str, Enum):
    """수당 항목: 근무 1분은 정확히 하나의 항목에 속한다."""

    REGULAR = "regular"
    EARLY_OVERTIME = "early_overtime"
    EVENING_OVERTIME = "evening_overtime"
    NIGHT_OVERTIME = "night_overtime"
    WEEKEND_DAY_UNDER_8 = "weekend_day_under8"
    WEEKEND_NIGHT_UNDER_8 = "weekend_night_under8"
    WEEKEND_DAY_OVER_8 = "weekend_day_over8"
    WEEKEND_NIGHT_OVER_8 = "weekend_night_over8"

    @property
    def is_overtime(self) -> bool:
        return self is not PayCategory.REGULAR

    @property
    def is_weekend(self) -> bool:
        return self.value.startswith("weekend_")


class StorageBackend(str, Enum):
    """Where daily records and the hourly wage are kept."""

    JSON = "json"
    MYSQL = "mysql"
