from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Protocol, Sequence

from .model import DailyRecord


class RecordRepository(Protocol):
    """Daily records keyed by 'YYYY-MM-DD' plus the singleton hourly wage."""

    def get(self, date_str: str) -> Optional[DailyRecord]:
        raise NotImplementedError

    def put(self, record: DailyRecord) -> None:
        """Create or overwrite the record stored under record.date_str."""

        raise NotImplementedError

    def delete(self, date_str: str) -> bool:
        raise NotImplementedError

    def list_range(self, *, start: date, end: date) -> Sequence[DailyRecord]:
        """Records with start <= date <= end, sorted by date."""

        raise NotImplementedError

    def list_all(self) -> Sequence[DailyRecord]:
        raise NotImplementedError

    def get_wage(self) -> Optional[Decimal]:
        raise NotImplementedError

    def set_wage(self, amount: Decimal) -> None:
        raise NotImplementedError
