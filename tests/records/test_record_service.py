from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional

import pytest

from src.overtime_tracker.overtime_tracker.core.exceptions import NotFoundError, ValidationError
from src.overtime_tracker.overtime_tracker.records.model import DailyRecord
from src.overtime_tracker.overtime_tracker.records.service import RecordService


class InMemoryRecords:
    def __init__(self, wage: Optional[Decimal] = None):
        self.records: dict[str, DailyRecord] = {}
        self.wage = wage
        self.puts = 0

    def get(self, date_str: str) -> Optional[DailyRecord]:
        return self.records.get(date_str)

    def put(self, record: DailyRecord) -> None:
        self.puts += 1
        self.records[record.date_str] = record

    def delete(self, date_str: str) -> bool:
        return self.records.pop(date_str, None) is not None

    def list_range(self, *, start: date, end: date):
        return [r for k, r in sorted(self.records.items()) if start.isoformat() <= k <= end.isoformat()]

    def list_all(self):
        return [r for _, r in sorted(self.records.items())]

    def get_wage(self) -> Optional[Decimal]:
        return self.wage

    def set_wage(self, amount: Decimal) -> None:
        self.wage = amount


def test_save_classifies_and_stores_whole_record():
    repo = InMemoryRecords()
    svc = RecordService(repo)

    record = svc.save("2025-01-06", "09:00", "22:00", False, wage=10000)

    assert repo.records["2025-01-06"] == record
    assert record.clock_in == "09:00"
    assert record.clock_out == "22:00"
    assert record.result.regular_minutes == 480
    assert record.result.evening_overtime_minutes == 210
    assert record.result.total_pay == 132500


def test_positive_wage_becomes_the_stored_wage():
    repo = InMemoryRecords(wage=Decimal("9000"))
    svc = RecordService(repo)

    svc.save("2025-01-06", "09:00", "18:00", wage=12000)

    assert repo.wage == Decimal("12000")
    assert svc.current_wage() == Decimal("12000")


@pytest.mark.parametrize("wage", [0, -1, None])
def test_non_positive_or_missing_wage_falls_back_to_stored(wage):
    repo = InMemoryRecords(wage=Decimal("12000"))
    svc = RecordService(repo)

    record = svc.save("2025-01-06", "09:00", "18:00", wage=wage)

    assert repo.wage == Decimal("12000")
    # 480 min * 12000 / 60
    assert record.result.total_pay == 96000


def test_default_wage_when_nothing_is_stored():
    svc = RecordService(InMemoryRecords(), default_wage=6000)

    record = svc.save("2025-01-06", "09:00", "18:00")

    assert svc.current_wage() == Decimal("6000")
    assert record.result.total_pay == 48000


def test_saving_same_day_overwrites():
    repo = InMemoryRecords()
    svc = RecordService(repo)

    svc.save("2025-01-06", "09:00", "18:00")
    svc.save("2025-01-06", "09:00", "20:00")

    assert len(repo.records) == 1
    assert repo.records["2025-01-06"].result.evening_overtime_minutes == 90


def test_invalid_times_store_an_empty_result():
    repo = InMemoryRecords()
    svc = RecordService(repo)

    record = svc.save("2025-01-06", "9시", "18:00")

    assert record.result.is_empty
    assert record.clock_in == "9시"
    assert repo.puts == 1


def test_date_key_is_normalized_and_validated():
    svc = RecordService(InMemoryRecords())

    record = svc.save(date(2025, 1, 6), "9:00", "18:00")
    assert record.date_str == "2025-01-06"
    assert record.clock_in == "09:00"

    with pytest.raises(ValidationError):
        svc.save("2025-02-30", "09:00", "18:00")


def test_delete_missing_record_raises():
    svc = RecordService(InMemoryRecords())

    with pytest.raises(NotFoundError):
        svc.delete("2025-01-06")


def test_delete_removes_record():
    repo = InMemoryRecords()
    svc = RecordService(repo)
    svc.save("2025-01-06", "09:00", "18:00")

    svc.delete("2025-01-06")

    assert svc.get("2025-01-06") is None


def test_set_wage_rejects_non_positive_and_keeps_stored():
    repo = InMemoryRecords(wage=Decimal("10000"))
    svc = RecordService(repo)

    with pytest.raises(ValidationError):
        svc.set_wage(0)
    with pytest.raises(ValidationError):
        svc.set_wage("abc")

    assert repo.wage == Decimal("10000")
    assert svc.set_wage("12,500") == Decimal("12500")


def test_list_month_uses_calendar_month():
    svc = RecordService(InMemoryRecords())
    svc.save("2024-12-31", "09:00", "18:00")
    svc.save("2025-01-06", "09:00", "18:00")
    svc.save("2025-01-31", "09:00", "18:00")
    svc.save("2025-02-01", "09:00", "18:00")

    days = [r.date_str for r in svc.list_month(date(2025, 1, 15))]

    assert days == ["2025-01-06", "2025-01-31"]


class FailingPutRecords(InMemoryRecords):
    def put(self, record: DailyRecord) -> None:
        raise OSError("disk full")


def test_wage_is_stored_only_after_the_record_is():
    repo = FailingPutRecords(wage=Decimal("10000"))
    svc = RecordService(repo)

    with pytest.raises(OSError):
        svc.save("2025-01-06", "x" * 40, "18:00", wage=9000)

    assert repo.wage == Decimal("10000")


@pytest.mark.parametrize("supplied, expected", [(None, "12000"), (0, "12000"), (-5, "12000"), ("9,500", "9500")])
def test_wage_for(supplied, expected):
    svc = RecordService(InMemoryRecords(wage=Decimal("12000")))

    assert svc.wage_for(supplied) == Decimal(expected)


def test_wage_for_rejects_non_numeric():
    svc = RecordService(InMemoryRecords())

    with pytest.raises(ValidationError):
        svc.wage_for("lots")


def test_preview_matches_save_and_stores_nothing():
    repo = InMemoryRecords(wage=Decimal("12000"))
    svc = RecordService(repo)

    preview = svc.preview("2025-01-06", "09:00", "18:00", False, wage=0)
    assert repo.puts == 0

    saved = svc.save("2025-01-06", "09:00", "18:00", False, wage=0)
    assert preview == saved.result
    assert preview.total_pay == 96000


def test_long_junk_clock_string_is_kept_verbatim():
    record = RecordService(InMemoryRecords()).save("2025-01-06", "x" * 40, "18:00")

    assert record.clock_in == "x" * 40
    assert record.result.is_empty
