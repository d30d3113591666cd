from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from src.overtime_tracker.overtime_tracker.core.enums import PayCategory
from src.overtime_tracker.overtime_tracker.dashboard.service import DashboardService, overtime_pay
from src.overtime_tracker.overtime_tracker.records.json_repository import JsonFileRecordRepository
from src.overtime_tracker.overtime_tracker.records.service import RecordService


@pytest.fixture
def services(tmp_path):
    records = RecordService(JsonFileRecordRepository(tmp_path / "records.json"), default_wage=10000)
    # Week of Mon 2025-01-06 .. Sun 2025-01-12
    records.save("2025-01-06", "09:00", "22:00")  # regular 480, evening 210
    records.save("2025-01-11", "10:00", "14:00")  # weekend day 180
    records.save("2025-01-13", "09:00", "20:00")  # next week: regular 480, evening 90
    return records, DashboardService(records)


def test_daily_breakdown_lists_non_zero_categories(services):
    _, dashboard = services

    summary = dashboard.daily(date(2025, 1, 6))

    assert summary.record is not None
    assert [(l.category, l.minutes, l.pay) for l in summary.lines] == [
        (PayCategory.REGULAR, 480, 80000),
        (PayCategory.EVENING_OVERTIME, 210, 52500),
    ]
    assert summary.lines[1].multiplier == Decimal("1.5")
    assert summary.overtime_pay == 52500


def test_daily_without_record(services):
    _, dashboard = services

    summary = dashboard.daily(date(2025, 1, 7))

    assert summary.record is None
    assert summary.lines == []
    assert summary.as_dict()["overtimePay"] == 0


def test_weekly_rollup_uses_monday_to_sunday(services):
    _, dashboard = services

    week = dashboard.weekly(date(2025, 1, 8))

    assert week.start == date(2025, 1, 6)
    assert week.end == date(2025, 1, 12)
    assert week.days == 2
    assert week.overtime_minutes == 390
    assert week.overtime_pay == 52500 + 45000


def test_monthly_rollup(services):
    _, dashboard = services

    month = dashboard.monthly(date(2025, 1, 15))

    assert month.start == date(2025, 1, 1)
    assert month.end == date(2025, 1, 31)
    assert month.days == 3
    assert month.work_minutes == 690 + 180 + 570
    assert month.overtime_minutes == 210 + 180 + 90
    assert month.overtime_pay == 52500 + 45000 + 22500
    assert month.total_pay == 132500 + 45000 + 102500


def test_rollups_follow_current_wage(services):
    records, dashboard = services

    records.set_wage(20000)

    assert dashboard.weekly(date(2025, 1, 6)).overtime_pay == 2 * (52500 + 45000)
    # stored snapshots are not recomputed
    assert dashboard.monthly(date(2025, 1, 6)).total_pay == 132500 + 45000 + 102500


def test_overtime_pay_excludes_regular_minutes(services):
    records, _ = services

    result = records.get("2025-01-06").result

    assert overtime_pay(result, Decimal("10000")) == 52500
    assert overtime_pay(result, Decimal("0")) == 0
