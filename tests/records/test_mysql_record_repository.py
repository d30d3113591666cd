from __future__ import annotations

import json
from datetime import date
from decimal import Decimal

import pytest

from src.overtime_tracker.overtime_tracker.core.constants import WAGE_KEY
from src.overtime_tracker.overtime_tracker.payroll.classifier import classify
from src.overtime_tracker.overtime_tracker.records.model import DailyRecord
from src.overtime_tracker.overtime_tracker.records.mysql_record_repository import MySQLRecordRepository


class FakeCursor:
    def __init__(self, rows):
        self._rows = list(rows)
        self.executed = []
        self.rowcount = 0

    def execute(self, sql, params=None):
        self.executed.append((sql, params))
        self.rowcount = len(self._rows)

    def fetchone(self):
        return self._rows[0] if self._rows else None

    def fetchall(self):
        return list(self._rows)

    def close(self):
        pass


class FakeConnection:
    def __init__(self, cursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False

    def cursor(self, dictionary=True):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        pass


class FakeFactory:
    def __init__(self, rows=()):
        self.cursor = FakeCursor(rows)
        self.conn = FakeConnection(self.cursor)

    def connect(self):
        return self.conn

    def describe(self):
        return "test@localhost:3306/overtime_db"


def _row(result):
    return {
        "work_date": date(2025, 1, 6),
        "clock_in": "09:00",
        "clock_out": "20:00",
        "clock_out_next_day": 0,
        "result_json": json.dumps(result.to_dict()),
    }


def test_get_maps_row_to_record():
    result = classify("2025-01-06", "09:00", "20:00", False, 10000)
    repo = MySQLRecordRepository(FakeFactory([_row(result)]))

    rec = repo.get("2025-01-06")

    assert rec.date_str == "2025-01-06"
    assert rec.clock_in == "09:00"
    assert rec.clock_out_next_day is False
    assert rec.result == result


def test_get_missing_returns_none():
    assert MySQLRecordRepository(FakeFactory()).get("2025-01-06") is None


def test_put_upserts_result_json_and_commits():
    factory = FakeFactory()
    result = classify("2025-01-06", "9시", "20:00", False, 10000)
    record = DailyRecord("2025-01-06", "9시", "20:00", False, result)

    MySQLRecordRepository(factory).put(record)

    sql, params = factory.cursor.executed[0]
    assert "ON DUPLICATE KEY UPDATE" in sql
    assert params[0] == date(2025, 1, 6)
    assert params[1] == "9시"
    assert params[3] == 0
    assert json.loads(params[4]) == result.to_dict()
    assert factory.conn.committed


def test_list_range_returns_rows_in_query_order():
    result = classify("2025-01-06", "09:00", "20:00", False, 10000)
    repo = MySQLRecordRepository(FakeFactory([_row(result), {**_row(result), "work_date": "2025-01-07"}]))

    records = repo.list_range(start=date(2025, 1, 1), end=date(2025, 1, 31))

    assert [r.date_str for r in records] == ["2025-01-06", "2025-01-07"]


def test_wage_round_trips_through_settings_table():
    factory = FakeFactory([{"setting_value": "12500"}])
    repo = MySQLRecordRepository(factory)

    assert repo.get_wage() == Decimal("12500")

    repo.set_wage(Decimal("13000"))
    _, params = factory.cursor.executed[-1]
    assert params == (WAGE_KEY, "13000")


def test_failed_statement_rolls_back():
    factory = FakeFactory()

    def boom(sql, params=None):
        raise RuntimeError("db down")

    factory.cursor.execute = boom
    repo = MySQLRecordRepository(factory)

    with pytest.raises(RuntimeError):
        repo.delete("2025-01-06")

    assert factory.conn.rolled_back
    assert not factory.conn.committed


def test_long_unparsed_clock_string_is_written_as_is():
    factory = FakeFactory()
    junk = "x" * 40
    record = DailyRecord("2025-01-06", junk, "18:00", False, classify("2025-01-06", junk, "18:00", False, 10000))

    MySQLRecordRepository(factory).put(record)

    _, params = factory.cursor.executed[0]
    assert params[1] == junk
