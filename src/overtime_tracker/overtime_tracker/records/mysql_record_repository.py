from __future__ import annotations

import json
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..common.datetime_utils import format_date, parse_iso_date
from ..common.validators import to_amount
from ..core.constants import WAGE_KEY
from ..database.connection import DatabaseConnection
from ..database.mysql_base import (
    RECORD_COLUMNS,
    RecordRow,
    db_cursor,
    fetch_record,
    fetch_records,
    fetch_setting,
    upsert_sql,
)
from ..payroll.model import ShiftResult
from .model import DailyRecord
from .repository import RecordRepository

_SELECT = f"SELECT {', '.join(RECORD_COLUMNS)} FROM overtime_records"
_UPSERT_RECORD = upsert_sql("overtime_records", "work_date", RECORD_COLUMNS)
_UPSERT_SETTING = upsert_sql("app_settings", "setting_key", ("setting_key", "setting_value"))


def _to_record(r: RecordRow) -> DailyRecord:
    work_date = r["work_date"]
    if not isinstance(work_date, date):
        work_date = parse_iso_date(str(work_date))
    return DailyRecord(
        date_str=format_date(work_date),
        clock_in=str(r["clock_in"]),
        clock_out=str(r["clock_out"]),
        clock_out_next_day=bool(r.get("clock_out_next_day")),
        result=ShiftResult.from_dict(json.loads(r.get("result_json") or "{}")),
    )


def _to_row(record: DailyRecord) -> tuple:
    return (
        parse_iso_date(record.date_str),
        record.clock_in,
        record.clock_out,
        1 if record.clock_out_next_day else 0,
        json.dumps(record.result.to_dict()),
    )


class MySQLRecordRepository(RecordRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, date_str: str) -> Optional[DailyRecord]:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(_SELECT + " WHERE work_date=%s", (parse_iso_date(date_str),))
            r = fetch_record(cur)
            return _to_record(r) if r else None

    def put(self, record: DailyRecord) -> None:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(_UPSERT_RECORD, _to_row(record))

    def delete(self, date_str: str) -> bool:
        with db_cursor(self._conn_factory) as cur:
            cur.execute("DELETE FROM overtime_records WHERE work_date=%s", (parse_iso_date(date_str),))
            return cur.rowcount > 0

    def list_range(self, *, start: date, end: date) -> Sequence[DailyRecord]:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(_SELECT + " WHERE work_date BETWEEN %s AND %s ORDER BY work_date", (start, end))
            return [_to_record(r) for r in fetch_records(cur)]

    def list_all(self) -> Sequence[DailyRecord]:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(_SELECT + " ORDER BY work_date")
            return [_to_record(r) for r in fetch_records(cur)]

    def get_wage(self) -> Optional[Decimal]:
        with db_cursor(self._conn_factory) as cur:
            cur.execute("SELECT setting_value FROM app_settings WHERE setting_key=%s", (WAGE_KEY,))
            value = fetch_setting(cur)
            return to_amount(value) if value is not None else None

    def set_wage(self, amount: Decimal) -> None:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(_UPSERT_SETTING, (WAGE_KEY, str(amount)))
