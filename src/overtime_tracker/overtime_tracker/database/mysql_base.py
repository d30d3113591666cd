from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Mapping, Optional, TypedDict

from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


class RecordRow(TypedDict):
    """One `overtime_records` row as the dictionary cursor returns it."""

    work_date: Any
    clock_in: str
    clock_out: str
    clock_out_next_day: int
    result_json: str


RECORD_COLUMNS = ("work_date", "clock_in", "clock_out", "clock_out_next_day", "result_json")


@contextmanager
def db_cursor(conn_factory: DatabaseConnection):
    """Dictionary cursor in one transaction: commit on exit, rollback on error."""
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=True)
        try:
            yield cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        logger.warning("Rolling back %s transaction", conn_factory.describe())
        conn.rollback()
        raise
    finally:
        conn.close()


def upsert_sql(table: str, key: str, columns: tuple[str, ...]) -> str:
    """INSERT that overwrites every non-key column when `key` already exists."""
    updates = ", ".join(f"{c}=VALUES({c})" for c in columns if c != key)
    return (
        f"INSERT INTO {table}({', '.join(columns)}) "
        f"VALUES({', '.join(['%s'] * len(columns))}) "
        f"ON DUPLICATE KEY UPDATE {updates}"
    )


def fetch_record(cur) -> Optional[RecordRow]:
    row = cur.fetchone()
    return row if row else None


def fetch_records(cur) -> list[RecordRow]:
    return list(cur.fetchall() or [])


def fetch_setting(cur) -> Optional[str]:
    row: Optional[Mapping[str, Any]] = cur.fetchone()
    return str(row["setting_value"]) if row else None
