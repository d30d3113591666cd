from __future__ import annotations

from src.overtime_tracker.overtime_tracker.database.connection import DBConfig, DatabaseConnection
from src.overtime_tracker.overtime_tracker.database.mysql_base import RECORD_COLUMNS, upsert_sql


def test_upsert_updates_every_column_but_the_key():
    sql = upsert_sql("overtime_records", "work_date", RECORD_COLUMNS)

    assert sql.startswith("INSERT INTO overtime_records(work_date, clock_in, clock_out")
    assert sql.count("%s") == len(RECORD_COLUMNS)
    assert "work_date=VALUES" not in sql
    assert "result_json=VALUES(result_json)" in sql


def test_db_config_defaults_and_describe():
    config = DBConfig.from_dict({"host": "db", "port": "3307"})

    assert config.port == 3307
    assert config.database == "overtime_db"
    assert DatabaseConnection(config).describe() == "root@db:3307/overtime_db"
