from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .core.enums import StorageBackend
from .core.exceptions import ValidationError
from .dashboard.service import DashboardService
from .database.connection import DBConfig, DatabaseConnection
from .payroll.classifier import ShiftClassifier
from .records.json_repository import JsonFileRecordRepository
from .records.mysql_record_repository import MySQLRecordRepository
from .records.repository import RecordRepository
from .records.service import RecordService


@dataclass(frozen=True)
class Container:
    records_repo: RecordRepository

    classifier: ShiftClassifier
    record_service: RecordService
    dashboard_service: DashboardService


def build_records_repo(
    *,
    storage_backend: str,
    data_file: Optional[str | Path] = None,
    db_config: Optional[dict] = None,
) -> RecordRepository:
    try:
        backend = StorageBackend(str(storage_backend).lower())
    except ValueError as e:
        raise ValidationError(f"Unknown STORAGE_BACKEND: {storage_backend!r}") from e

    if backend is StorageBackend.MYSQL:
        conn = DatabaseConnection(DBConfig.from_dict(db_config or {}))
        return MySQLRecordRepository(conn)
    return JsonFileRecordRepository(data_file or "data/overtime_records.json")


def build_container(*, records_repo: RecordRepository, default_wage: int = 10000) -> Container:
    classifier = ShiftClassifier()
    record_service = RecordService(records_repo, classifier=classifier, default_wage=default_wage)
    dashboard_service = DashboardService(record_service)

    return Container(
        records_repo=records_repo,
        classifier=classifier,
        record_service=record_service,
        dashboard_service=dashboard_service,
    )
