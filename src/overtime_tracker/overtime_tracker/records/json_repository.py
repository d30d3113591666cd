from __future__ import annotations

import json
import logging
import threading
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Any, Optional, Sequence

from ..common.datetime_utils import parse_iso_date
from ..common.validators import amount_to_json, to_amount
from ..core.constants import RECORDS_KEY, WAGE_KEY
from ..core.exceptions import ValidationError
from .model import DailyRecord
from .repository import RecordRepository

logger = logging.getLogger(__name__)


class JsonFileRecordRepository(RecordRepository):
    """Whole-state JSON document, loaded once and rewritten on every mutation.

    Note: Writes go through a temp file that then replaces the target.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)
        self._lock = threading.Lock()
        self._records: dict[str, DailyRecord] = {}
        self._wage: Optional[Decimal] = None
        self._load()

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> None:
        if not self._path.exists():
            return
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8") or "{}")
        except (OSError, ValueError) as e:
            logger.warning("Could not read %s, starting empty: %s", self._path, e)
            return
        if not isinstance(raw, dict):
            logger.warning("Unexpected content in %s, starting empty", self._path)
            return

        for key, item in (raw.get(RECORDS_KEY) or {}).items():
            try:
                self._records[key] = DailyRecord.from_dict(item)
            except (KeyError, TypeError, ValueError) as e:
                logger.warning("Skipping malformed record %r: %s", key, e)

        if raw.get(WAGE_KEY) is not None:
            try:
                self._wage = to_amount(raw[WAGE_KEY])
            except ValidationError:
                logger.warning("Ignoring malformed stored wage %r", raw[WAGE_KEY])

    def _flush(self, records: dict[str, DailyRecord], wage: Optional[Decimal]) -> None:
        doc: dict[str, Any] = {
            RECORDS_KEY: {k: r.to_dict() for k, r in sorted(records.items())},
        }
        if wage is not None:
            doc[WAGE_KEY] = amount_to_json(wage)

        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp.write_text(json.dumps(doc, ensure_ascii=False, indent=2), encoding="utf-8")
        tmp.replace(self._path)

    def get(self, date_str: str) -> Optional[DailyRecord]:
        return self._records.get(date_str)

    def put(self, record: DailyRecord) -> None:
        with self._lock:
            records = {**self._records, record.date_str: record}
            self._flush(records, self._wage)
            self._records = records

    def delete(self, date_str: str) -> bool:
        with self._lock:
            if date_str not in self._records:
                return False
            records = {k: r for k, r in self._records.items() if k != date_str}
            self._flush(records, self._wage)
            self._records = records
            return True

    def list_range(self, *, start: date, end: date) -> Sequence[DailyRecord]:
        out = []
        for key, record in sorted(self._records.items()):
            try:
                day = parse_iso_date(key)
            except ValidationError:
                continue
            if start <= day <= end:
                out.append(record)
        return out

    def list_all(self) -> Sequence[DailyRecord]:
        return [r for _, r in sorted(self._records.items())]

    def get_wage(self) -> Optional[Decimal]:
        return self._wage

    def set_wage(self, amount: Decimal) -> None:
        with self._lock:
            self._flush(self._records, amount)
            self._wage = amount
