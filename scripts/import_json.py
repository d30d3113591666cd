"""Copy records and wage from a JSON export into the configured MySQL store.

The JSON file uses the same layout the app writes with STORAGE_BACKEND=json
(keys 'overtime_records_v2' / 'overtime_wage_v2'). Stored results are copied
verbatim, not recomputed.

Usage: python scripts/import_json.py path/to/overtime_records.json
"""

from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import load_settings

from src.overtime_tracker.overtime_tracker.container import build_records_repo
from src.overtime_tracker.overtime_tracker.records.json_repository import JsonFileRecordRepository


def main(argv: list[str]) -> int:
    if len(argv) != 2:
        print(__doc__)
        return 2

    source_path = Path(argv[1])
    if not source_path.exists():
        print(f"ERROR: {source_path} not found")
        return 1

    load_dotenv(override=False)
    settings = load_settings()

    source = JsonFileRecordRepository(source_path)
    target = build_records_repo(storage_backend="mysql", db_config=dict(settings.DB_CONFIG))

    records = source.list_all()
    for record in records:
        target.put(record)

    wage = source.get_wage()
    if wage is not None and wage > 0:
        target.set_wage(wage)

    print(f"OK: imported {len(records)} records (wage={wage if wage is not None else '-'})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv))
