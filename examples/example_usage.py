"""Example: use the classifier and service layer directly (no Flask).

Goal: controllers are a thin layer, the business rules live in services.
"""

import tempfile
from datetime import date
from pathlib import Path

from src.overtime_tracker.overtime_tracker.common.formatting import format_minutes, format_won
from src.overtime_tracker.overtime_tracker.container import build_container
from src.overtime_tracker.overtime_tracker.payroll.classifier import classify
from src.overtime_tracker.overtime_tracker.records.json_repository import JsonFileRecordRepository


def main():
    # Friday 09:00 -> Saturday 02:00
    result = classify("2025-01-03", "09:00", "02:00", True, 10000)
    print(result)
    print("총 근무", format_minutes(result.total_work_minutes), "/", format_won(result.total_pay))

    with tempfile.TemporaryDirectory() as tmp:
        repo = JsonFileRecordRepository(Path(tmp) / "records.json")
        container = build_container(records_repo=repo)
        container.record_service.save("2025-01-04", "10:00", "20:00", wage=12000)
        print(container.dashboard_service.weekly(date(2025, 1, 4)).as_dict())


if __name__ == "__main__":
    main()
