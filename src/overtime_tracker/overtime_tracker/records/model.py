from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..payroll.model import ShiftResult


@dataclass(frozen=True)
class DailyRecord:
    """하루 출퇴근 기록: 저장 시점의 계산 결과를 그대로 보관한다."""

    date_str: str
    clock_in: str
    clock_out: str
    clock_out_next_day: bool
    result: ShiftResult

    def to_dict(self) -> dict[str, Any]:
        return {
            "dateStr": self.date_str,
            "clockInStr": self.clock_in,
            "clockOutStr": self.clock_out,
            "clockOutNextDay": self.clock_out_next_day,
            "result": self.result.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DailyRecord":
        return cls(
            date_str=str(data["dateStr"]),
            clock_in=str(data["clockInStr"]),
            clock_out=str(data["clockOutStr"]),
            clock_out_next_day=bool(data.get("clockOutNextDay", False)),
            result=ShiftResult.from_dict(data.get("result") or {}),
        )
