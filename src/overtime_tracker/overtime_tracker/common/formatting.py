from __future__ import annotations


def format_minutes(mins: int) -> str:
    """90 -> '1시간 30분', 0 or less -> '0분'."""
    if mins <= 0:
        return "0분"
    h, m = divmod(int(mins), 60)
    if h == 0:
        return f"{m}분"
    if m == 0:
        return f"{h}시간"
    return f"{h}시간 {m}분"


def format_won(amount: int) -> str:
    return f"{int(amount):,}원"


def format_hours(mins: int) -> str:
    """HH:MM total, used in CSV exports."""
    mins = max(int(mins), 0)
    return f"{mins // 60:02d}:{mins % 60:02d}"
