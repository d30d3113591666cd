from src.overtime_tracker.overtime_tracker.common.formatting import format_hours, format_minutes, format_won


def test_format_minutes():
    assert format_minutes(0) == "0분"
    assert format_minutes(-5) == "0분"
    assert format_minutes(45) == "45분"
    assert format_minutes(120) == "2시간"
    assert format_minutes(90) == "1시간 30분"


def test_format_won():
    assert format_won(0) == "0원"
    assert format_won(1234567) == "1,234,567원"


def test_format_hours():
    assert format_hours(480) == "08:00"
    assert format_hours(1350) == "22:30"
