"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
Times of day are expressed as minutes since midnight.
"""

MINUTES_PER_DAY = 24 * 60

# Shifts longer than this are rejected (48h).
MAX_SHIFT_MINUTES = 48 * 60

# Weekend work beyond the first 8h is paid at the "over 8" rates.
WEEKEND_THRESHOLD_MINUTES = 8 * 60

LUNCH_START = 12 * 60
LUNCH_END = 13 * 60
DINNER_START = 18 * 60
DINNER_END = 18 * 60 + 30

REGULAR_START = 9 * 60
REGULAR_END = 18 * 60
EVENING_END = 22 * 60
NIGHT_START = 22 * 60
NIGHT_END = 6 * 60

DEFAULT_WAGE = 10000

RECORDS_KEY = "overtime_records_v2"
WAGE_KEY = "overtime_wage_v2"

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"
