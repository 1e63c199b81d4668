"""Constants and defaults.

Note: Keep payroll constants here to avoid magic numbers spread across code.
"""

# Overtime starts after this time on a regular working day (16:30).
REGULAR_THRESHOLD_MINUTES = 16 * 60 + 30
# On a holiday the whole shift counts, from 08:00.
HOLIDAY_THRESHOLD_MINUTES = 8 * 60

DAYS_PER_MONTH = 30
HOURS_PER_DAY = 8

REGULAR_MULTIPLIER = 1.25
HOLIDAY_MULTIPLIER = 1.5

DEFAULT_RECENT_RECORDS_LIMIT = 100
DEFAULT_EMPLOYEE_RECORDS_LIMIT = 50
DEFAULT_SESSION_DAYS = 7
MIN_PASSWORD_LENGTH = 6

# Spreadsheet column names that may hold the clock-out time, in priority order.
END_TIME_COLUMN_ALIASES = (
    "ساعة الانتهاء",
    "وقت الخروج",
    "end_time",
    "End Time",
    "checkout_time",
    "Checkout Time",
    "الوقت",
    "Time",
    "ساعة الخروج",
    "وقت",
)

SPREADSHEET_EXTENSIONS = (".xlsx", ".xls", ".csv")
