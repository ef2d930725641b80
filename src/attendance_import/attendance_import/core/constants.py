"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import date

STANDARD_WORK_HOURS = 8
GRID_HOURS_PER_WORK_VALUE = 8

SERIAL_DATE_EPOCH = date(1900, 1, 1)
# Vendor serial dates are off by two against the epoch (spreadsheet leap-year miscount).
SERIAL_DATE_OFFSET_DAYS = 2

DEFAULT_WEEKEND_LABELS = ("CN", "T.7")
DEFAULT_IMPORT_ENCODING = "utf-8-sig"

EMPLOYEE_CODE_PREFIX = "NV"
EMPLOYEE_CODE_DIGITS = 5

MONTHLY_HINT = "monthly"
