"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * 60

MIN_BREAK_MINUTES = 0
MAX_BREAK_MINUTES = 480

MIN_OVERTIME_MULTIPLIER = 1.0
MAX_OVERTIME_MULTIPLIER = 3.0

# Flat composite deduction model, calibrated against a representative paystub.
TOTAL_DEDUCTION_RATE = 0.146
FEDERAL_TAX_SHARE = 0.40
PROVINCIAL_TAX_SHARE = 0.20
CPP_SHARE = 0.25
EI_SHARE = 0.15

# Bracket deduction model (annualized from a full-time week).
HOURS_PER_WEEK = 40
WEEKS_PER_YEAR = 52
FEDERAL_FIRST_BRACKET_LIMIT = 53359
FEDERAL_FIRST_BRACKET_RATE = 0.15
FEDERAL_SECOND_BRACKET_RATE = 0.205
PROVINCIAL_BASE_RATE = 0.0505  # Ontario
CPP_RATE = 0.0595
EI_RATE = 0.0188
EMPLOYEE_CONTRIBUTION_SHARE = 0.5

# Spreadsheet import break policy.
LONG_SHIFT_MINUTES = 10 * 60
LONG_SHIFT_BREAK_MINUTES = 60
DEFAULT_BREAK_MINUTES = 30

MAX_DESCRIPTION_LENGTH = 500
DEFAULT_REPORT_DAYS = 30

MAX_PROJECT_NAME_LENGTH = 100
MAX_CLIENT_LENGTH = 100
DEFAULT_PROJECT_COLOR = "#667eea"
