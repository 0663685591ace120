DEBUG = False
TESTING = True

DEDUCTION_MODE = "flat"

REPORT_DAYS = 30

LOG_LEVEL = "WARNING"
LOG_JSON = False
