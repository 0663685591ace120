import os

DEBUG = False

DEDUCTION_MODE = os.getenv("DEDUCTION_MODE", "flat")

REPORT_DAYS = int(os.getenv("REPORT_DAYS", "30"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_JSON = bool(int(os.getenv("LOG_JSON", "1")))
