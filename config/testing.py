SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

TIMEZONE = "Europe/Paris"

STANDARD_WEEKLY_HOURS = 40
DOUBLE_PUNCH_THRESHOLD_SECONDS = 10
