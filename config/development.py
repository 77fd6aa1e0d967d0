import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Civil calendar used for day/week bucketing
TIMEZONE = os.getenv("TIMEZONE", "Europe/Paris")

STANDARD_WEEKLY_HOURS = float(os.getenv("STANDARD_WEEKLY_HOURS", "40"))
DOUBLE_PUNCH_THRESHOLD_SECONDS = int(os.getenv("DOUBLE_PUNCH_THRESHOLD_SECONDS", "10"))
