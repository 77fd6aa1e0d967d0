import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

TIMEZONE = os.getenv("TIMEZONE", "Europe/Paris")

STANDARD_WEEKLY_HOURS = float(os.getenv("STANDARD_WEEKLY_HOURS", "40"))
DOUBLE_PUNCH_THRESHOLD_SECONDS = int(os.getenv("DOUBLE_PUNCH_THRESHOLD_SECONDS", "10"))
