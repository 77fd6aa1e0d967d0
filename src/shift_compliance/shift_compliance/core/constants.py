"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TIMEZONE = "Europe/Paris"

DEFAULT_DOUBLE_PUNCH_SECONDS = 10
DEFAULT_STANDARD_WEEKLY_HOURS = 40

DEFAULT_DAILY_REST_HOURS = 11
DEFAULT_MAX_HOURS_PER_DAY = 10
DEFAULT_MAX_HOURS_PER_WEEK = 48

# Hours over the threshold after which a cap violation becomes critical
DAILY_CAP_CRITICAL_MARGIN_HOURS = 2
WEEKLY_CAP_CRITICAL_MARGIN_HOURS = 8
