from __future__ import annotations

from enum import Enum


class ClockEventKind(str, Enum):
    """Punch kinds recorded by a worker at a kiosk or on mobile."""

    CLOCK_IN = "clock_in"
    CLOCK_OUT = "clock_out"
    BREAK_START = "break_start"
    BREAK_END = "break_end"


class ClockEventSource(str, Enum):
    KIOSK = "kiosk"
    MOBILE = "mobile"
    MANUAL = "manual"


class ShiftStatus(str, Enum):
    """Shift lifecycle status, tracked by the persistence layer."""

    DRAFT = "draft"
    ASSIGNED = "assigned"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class PunchState(str, Enum):
    NOT_STARTED = "not_started"
    CLOCKED_IN = "clocked_in"
    ON_BREAK = "on_break"
    CLOCKED_OUT = "clocked_out"


class Severity(str, Enum):
    WARNING = "warning"
    CRITICAL = "critical"


class RuleKey(str, Enum):
    """French labor-law rule keys understood by the evaluator."""

    DAILY_REST_11H = "daily_rest_11h"
    MAX_HOURS_PER_DAY_10H = "max_hours_per_day_10h"
    MAX_HOURS_PER_WEEK_48H = "max_hours_per_week_48h"


class AnomalyKind(str, Enum):
    ORPHAN_CLOCK_OUT = "orphan_clock_out"
    ORPHAN_BREAK_END = "orphan_break_end"
    DUPLICATE_CLOCK_IN = "duplicate_clock_in"
    OPEN_CLOCK_IN = "open_clock_in"
    OPEN_BREAK = "open_break"
