from __future__ import annotations

import math
from datetime import timedelta

from ...core.constants import DEFAULT_STANDARD_WEEKLY_HOURS
from .base import OvertimePolicy, OvertimeSplit


class WeeklyThresholdPolicy(OvertimePolicy):
    """Linear rule: allowance = weekly_hours x ceil(period_days / 7); the rest is overtime."""

    def __init__(self, weekly_hours: float = DEFAULT_STANDARD_WEEKLY_HOURS):
        self.weekly_hours = weekly_hours

    def compute_overtime(self, worked_minutes: float, period_length: timedelta) -> OvertimeSplit:
        weeks = math.ceil(period_length / timedelta(weeks=1))
        allowance = weeks * self.weekly_hours * 60
        overtime = max(0.0, worked_minutes - allowance)
        return OvertimeSplit(regular_minutes=worked_minutes - overtime, overtime_minutes=overtime)
