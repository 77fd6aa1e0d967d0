from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import Zone, resolve_zone
from ..core.constants import DEFAULT_TIMEZONE
from ..shifts.model import Shift
from ..timeclock.model import ClockEvent
from ..timeclock.session import find_punch_anomalies
from .aggregator import calculate_daily_hours
from .calculator import calculate_planned_hours, calculate_worked_hours, generate_timesheet_totals
from .model import DailyHours, TimesheetReport
from .overtime.base import OvertimePolicy
from .overtime.weekly_threshold import WeeklyThresholdPolicy

logger = logging.getLogger(__name__)


class TimesheetService:
    def __init__(self, *, policy: Optional[OvertimePolicy] = None, tz: Zone = DEFAULT_TIMEZONE):
        self._policy = policy or WeeklyThresholdPolicy()
        self._tz = resolve_zone(tz)

    def daily_hours(
        self,
        events: Sequence[ClockEvent],
        period_start: datetime,
        period_end: datetime,
        *,
        shifts: Sequence[Shift] = (),
    ) -> list[DailyHours]:
        return calculate_daily_hours(events, period_start, period_end, shifts=shifts, tz=self._tz)

    def build_timesheet(
        self,
        events: Sequence[ClockEvent],
        shifts: Sequence[Shift],
        period_start: datetime,
        period_end: datetime,
    ) -> TimesheetReport:
        worked = calculate_worked_hours(events, period_start, period_end, policy=self._policy, tz=self._tz)
        planned = calculate_planned_hours(shifts, period_start, period_end)
        totals = generate_timesheet_totals(worked, planned)

        logger.debug(
            "timesheet %s..%s regular=%d overtime=%d planned=%d",
            period_start,
            period_end,
            totals.regular_minutes,
            totals.overtime_minutes,
            totals.planned_minutes,
        )
        return TimesheetReport(
            totals=totals,
            daily=self.daily_hours(events, period_start, period_end, shifts=shifts),
            anomalies=find_punch_anomalies(events, period_start, period_end),
        )
