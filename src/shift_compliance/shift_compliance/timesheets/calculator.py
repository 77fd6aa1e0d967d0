from __future__ import annotations

from datetime import date, datetime
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import Zone, local_date, minutes_between, resolve_zone, round_minutes
from ..core.constants import DEFAULT_TIMEZONE
from ..core.enums import ClockEventKind, ShiftStatus
from ..shifts.model import Shift
from ..timeclock.model import ClockEvent
from .model import PlannedHours, TimesheetTotals, WorkedHours
from .overtime.base import OvertimePolicy
from .overtime.weekly_threshold import WeeklyThresholdPolicy


def calculate_worked_hours(
    events: Sequence[ClockEvent],
    period_start: datetime,
    period_end: datetime,
    *,
    policy: Optional[OvertimePolicy] = None,
    tz: Zone = DEFAULT_TIMEZONE,
) -> WorkedHours:
    """Worked, break and overtime minutes from ascending clock events.

    Unlike the daily aggregator, an unclosed clock_in or break_start is
    clipped to ``period_end`` so partial time is still credited.
    """
    policy = policy or WeeklyThresholdPolicy()
    zone = resolve_zone(tz)

    gross = 0.0
    breaks = 0.0
    days: set[date] = set()
    clock_in: Optional[datetime] = None
    break_start: Optional[datetime] = None

    for event in events:
        at = event.occurred_at
        if at < period_start or at >= period_end:
            continue

        if event.kind == ClockEventKind.CLOCK_IN:
            clock_in = at
            days.add(local_date(at, zone))
        elif event.kind == ClockEventKind.CLOCK_OUT:
            if clock_in:
                gross += minutes_between(clock_in, at)
                clock_in = None
        elif event.kind == ClockEventKind.BREAK_START:
            break_start = at
        elif event.kind == ClockEventKind.BREAK_END:
            if break_start:
                breaks += minutes_between(break_start, at)
                break_start = None

    if clock_in:
        gross += minutes_between(clock_in, period_end)
    if break_start:
        breaks += minutes_between(break_start, period_end)

    split = policy.compute_overtime(gross - breaks, period_end - period_start)
    return WorkedHours(
        regular_minutes=round_minutes(split.regular_minutes),
        overtime_minutes=round_minutes(split.overtime_minutes),
        break_minutes=round_minutes(breaks),
        gross_minutes=round_minutes(gross),
        days_worked=len(days),
    )


def calculate_planned_hours(shifts: Iterable[Shift], period_start: datetime, period_end: datetime) -> PlannedHours:
    """Scheduled minutes (duration minus planned break) of shifts overlapping the period."""
    planned = 0.0
    for shift in shifts:
        if shift.status == ShiftStatus.CANCELLED:
            continue
        if shift.end_at <= period_start or shift.start_at >= period_end:
            continue
        planned += shift.planned_minutes
    return PlannedHours(planned_minutes=round_minutes(planned))


def generate_timesheet_totals(worked: WorkedHours, planned: PlannedHours) -> TimesheetTotals:
    total_worked = worked.regular_minutes + worked.overtime_minutes
    return TimesheetTotals(
        regular_minutes=worked.regular_minutes,
        overtime_minutes=worked.overtime_minutes,
        break_minutes=worked.break_minutes,
        planned_minutes=planned.planned_minutes,
        variance_minutes=total_worked - planned.planned_minutes,
        days_worked=worked.days_worked,
    )
