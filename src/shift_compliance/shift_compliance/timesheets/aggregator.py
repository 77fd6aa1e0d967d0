from __future__ import annotations

from datetime import date, datetime
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import Zone, local_date, minutes_between, resolve_zone
from ..core.constants import DEFAULT_TIMEZONE
from ..core.enums import ClockEventKind
from ..shifts.model import Shift
from ..timeclock.model import ClockEvent
from .model import DailyHours


def calculate_daily_hours(
    events: Sequence[ClockEvent],
    period_start: datetime,
    period_end: datetime,
    *,
    shifts: Iterable[Shift] = (),
    tz: Zone = DEFAULT_TIMEZONE,
    clip_open_at_end: bool = False,
) -> list[DailyHours]:
    """Clocked minutes per local calendar day.

    Assumes ``events`` are ordered by occurred_at ascending. Events outside
    ``[period_start, period_end)`` are skipped, not clipped. Minutes of a
    clock_in/clock_out pair go to the clock_in's local date. Breaks are not
    subtracted. A clock_in still open at the end is dropped unless
    ``clip_open_at_end`` is set.
    """
    zone = resolve_zone(tz)
    buckets: dict[date, DailyHours] = {}

    def bucket(day: date) -> DailyHours:
        if day not in buckets:
            buckets[day] = DailyHours(date=day)
        return buckets[day]

    clock_in: Optional[datetime] = None
    for event in events:
        at = event.occurred_at
        if at < period_start or at >= period_end:
            continue

        if event.kind == ClockEventKind.CLOCK_IN:
            clock_in = at
        elif event.kind == ClockEventKind.CLOCK_OUT and clock_in:
            bucket(local_date(clock_in, zone)).total_minutes += minutes_between(clock_in, at)
            clock_in = None

    if clip_open_at_end and clock_in:
        bucket(local_date(clock_in, zone)).total_minutes += minutes_between(clock_in, period_end)

    for shift in sorted(shifts, key=lambda s: s.start_at):
        day = local_date(shift.start_at, zone)
        if day in buckets:
            buckets[day].shifts.append(shift)

    return [buckets[d] for d in sorted(buckets)]
