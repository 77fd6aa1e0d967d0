from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import minutes_between, round_minutes
from ..core.enums import AnomalyKind, ClockEventKind, PunchState
from .model import ClockEvent, PunchAnomaly, SessionSummary
from .validator import derive_punch_state

logger = logging.getLogger(__name__)


def summarize_session(events: Sequence[ClockEvent], *, now: datetime) -> SessionSummary:
    """Worked/break minutes for a day's punches (ascending order).

    An open clock-in or break is counted up to ``now``.
    """
    if not events:
        return SessionSummary(total_minutes=0, break_minutes=0, status=PunchState.NOT_STARTED)

    total = 0.0
    breaks = 0.0
    clock_in: Optional[datetime] = None
    break_start: Optional[datetime] = None

    for event in events:
        if event.kind == ClockEventKind.CLOCK_IN:
            clock_in = event.occurred_at
        elif event.kind == ClockEventKind.CLOCK_OUT:
            if clock_in:
                total += minutes_between(clock_in, event.occurred_at)
                clock_in = None
        elif event.kind == ClockEventKind.BREAK_START:
            break_start = event.occurred_at
        elif event.kind == ClockEventKind.BREAK_END:
            if break_start:
                breaks += minutes_between(break_start, event.occurred_at)
                break_start = None

    if clock_in:
        total += minutes_between(clock_in, now)
    if break_start:
        breaks += minutes_between(break_start, now)

    return SessionSummary(
        total_minutes=round_minutes(total),
        break_minutes=round_minutes(breaks),
        status=derive_punch_state(events),
        last_event=events[-1],
    )


def find_punch_anomalies(
    events: Sequence[ClockEvent],
    period_start: datetime,
    period_end: datetime,
) -> list[PunchAnomaly]:
    """List punch-log inconsistencies inside ``[period_start, period_end)``.

    The calculators tolerate these (drop or clip); this makes them visible.
    """
    anomalies: list[PunchAnomaly] = []
    clock_in: Optional[datetime] = None
    break_start: Optional[datetime] = None

    for event in events:
        at = event.occurred_at
        if at < period_start or at >= period_end:
            continue

        if event.kind == ClockEventKind.CLOCK_IN:
            if clock_in:
                anomalies.append(
                    PunchAnomaly(AnomalyKind.DUPLICATE_CLOCK_IN, clock_in, "clock_in replaced by a later clock_in")
                )
            clock_in = at
        elif event.kind == ClockEventKind.CLOCK_OUT:
            if clock_in:
                clock_in = None
            else:
                anomalies.append(PunchAnomaly(AnomalyKind.ORPHAN_CLOCK_OUT, at, "clock_out without clock_in"))
        elif event.kind == ClockEventKind.BREAK_START:
            break_start = at
        elif event.kind == ClockEventKind.BREAK_END:
            if break_start:
                break_start = None
            else:
                anomalies.append(PunchAnomaly(AnomalyKind.ORPHAN_BREAK_END, at, "break_end without break_start"))

    if clock_in:
        anomalies.append(PunchAnomaly(AnomalyKind.OPEN_CLOCK_IN, clock_in, "clock_in still open at period end"))
    if break_start:
        anomalies.append(PunchAnomaly(AnomalyKind.OPEN_BREAK, break_start, "break still open at period end"))

    if anomalies:
        logger.info("punch log has %d anomalies in period %s..%s", len(anomalies), period_start, period_end)
    return anomalies
