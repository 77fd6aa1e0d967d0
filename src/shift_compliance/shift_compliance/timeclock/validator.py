from __future__ import annotations

from datetime import datetime, timedelta
from typing import Iterable, Optional

from ..core.constants import DEFAULT_DOUBLE_PUNCH_SECONDS
from ..core.enums import ClockEventKind, PunchState, ShiftStatus
from .model import ClockEvent, PunchValidation

ALREADY_CLOCKED_IN = "already clocked in"
NO_ACTIVE_SHIFT = "no active shift"
MUST_END_BREAK_FIRST = "must end break first"
NOT_CLOCKED_IN = "not clocked in"
ALREADY_ON_BREAK = "already on break"
NOT_ON_BREAK = "not on break"


def validate_punch_sequence(
    kind: ClockEventKind,
    *,
    active_shift_status: Optional[ShiftStatus],
    last_event_kind: Optional[ClockEventKind],
) -> PunchValidation:
    """Check that ``kind`` is a legal next punch.

    ``active_shift_status`` is the status of the user's current shift at the
    location (None when there is none); ``last_event_kind`` is the most recent
    punch of the day. Failures are returned, never raised.
    """
    in_progress = active_shift_status == ShiftStatus.IN_PROGRESS
    on_break = last_event_kind == ClockEventKind.BREAK_START

    if kind == ClockEventKind.CLOCK_IN:
        if in_progress:
            return PunchValidation.reject(ALREADY_CLOCKED_IN)
    elif kind == ClockEventKind.CLOCK_OUT:
        if not in_progress:
            return PunchValidation.reject(NO_ACTIVE_SHIFT)
        if on_break:
            return PunchValidation.reject(MUST_END_BREAK_FIRST)
    elif kind == ClockEventKind.BREAK_START:
        if not in_progress:
            return PunchValidation.reject(NOT_CLOCKED_IN)
        if on_break:
            return PunchValidation.reject(ALREADY_ON_BREAK)
    elif kind == ClockEventKind.BREAK_END:
        if not on_break:
            return PunchValidation.reject(NOT_ON_BREAK)

    return PunchValidation.ok()


def is_double_punch(
    recent_events: Iterable[ClockEvent],
    *,
    user_id: str,
    location_id: str,
    kind: ClockEventKind,
    now: datetime,
    threshold_seconds: int = DEFAULT_DOUBLE_PUNCH_SECONDS,
) -> bool:
    """True when the same punch was already recorded within the threshold window."""
    window_start = now - timedelta(seconds=threshold_seconds)
    for event in recent_events:
        if event.user_id != user_id or event.location_id != location_id:
            continue
        if event.kind != kind:
            continue
        if window_start <= event.occurred_at <= now:
            return True
    return False


def derive_punch_state(events: Iterable[ClockEvent]) -> PunchState:
    """Replay the day's punches: not_started -> clocked_in <-> on_break -> clocked_out."""
    state = PunchState.NOT_STARTED
    for event in events:
        if event.kind == ClockEventKind.CLOCK_IN:
            state = PunchState.CLOCKED_IN
        elif event.kind == ClockEventKind.CLOCK_OUT:
            state = PunchState.CLOCKED_OUT
        elif event.kind == ClockEventKind.BREAK_START:
            state = PunchState.ON_BREAK
        elif event.kind == ClockEventKind.BREAK_END:
            state = PunchState.CLOCKED_IN
    return state
