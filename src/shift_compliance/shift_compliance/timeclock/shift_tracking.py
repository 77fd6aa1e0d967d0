from __future__ import annotations

from dataclasses import replace

from ..core.enums import ClockEventKind, ShiftStatus
from ..shifts.model import Shift
from .model import ClockEvent


def apply_punch_to_shift(shift: Shift, event: ClockEvent, *, break_minutes: int = 0) -> Shift:
    """Return ``shift`` updated with the actuals implied by an accepted punch.

    clock_in starts the shift, clock_out completes it, break_end adds the
    finished break (``break_minutes``) to the actual break total.
    """
    if event.kind == ClockEventKind.CLOCK_IN:
        return replace(shift, status=ShiftStatus.IN_PROGRESS, actual_start_at=event.occurred_at)

    if event.kind == ClockEventKind.CLOCK_OUT:
        return replace(shift, status=ShiftStatus.COMPLETED, actual_end_at=event.occurred_at)

    if event.kind == ClockEventKind.BREAK_END:
        total = (shift.actual_break_minutes or 0) + max(int(break_minutes), 0)
        return replace(shift, actual_break_minutes=total)

    return shift
