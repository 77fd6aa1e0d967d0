from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional

from ..core.enums import ShiftStatus
from .model import Shift


def overlaps(a_start: datetime, a_end: datetime, b_start: datetime, b_end: datetime) -> bool:
    """Strict overlap: touching intervals (a_end == b_start) do not collide."""
    return a_start < b_end and a_end > b_start


def has_shift_collision(
    shifts: Iterable[Shift],
    start_at: datetime,
    end_at: datetime,
    *,
    exclude_shift_id: Optional[str] = None,
) -> bool:
    for shift in shifts:
        if exclude_shift_id and shift.id == exclude_shift_id:
            continue
        if shift.status == ShiftStatus.CANCELLED:
            continue
        if overlaps(start_at, end_at, shift.start_at, shift.end_at):
            return True
    return False
