from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import ShiftStatus


@dataclass(frozen=True)
class Shift:
    """Domain entity: a planned work interval with optional recorded actuals.

    Planned fields (start_at/end_at/break_minutes) and actual fields are kept
    apart; actuals are only filled once real clock events exist.
    """

    id: str
    org_id: str
    location_id: str
    start_at: datetime
    end_at: datetime
    break_minutes: int = 0
    status: ShiftStatus = ShiftStatus.ASSIGNED
    actual_start_at: Optional[datetime] = None
    actual_end_at: Optional[datetime] = None
    actual_break_minutes: Optional[int] = None

    @property
    def planned_minutes(self) -> float:
        return (self.end_at - self.start_at).total_seconds() / 60 - (self.break_minutes or 0)
