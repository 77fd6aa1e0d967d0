from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import AnomalyKind, ClockEventKind, ClockEventSource, PunchState


@dataclass(frozen=True)
class ClockEvent:
    """Domain entity: one punch in the append-only time-clock log."""

    user_id: str
    location_id: str
    org_id: str
    kind: ClockEventKind
    occurred_at: datetime
    source: ClockEventSource = ClockEventSource.KIOSK
    id: Optional[str] = None


@dataclass(frozen=True)
class PunchValidation:
    valid: bool
    error: Optional[str] = None

    @classmethod
    def ok(cls) -> "PunchValidation":
        return cls(valid=True)

    @classmethod
    def reject(cls, error: str) -> "PunchValidation":
        return cls(valid=False, error=error)


@dataclass(frozen=True)
class PunchAnomaly:
    """Inconsistency in a punch log that the calculators absorb silently."""

    kind: AnomalyKind
    occurred_at: datetime
    reason: str


@dataclass(frozen=True)
class SessionSummary:
    total_minutes: int
    break_minutes: int
    status: PunchState
    last_event: Optional[ClockEvent] = None
