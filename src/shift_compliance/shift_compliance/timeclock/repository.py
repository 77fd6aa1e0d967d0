from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from .model import ClockEvent


class ClockEventRepository(Protocol):
    def list_between(self, *, user_id: str, location_id: str, start: datetime, end: datetime) -> Sequence[ClockEvent]:
        """Events for a user/location in ``[start, end)``, ascending by occurred_at."""

        raise NotImplementedError

    def append(self, event: ClockEvent) -> None:
        raise NotImplementedError
