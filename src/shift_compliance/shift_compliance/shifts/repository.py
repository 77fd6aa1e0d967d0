from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol

from .model import Shift


class ShiftRepository(Protocol):
    def get_active_for(self, *, user_id: str, location_id: str) -> Optional[Shift]:
        """Shift currently ``in_progress`` for the user at the location, if any."""

        raise NotImplementedError

    def save(self, shift: Shift, *, user_id: str) -> None:
        """Insert or update ``shift`` and its assignment to ``user_id``."""

        raise NotImplementedError

    def get_planned_for(self, *, user_id: str, location_id: str, start: datetime, end: datetime) -> Optional[Shift]:
        """First draft/assigned shift starting in ``[start, end)``."""

        raise NotImplementedError
