from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import timedelta


@dataclass(frozen=True)
class OvertimeSplit:
    regular_minutes: float
    overtime_minutes: float


class OvertimePolicy(ABC):
    """Overtime interface (Strategy Pattern), one implementation per labor regime."""

    @abstractmethod
    def compute_overtime(self, worked_minutes: float, period_length: timedelta) -> OvertimeSplit:
        raise NotImplementedError
