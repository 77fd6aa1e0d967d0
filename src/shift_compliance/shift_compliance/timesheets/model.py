from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from ..shifts.model import Shift
from ..timeclock.model import PunchAnomaly


@dataclass
class DailyHours:
    """Read-model: clocked minutes for one local calendar day (never persisted)."""

    date: date
    total_minutes: float = 0.0
    shifts: list[Shift] = field(default_factory=list)

    @property
    def hours(self) -> float:
        return self.total_minutes / 60


@dataclass(frozen=True)
class WorkedHours:
    regular_minutes: int
    overtime_minutes: int
    break_minutes: int
    gross_minutes: int
    days_worked: int


@dataclass(frozen=True)
class PlannedHours:
    planned_minutes: int


@dataclass(frozen=True)
class TimesheetTotals:
    regular_minutes: int
    overtime_minutes: int
    break_minutes: int
    planned_minutes: int
    variance_minutes: int
    days_worked: int


@dataclass(frozen=True)
class TimesheetReport:
    totals: TimesheetTotals
    daily: list[DailyHours]
    anomalies: list[PunchAnomaly]
