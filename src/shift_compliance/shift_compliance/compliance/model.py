from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Optional, Sequence
from zoneinfo import ZoneInfo

from ..core.enums import Severity
from ..shifts.model import Shift
from ..timesheets.model import DailyHours


@dataclass(frozen=True)
class ComplianceRule:
    """Configurable labor-law threshold, owned by the organization settings."""

    id: str
    rule_key: str
    is_active: bool = True
    threshold_value: dict[str, Any] = field(default_factory=dict)

    def threshold_hours(self, default: float) -> float:
        hours = self.threshold_value.get("hours")
        return float(hours) if hours is not None else float(default)


@dataclass(frozen=True)
class ComplianceViolation:
    """Derived record; identity/created_at are assigned by the persistence layer."""

    org_id: Optional[str]
    location_id: Optional[str]
    user_id: Optional[str]
    rule_id: str
    violation_date: date
    severity: Severity
    details: dict[str, Any]
    is_silenced: bool = False


@dataclass(frozen=True)
class EvaluationContext:
    shifts: Sequence[Shift]
    daily_hours: Sequence[DailyHours]
    org_id: Optional[str]
    location_id: Optional[str]
    tz: ZoneInfo
