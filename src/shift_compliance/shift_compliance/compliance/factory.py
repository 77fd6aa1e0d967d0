from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..core.enums import RuleKey
from .checks.base import ComplianceCheck
from .checks.daily_rest import DailyRestCheck
from .checks.max_hours_per_day import MaxHoursPerDayCheck
from .checks.max_hours_per_week import MaxHoursPerWeekCheck


def _default_checks() -> dict[str, ComplianceCheck]:
    return {
        RuleKey.DAILY_REST_11H.value: DailyRestCheck(),
        RuleKey.MAX_HOURS_PER_DAY_10H.value: MaxHoursPerDayCheck(),
        RuleKey.MAX_HOURS_PER_WEEK_48H.value: MaxHoursPerWeekCheck(),
    }


@dataclass
class ComplianceCheckFactory:
    """Factory Pattern: choose the check implementing a rule_key."""

    checks: dict[str, ComplianceCheck] = field(default_factory=_default_checks)

    def for_rule_key(self, rule_key: str) -> Optional[ComplianceCheck]:
        return self.checks.get(rule_key)

    def register(self, rule_key: str, check: ComplianceCheck) -> None:
        self.checks[rule_key] = check
