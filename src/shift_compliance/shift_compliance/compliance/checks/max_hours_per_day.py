from __future__ import annotations

from ...core.constants import DAILY_CAP_CRITICAL_MARGIN_HOURS, DEFAULT_MAX_HOURS_PER_DAY
from ...core.enums import Severity
from ..model import ComplianceRule, ComplianceViolation, EvaluationContext
from .base import ComplianceCheck, round_hours


class MaxHoursPerDayCheck(ComplianceCheck):
    """Daily cap (10h by default); more than 2h over is critical."""

    default_threshold_hours = DEFAULT_MAX_HOURS_PER_DAY

    def evaluate(self, context: EvaluationContext, rule: ComplianceRule) -> list[ComplianceViolation]:
        if not rule.is_active:
            return []

        threshold = rule.threshold_hours(self.default_threshold_hours)
        violations: list[ComplianceViolation] = []

        for day in sorted(context.daily_hours, key=lambda d: d.date):
            hours = day.hours
            if hours <= threshold:
                continue
            critical = hours - threshold > DAILY_CAP_CRITICAL_MARGIN_HOURS
            violations.append(
                ComplianceViolation(
                    org_id=context.org_id,
                    location_id=context.location_id,
                    user_id=None,
                    rule_id=rule.id,
                    violation_date=day.date,
                    severity=Severity.CRITICAL if critical else Severity.WARNING,
                    details={
                        "hours_worked": round_hours(hours),
                        "threshold": threshold,
                        "shift_ids": [s.id for s in day.shifts],
                    },
                )
            )

        return violations
