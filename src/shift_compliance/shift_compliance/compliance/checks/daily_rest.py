from __future__ import annotations

from datetime import datetime

from ...common.datetime_utils import local_date
from ...core.constants import DEFAULT_DAILY_REST_HOURS
from ...core.enums import Severity
from ..model import ComplianceRule, ComplianceViolation, EvaluationContext
from .base import ComplianceCheck, round_hours


def calculate_rest_hours(previous_end: datetime, next_start: datetime) -> float:
    return (next_start - previous_end).total_seconds() / 3600


class DailyRestCheck(ComplianceCheck):
    """Minimum rest between two consecutive shifts (11h by default)."""

    default_threshold_hours = DEFAULT_DAILY_REST_HOURS

    def evaluate(self, context: EvaluationContext, rule: ComplianceRule) -> list[ComplianceViolation]:
        if not rule.is_active:
            return []

        threshold = rule.threshold_hours(self.default_threshold_hours)
        ordered = sorted(context.shifts, key=lambda s: s.start_at)
        violations: list[ComplianceViolation] = []

        for current, following in zip(ordered, ordered[1:]):
            rest = calculate_rest_hours(current.end_at, following.start_at)
            if rest >= threshold:
                continue
            violations.append(
                ComplianceViolation(
                    org_id=current.org_id,
                    location_id=current.location_id,
                    user_id=None,
                    rule_id=rule.id,
                    violation_date=local_date(following.start_at, context.tz),
                    severity=Severity.WARNING,
                    details={
                        "rest_hours": round_hours(rest),
                        "threshold": threshold,
                        "shift_ids": [current.id, following.id],
                    },
                )
            )

        return violations
