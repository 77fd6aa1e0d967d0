from __future__ import annotations

from datetime import date

from ...common.week_utils import iso_week_key, week_start
from ...core.constants import DEFAULT_MAX_HOURS_PER_WEEK, WEEKLY_CAP_CRITICAL_MARGIN_HOURS
from ...core.enums import Severity
from ...timesheets.model import DailyHours
from ..model import ComplianceRule, ComplianceViolation, EvaluationContext
from .base import ComplianceCheck, round_hours


class MaxHoursPerWeekCheck(ComplianceCheck):
    """Weekly cap over ISO weeks (48h by default); more than 8h over is critical.

    One violation per offending week, dated on the Monday of that week.
    """

    default_threshold_hours = DEFAULT_MAX_HOURS_PER_WEEK

    def evaluate(self, context: EvaluationContext, rule: ComplianceRule) -> list[ComplianceViolation]:
        if not rule.is_active:
            return []

        threshold = rule.threshold_hours(self.default_threshold_hours)

        weeks: dict[str, list[DailyHours]] = {}
        mondays: dict[str, date] = {}
        for day in sorted(context.daily_hours, key=lambda d: d.date):
            key = iso_week_key(day.date)
            weeks.setdefault(key, []).append(day)
            mondays[key] = week_start(day.date)

        violations: list[ComplianceViolation] = []
        for key in sorted(weeks, key=lambda k: mondays[k]):
            days = weeks[key]
            hours = sum(d.total_minutes for d in days) / 60
            if hours <= threshold:
                continue
            critical = hours - threshold > WEEKLY_CAP_CRITICAL_MARGIN_HOURS
            violations.append(
                ComplianceViolation(
                    org_id=context.org_id,
                    location_id=context.location_id,
                    user_id=None,
                    rule_id=rule.id,
                    violation_date=mondays[key],
                    severity=Severity.CRITICAL if critical else Severity.WARNING,
                    details={
                        "hours_worked": round_hours(hours),
                        "threshold": threshold,
                        "week": key,
                        "shift_ids": [s.id for d in days for s in d.shifts],
                    },
                )
            )

        return violations
