from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import Zone, resolve_zone
from ..core.constants import DEFAULT_TIMEZONE
from ..shifts.model import Shift
from ..timeclock.model import ClockEvent
from ..timesheets.aggregator import calculate_daily_hours
from .factory import ComplianceCheckFactory
from .model import ComplianceRule, ComplianceViolation, EvaluationContext

logger = logging.getLogger(__name__)


class ComplianceService:
    """Stateless evaluator: one call per (user, period) over caller-supplied rules."""

    def __init__(self, *, factory: Optional[ComplianceCheckFactory] = None, tz: Zone = DEFAULT_TIMEZONE):
        self._factory = factory or ComplianceCheckFactory()
        self._tz = resolve_zone(tz)

    def run_checks(
        self,
        *,
        user_id: str,
        events: Sequence[ClockEvent],
        shifts: Sequence[Shift],
        rules: Sequence[ComplianceRule],
        period_start: datetime,
        period_end: datetime,
    ) -> list[ComplianceViolation]:
        """Evaluate active rules in the given order.

        Violations come out grouped by rule, ascending by date inside each
        rule. Nothing is deduplicated across rules.
        """
        org_id, location_id = self._scope(shifts, events)
        context = EvaluationContext(
            shifts=shifts,
            daily_hours=calculate_daily_hours(events, period_start, period_end, shifts=shifts, tz=self._tz),
            org_id=org_id,
            location_id=location_id,
            tz=self._tz,
        )

        violations: list[ComplianceViolation] = []
        for rule in rules:
            if not rule.is_active:
                continue
            check = self._factory.for_rule_key(rule.rule_key)
            if not check:
                logger.warning("unknown compliance rule_key=%s (rule_id=%s), skipped", rule.rule_key, rule.id)
                continue
            violations.extend(check.evaluate(context, rule))

        if violations:
            logger.info("user=%s has %d compliance violations", user_id, len(violations))
        return [replace(v, user_id=user_id) for v in violations]

    @staticmethod
    def _scope(shifts: Sequence[Shift], events: Sequence[ClockEvent]) -> tuple[Optional[str], Optional[str]]:
        if shifts:
            return shifts[0].org_id, shifts[0].location_id
        if events:
            return events[0].org_id, events[0].location_id
        return None, None
