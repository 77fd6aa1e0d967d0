from __future__ import annotations

import logging
from datetime import date

from src.shift_compliance.shift_compliance.common.datetime_utils import parse_utc_instant
from src.shift_compliance.shift_compliance.compliance.checks.base import ComplianceCheck
from src.shift_compliance.shift_compliance.compliance.factory import ComplianceCheckFactory
from src.shift_compliance.shift_compliance.compliance.model import ComplianceRule, ComplianceViolation
from src.shift_compliance.shift_compliance.compliance.service import ComplianceService
from src.shift_compliance.shift_compliance.core.enums import ClockEventKind, Severity
from src.shift_compliance.shift_compliance.shifts.model import Shift
from src.shift_compliance.shift_compliance.timeclock.model import ClockEvent

PERIOD_START = parse_utc_instant("2025-01-05T23:00:00Z")
PERIOD_END = parse_utc_instant("2025-01-12T23:00:00Z")


def _ev(kind: ClockEventKind, at: str, org_id: str = "o1") -> ClockEvent:
    return ClockEvent(user_id="u1", location_id="l1", org_id=org_id, kind=kind, occurred_at=parse_utc_instant(at))


def _workday(day: int, start_hour: int, end_hour: int) -> list[ClockEvent]:
    return [
        _ev(ClockEventKind.CLOCK_IN, f"2025-01-{day:02d}T{start_hour:02d}:00:00Z"),
        _ev(ClockEventKind.CLOCK_OUT, f"2025-01-{day:02d}T{end_hour:02d}:00:00Z"),
    ]


RULES = [
    ComplianceRule(id="r-week", rule_key="max_hours_per_week_48h", threshold_value={"hours": 48}),
    ComplianceRule(id="r-day", rule_key="max_hours_per_day_10h", threshold_value={"hours": 10}),
    ComplianceRule(id="r-rest", rule_key="daily_rest_11h", threshold_value={"hours": 11}),
]


def test_violations_follow_rule_order_then_date():
    # Mon..Fri 06:00-17:00 UTC = 11h/day = 55h/week
    events = [e for d in range(6, 11) for e in _workday(d, 6, 17)]

    violations = ComplianceService().run_checks(
        user_id="u1", events=events, shifts=[], rules=RULES, period_start=PERIOD_START, period_end=PERIOD_END
    )

    assert [v.rule_id for v in violations] == ["r-week"] + ["r-day"] * 5
    assert violations[0].severity == Severity.WARNING  # 55 - 48 = 7
    day_dates = [v.violation_date for v in violations[1:]]
    assert day_dates == sorted(day_dates)
    assert all(v.user_id == "u1" for v in violations)


def test_scope_falls_back_to_events_when_no_shifts():
    events = _workday(6, 6, 19)

    violations = ComplianceService().run_checks(
        user_id="u1", events=events, shifts=[], rules=RULES[1:2], period_start=PERIOD_START, period_end=PERIOD_END
    )

    assert len(violations) == 1
    assert violations[0].severity == Severity.CRITICAL
    assert (violations[0].org_id, violations[0].location_id) == ("o1", "l1")


def test_same_shift_can_trigger_several_rules():
    shifts = [
        Shift(
            id="s1",
            org_id="o2",
            location_id="l2",
            start_at=parse_utc_instant("2025-01-06T06:00:00Z"),
            end_at=parse_utc_instant("2025-01-06T19:00:00Z"),
        ),
        Shift(
            id="s2",
            org_id="o2",
            location_id="l2",
            start_at=parse_utc_instant("2025-01-07T03:00:00Z"),
            end_at=parse_utc_instant("2025-01-07T08:00:00Z"),
        ),
    ]
    events = _workday(6, 6, 19)

    violations = ComplianceService().run_checks(
        user_id="u9", events=events, shifts=shifts, rules=RULES, period_start=PERIOD_START, period_end=PERIOD_END
    )

    by_rule = {v.rule_id: v for v in violations}
    assert set(by_rule) == {"r-day", "r-rest"}
    assert by_rule["r-day"].details["shift_ids"] == ["s1"]
    assert by_rule["r-rest"].details["shift_ids"] == ["s1", "s2"]
    assert by_rule["r-rest"].violation_date == date(2025, 1, 7)
    assert by_rule["r-day"].org_id == "o2"


def test_inactive_and_unknown_rules_are_skipped(caplog):
    rules = [
        ComplianceRule(id="r-off", rule_key="max_hours_per_day_10h", is_active=False, threshold_value={"hours": 1}),
        ComplianceRule(id="r-x", rule_key="sunday_work", threshold_value={"hours": 0}),
    ]

    with caplog.at_level(logging.WARNING):
        violations = ComplianceService().run_checks(
            user_id="u1",
            events=_workday(6, 6, 19),
            shifts=[],
            rules=rules,
            period_start=PERIOD_START,
            period_end=PERIOD_END,
        )

    assert violations == []
    assert "sunday_work" in caplog.text


def test_factory_accepts_custom_checks():
    class AlwaysFlag(ComplianceCheck):
        default_threshold_hours = 0

        def evaluate(self, context, rule):
            return [
                ComplianceViolation(
                    org_id=context.org_id,
                    location_id=context.location_id,
                    user_id=None,
                    rule_id=rule.id,
                    violation_date=date(2025, 1, 6),
                    severity=Severity.WARNING,
                    details={},
                )
            ]

    factory = ComplianceCheckFactory()
    factory.register("always", AlwaysFlag())

    violations = ComplianceService(factory=factory).run_checks(
        user_id="u1",
        events=[],
        shifts=[],
        rules=[ComplianceRule(id="r-a", rule_key="always")],
        period_start=PERIOD_START,
        period_end=PERIOD_END,
    )

    assert [(v.rule_id, v.user_id, v.org_id) for v in violations] == [("r-a", "u1", None)]
