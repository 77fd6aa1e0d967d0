"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the calculations live in the services.
"""

from src.shift_compliance.shift_compliance.common.datetime_utils import parse_utc_instant
from src.shift_compliance.shift_compliance.compliance.model import ComplianceRule
from src.shift_compliance.shift_compliance.container import build_container
from src.shift_compliance.shift_compliance.core.enums import ClockEventKind
from src.shift_compliance.shift_compliance.main import load_settings
from src.shift_compliance.shift_compliance.timeclock.model import ClockEvent


def _punch(kind: ClockEventKind, at: str) -> ClockEvent:
    return ClockEvent(user_id="u1", location_id="loc1", org_id="org1", kind=kind, occurred_at=parse_utc_instant(at))


def main():
    container = build_container(settings=load_settings())

    events = [
        _punch(ClockEventKind.CLOCK_IN, "2025-03-10T06:00:00Z"),
        _punch(ClockEventKind.CLOCK_OUT, "2025-03-10T19:00:00Z"),
    ]
    start = parse_utc_instant("2025-03-09T23:00:00Z")
    end = parse_utc_instant("2025-03-16T23:00:00Z")

    report = container.timesheet_service.build_timesheet(events, [], start, end)
    print(report.totals)

    rules = [ComplianceRule(id="r1", rule_key="max_hours_per_day_10h", threshold_value={"hours": 10})]
    for v in container.compliance_service.run_checks(
        user_id="u1", events=events, shifts=[], rules=rules, period_start=start, period_end=end
    ):
        print(v.violation_date, v.severity.value, v.details)


if __name__ == "__main__":
    main()
