from __future__ import annotations

from datetime import date

from src.shift_compliance.shift_compliance.common.datetime_utils import parse_utc_instant
from src.shift_compliance.shift_compliance.core.enums import AnomalyKind, ClockEventKind
from src.shift_compliance.shift_compliance.shifts.model import Shift
from src.shift_compliance.shift_compliance.timeclock.model import ClockEvent
from src.shift_compliance.shift_compliance.timesheets.overtime.weekly_threshold import WeeklyThresholdPolicy
from src.shift_compliance.shift_compliance.timesheets.service import TimesheetService


def _ev(kind: ClockEventKind, at: str) -> ClockEvent:
    return ClockEvent(user_id="u1", location_id="l1", org_id="o1", kind=kind, occurred_at=parse_utc_instant(at))


def test_build_timesheet_combines_worked_planned_and_anomalies():
    events = [
        _ev(ClockEventKind.CLOCK_OUT, "2025-01-06T06:00:00Z"),
        _ev(ClockEventKind.CLOCK_IN, "2025-01-06T07:00:00Z"),
        _ev(ClockEventKind.CLOCK_OUT, "2025-01-06T15:00:00Z"),
    ]
    shifts = [
        Shift(
            id="s1",
            org_id="o1",
            location_id="l1",
            start_at=parse_utc_instant("2025-01-06T07:00:00Z"),
            end_at=parse_utc_instant("2025-01-06T16:00:00Z"),
            break_minutes=60,
        )
    ]

    svc = TimesheetService(policy=WeeklyThresholdPolicy(40))
    report = svc.build_timesheet(
        events,
        shifts,
        parse_utc_instant("2025-01-05T23:00:00Z"),
        parse_utc_instant("2025-01-12T23:00:00Z"),
    )

    assert report.totals.regular_minutes == 480
    assert report.totals.planned_minutes == 480
    assert report.totals.variance_minutes == 0
    assert report.totals.days_worked == 1
    assert [d.date for d in report.daily] == [date(2025, 1, 6)]
    assert [s.id for s in report.daily[0].shifts] == ["s1"]
    assert [a.kind for a in report.anomalies] == [AnomalyKind.ORPHAN_CLOCK_OUT]


def test_service_timezone_is_configurable():
    events = [
        _ev(ClockEventKind.CLOCK_IN, "2025-01-06T23:30:00Z"),
        _ev(ClockEventKind.CLOCK_OUT, "2025-01-07T01:00:00Z"),
    ]
    start = parse_utc_instant("2025-01-06T00:00:00Z")
    end = parse_utc_instant("2025-01-08T00:00:00Z")

    paris = TimesheetService().daily_hours(events, start, end)
    utc = TimesheetService(tz="UTC").daily_hours(events, start, end)

    assert paris[0].date == date(2025, 1, 7)
    assert utc[0].date == date(2025, 1, 6)


def test_daily_minutes_round_half_up_in_response():
    from src.shift_compliance.shift_compliance.timesheets.mapper import daily_hours_to_dict
    from src.shift_compliance.shift_compliance.timesheets.model import DailyHours

    assert daily_hours_to_dict(DailyHours(date=date(2025, 1, 6), total_minutes=30.5))["total_minutes"] == 31
    assert daily_hours_to_dict(DailyHours(date=date(2025, 1, 6), total_minutes=31.5))["total_minutes"] == 32
