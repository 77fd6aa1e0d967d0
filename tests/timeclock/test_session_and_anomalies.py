from __future__ import annotations

from src.shift_compliance.shift_compliance.common.datetime_utils import parse_utc_instant
from src.shift_compliance.shift_compliance.core.enums import AnomalyKind, ClockEventKind, PunchState
from src.shift_compliance.shift_compliance.timeclock.model import ClockEvent
from src.shift_compliance.shift_compliance.timeclock.session import find_punch_anomalies, summarize_session

PERIOD_START = parse_utc_instant("2025-01-06T00:00:00Z")
PERIOD_END = parse_utc_instant("2025-01-07T00:00:00Z")


def _ev(kind: ClockEventKind, at: str) -> ClockEvent:
    return ClockEvent(user_id="u1", location_id="l1", org_id="o1", kind=kind, occurred_at=parse_utc_instant(at))


def test_session_summary_counts_open_clock_in_until_now():
    events = [
        _ev(ClockEventKind.CLOCK_IN, "2025-01-06T08:00:00Z"),
        _ev(ClockEventKind.BREAK_START, "2025-01-06T12:00:00Z"),
        _ev(ClockEventKind.BREAK_END, "2025-01-06T12:30:00Z"),
    ]

    summary = summarize_session(events, now=parse_utc_instant("2025-01-06T14:00:00Z"))

    assert summary.total_minutes == 360
    assert summary.break_minutes == 30
    assert summary.status == PunchState.CLOCKED_IN
    assert summary.last_event == events[-1]


def test_session_summary_open_break_and_empty_day():
    events = [
        _ev(ClockEventKind.CLOCK_IN, "2025-01-06T08:00:00Z"),
        _ev(ClockEventKind.BREAK_START, "2025-01-06T12:00:00Z"),
    ]
    now = parse_utc_instant("2025-01-06T12:20:00Z")

    summary = summarize_session(events, now=now)
    assert summary.break_minutes == 20
    assert summary.status == PunchState.ON_BREAK

    empty = summarize_session([], now=now)
    assert (empty.total_minutes, empty.status, empty.last_event) == (0, PunchState.NOT_STARTED, None)


def test_anomalies_report_what_calculators_absorb():
    events = [
        _ev(ClockEventKind.CLOCK_OUT, "2025-01-06T06:00:00Z"),
        _ev(ClockEventKind.CLOCK_IN, "2025-01-06T07:00:00Z"),
        _ev(ClockEventKind.CLOCK_IN, "2025-01-06T07:05:00Z"),
        _ev(ClockEventKind.BREAK_END, "2025-01-06T10:00:00Z"),
        _ev(ClockEventKind.CLOCK_OUT, "2025-01-06T15:00:00Z"),
        _ev(ClockEventKind.CLOCK_IN, "2025-01-06T20:00:00Z"),
        _ev(ClockEventKind.BREAK_START, "2025-01-06T22:00:00Z"),
    ]

    anomalies = find_punch_anomalies(events, PERIOD_START, PERIOD_END)

    assert [a.kind for a in anomalies] == [
        AnomalyKind.ORPHAN_CLOCK_OUT,
        AnomalyKind.DUPLICATE_CLOCK_IN,
        AnomalyKind.ORPHAN_BREAK_END,
        AnomalyKind.OPEN_CLOCK_IN,
        AnomalyKind.OPEN_BREAK,
    ]
    assert anomalies[1].occurred_at == parse_utc_instant("2025-01-06T07:00:00Z")


def test_clean_log_has_no_anomalies():
    events = [
        _ev(ClockEventKind.CLOCK_IN, "2025-01-06T07:00:00Z"),
        _ev(ClockEventKind.BREAK_START, "2025-01-06T11:00:00Z"),
        _ev(ClockEventKind.BREAK_END, "2025-01-06T11:30:00Z"),
        _ev(ClockEventKind.CLOCK_OUT, "2025-01-06T15:00:00Z"),
    ]

    assert find_punch_anomalies(events, PERIOD_START, PERIOD_END) == []
