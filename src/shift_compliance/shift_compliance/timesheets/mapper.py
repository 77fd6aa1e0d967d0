from __future__ import annotations

from dataclasses import asdict

from ..common.datetime_utils import round_minutes
from ..timeclock.mapper import anomaly_to_dict
from .model import DailyHours, TimesheetReport, TimesheetTotals


def totals_to_dict(t: TimesheetTotals) -> dict:
    return asdict(t)


def daily_hours_to_dict(d: DailyHours) -> dict:
    return {
        "date": d.date.strftime("%Y-%m-%d"),
        "total_minutes": round_minutes(d.total_minutes),
        "shift_ids": [s.id for s in d.shifts],
    }


def report_to_dict(r: TimesheetReport) -> dict:
    return {
        "totals": totals_to_dict(r.totals),
        "daily": [daily_hours_to_dict(d) for d in r.daily],
        "anomalies": [anomaly_to_dict(a) for a in r.anomalies],
    }
