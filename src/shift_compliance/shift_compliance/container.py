from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from zoneinfo import ZoneInfo

from .common.datetime_utils import resolve_zone
from .compliance.factory import ComplianceCheckFactory
from .compliance.service import ComplianceService
from .core.constants import DEFAULT_DOUBLE_PUNCH_SECONDS, DEFAULT_STANDARD_WEEKLY_HOURS, DEFAULT_TIMEZONE
from .shifts.repository import ShiftRepository
from .timeclock.repository import ClockEventRepository
from .timeclock.service import PunchService
from .timesheets.overtime.weekly_threshold import WeeklyThresholdPolicy
from .timesheets.service import TimesheetService


@dataclass(frozen=True)
class Container:
    tz: ZoneInfo
    double_punch_seconds: int

    timesheet_service: TimesheetService
    compliance_service: ComplianceService
    punch_service: Optional[PunchService] = None


def build_container(
    *,
    settings: dict,
    clock_events: Optional[ClockEventRepository] = None,
    shifts: Optional[ShiftRepository] = None,
) -> Container:
    """Wire services from settings.

    The punch service needs storage; it is only built when both repositories
    are supplied by the host application.
    """
    tz = resolve_zone(str(settings.get("TIMEZONE", DEFAULT_TIMEZONE)))
    double_punch_seconds = int(settings.get("DOUBLE_PUNCH_THRESHOLD_SECONDS", DEFAULT_DOUBLE_PUNCH_SECONDS))
    weekly_hours = float(settings.get("STANDARD_WEEKLY_HOURS", DEFAULT_STANDARD_WEEKLY_HOURS))

    timesheet_service = TimesheetService(policy=WeeklyThresholdPolicy(weekly_hours), tz=tz)
    compliance_service = ComplianceService(factory=ComplianceCheckFactory(), tz=tz)

    punch_service = None
    if clock_events is not None and shifts is not None:
        punch_service = PunchService(clock_events, shifts, tz=tz, double_punch_seconds=double_punch_seconds)

    return Container(
        tz=tz,
        double_punch_seconds=double_punch_seconds,
        timesheet_service=timesheet_service,
        compliance_service=compliance_service,
        punch_service=punch_service,
    )
