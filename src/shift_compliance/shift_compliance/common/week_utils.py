from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta

from ..core.constants import DEFAULT_TIMEZONE
from .datetime_utils import Zone, resolve_zone


@dataclass(frozen=True)
class WeekBounds:
    start: date
    end: date
    days: list[date]


def iso_week_key(day: date) -> str:
    """ISO-8601 week key, e.g. ``2025-W02``."""
    year, week, _ = day.isocalendar()
    return f"{year}-W{week:02d}"


def week_start(day: date) -> date:
    """Monday of the ISO week containing ``day``."""
    return day - timedelta(days=day.weekday())


def get_week_bounds(day: date) -> WeekBounds:
    monday = week_start(day)
    days = [monday + timedelta(days=i) for i in range(7)]
    return WeekBounds(start=monday, end=days[-1], days=days)


def previous_week(current_week_start: date) -> date:
    return week_start(current_week_start) - timedelta(weeks=1)


def next_week(current_week_start: date) -> date:
    return week_start(current_week_start) + timedelta(weeks=1)


def current_month_period(now: datetime, tz: Zone = DEFAULT_TIMEZONE) -> tuple[date, date]:
    """First and last local calendar day of the month containing ``now``."""
    local = now.astimezone(resolve_zone(tz)) if now.tzinfo else now
    first = local.date().replace(day=1)
    if first.month == 12:
        next_first = first.replace(year=first.year + 1, month=1)
    else:
        next_first = first.replace(month=first.month + 1)
    return first, next_first - timedelta(days=1)


def format_minutes_to_hours(minutes: int) -> str:
    """90 -> "1.50"."""
    return f"{minutes / 60:.2f}"
