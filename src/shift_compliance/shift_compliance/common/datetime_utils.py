from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Union
from zoneinfo import ZoneInfo

from ..core.constants import DEFAULT_TIMEZONE

Instant = Union[str, datetime]
Zone = Union[str, ZoneInfo]


def resolve_zone(tz: Zone = DEFAULT_TIMEZONE) -> ZoneInfo:
    if isinstance(tz, ZoneInfo):
        return tz
    return ZoneInfo(tz)


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_utc_instant(value: Instant) -> datetime:
    """Parse an ISO-8601 instant (``Z`` suffix or explicit offset) into aware UTC.

    Naive values are rejected: an instant without an offset is ambiguous.
    """
    if isinstance(value, datetime):
        dt = value
    else:
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        dt = datetime.fromisoformat(text)

    if dt.tzinfo is None or dt.utcoffset() is None:
        raise ValueError(f"timestamp without UTC offset: {value!r}")
    return dt.astimezone(timezone.utc)


def format_utc_instant(value: datetime) -> str:
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def to_local_time(utc_instant: Instant, tz: Zone = DEFAULT_TIMEZONE) -> datetime:
    """UTC instant -> wall-clock time in ``tz`` (DST aware)."""
    return parse_utc_instant(utc_instant).astimezone(resolve_zone(tz))


def to_utc(local_instant: Instant, tz: Zone = DEFAULT_TIMEZONE) -> datetime:
    """Wall-clock time in ``tz`` -> UTC instant.

    A naive value is read as local time in ``tz``; ambiguous times during the
    autumn DST fold resolve to the first occurrence.
    """
    if isinstance(local_instant, str):
        local_instant = datetime.fromisoformat(local_instant)
    if local_instant.tzinfo is None:
        local_instant = local_instant.replace(tzinfo=resolve_zone(tz), fold=0)
    return local_instant.astimezone(timezone.utc)


def local_date(instant: Instant, tz: Zone = DEFAULT_TIMEZONE) -> date:
    """Civil calendar date of an instant in ``tz``."""
    return to_local_time(instant, tz).date()


def minutes_between(start: datetime, end: datetime) -> float:
    return (end - start).total_seconds() / 60


def round_minutes(value: float) -> int:
    """Round half-up to whole minutes (Python's round() is banker's)."""
    if value >= 0:
        return int(value + 0.5)
    return -int(-value + 0.5)


def now_utc() -> datetime:
    """Current UTC time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc)
