from __future__ import annotations

from typing import Any, Mapping

from ..common.datetime_utils import format_utc_instant
from ..common.validators import require_enum, require_instant, require_list, require_non_empty
from ..core.enums import ClockEventKind, ClockEventSource
from .model import ClockEvent, PunchAnomaly, SessionSummary


def event_from_payload(r: Mapping[str, Any]) -> ClockEvent:
    return ClockEvent(
        user_id=require_non_empty(r.get("user_id"), "user_id"),
        location_id=require_non_empty(r.get("location_id"), "location_id"),
        org_id=require_non_empty(r.get("org_id"), "org_id"),
        kind=require_enum(r.get("kind"), ClockEventKind, "kind"),
        occurred_at=require_instant(r.get("occurred_at"), "occurred_at"),
        source=require_enum(r.get("source") or ClockEventSource.KIOSK.value, ClockEventSource, "source"),
        id=str(r["id"]) if r.get("id") is not None else None,
    )


def events_from_payload(rows: Any) -> list[ClockEvent]:
    """Parse and sort ascending by occurred_at."""
    events = [event_from_payload(r) for r in require_list(rows, "events")]
    events.sort(key=lambda e: e.occurred_at)
    return events


def event_to_dict(e: ClockEvent) -> dict:
    return {
        "id": e.id,
        "user_id": e.user_id,
        "location_id": e.location_id,
        "org_id": e.org_id,
        "kind": e.kind.value,
        "occurred_at": format_utc_instant(e.occurred_at),
        "source": e.source.value,
    }


def anomaly_to_dict(a: PunchAnomaly) -> dict:
    return {"kind": a.kind.value, "occurred_at": format_utc_instant(a.occurred_at), "reason": a.reason}


def session_to_dict(s: SessionSummary) -> dict:
    return {
        "total_minutes": s.total_minutes,
        "break_minutes": s.break_minutes,
        "status": s.status.value,
        "last_event": event_to_dict(s.last_event) if s.last_event else None,
    }
