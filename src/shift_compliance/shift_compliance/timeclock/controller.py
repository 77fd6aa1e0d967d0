from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.datetime_utils import local_date, now_utc
from ..common.request_payload import read_json
from ..common.validators import require_enum, require_instant, require_non_empty
from ..core.enums import ClockEventKind, ShiftStatus
from ..core.exceptions import ValidationError
from ..container import Container
from .mapper import events_from_payload, session_to_dict
from .session import summarize_session
from .service import DUPLICATE_PUNCH
from .validator import is_double_punch, validate_punch_sequence

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _same_day(occurred_at, now) -> bool:
        """Punches up to ``now`` on the same local day."""
        return occurred_at <= now and local_date(occurred_at, container.tz) == local_date(now, container.tz)

    @app.route("/api/v1/timeclock/validate", methods=["POST"], endpoint="api_timeclock_validate")
    def api_timeclock_validate():
        """Check a punch before the caller records it.

        429 for a double tap, 400 for an illegal sequence, 200 otherwise.
        """
        try:
            data = read_json()
            user_id = require_non_empty(data.get("user_id"), "user_id")
            location_id = require_non_empty(data.get("location_id"), "location_id")
            kind = require_enum(data.get("kind"), ClockEventKind, "kind")
            now = require_instant(data["occurred_at"], "occurred_at") if data.get("occurred_at") else now_utc()
            active_status = (
                require_enum(data["active_shift_status"], ShiftStatus, "active_shift_status")
                if data.get("active_shift_status")
                else None
            )
            recent = [
                e
                for e in events_from_payload(data.get("recent_events"))
                if e.user_id == user_id and e.location_id == location_id and _same_day(e.occurred_at, now)
            ]
        except (ValidationError, ValueError) as e:
            return jsonify({"success": False, "message": str(e)}), 400

        if is_double_punch(
            recent,
            user_id=user_id,
            location_id=location_id,
            kind=kind,
            now=now,
            threshold_seconds=container.double_punch_seconds,
        ):
            return jsonify({"success": False, "valid": False, "message": DUPLICATE_PUNCH}), 429

        result = validate_punch_sequence(
            kind,
            active_shift_status=active_status,
            last_event_kind=recent[-1].kind if recent else None,
        )
        if not result.valid:
            logger.info("punch rejected user=%s kind=%s reason=%s", user_id, kind.value, result.error)
            return jsonify({"success": False, "valid": False, "message": result.error}), 400

        return jsonify({"success": True, "valid": True})

    @app.route("/api/v1/timeclock/session", methods=["POST"], endpoint="api_timeclock_session")
    def api_timeclock_session():
        """Today's worked/break minutes from the posted punches."""
        try:
            data = read_json()
            now = require_instant(data["now"], "now") if data.get("now") else now_utc()
            events = [e for e in events_from_payload(data.get("events")) if _same_day(e.occurred_at, now)]
        except (ValidationError, ValueError) as e:
            return jsonify({"success": False, "message": str(e)}), 400

        return jsonify({"success": True, "session": session_to_dict(summarize_session(events, now=now))})
