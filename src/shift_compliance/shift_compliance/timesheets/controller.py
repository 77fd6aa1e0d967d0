from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.datetime_utils import parse_iso_date
from ..common.request_payload import read_json, read_period
from ..common.week_utils import get_week_bounds, iso_week_key, next_week, previous_week
from ..core.exceptions import ValidationError
from ..container import Container
from ..shifts.mapper import shifts_from_payload
from ..timeclock.mapper import events_from_payload
from .mapper import daily_hours_to_dict, report_to_dict

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/v1/timesheets/calculate", methods=["POST"], endpoint="api_timesheets_calculate")
    def api_timesheets_calculate():
        """Totals for a period from the posted clock events and planned shifts."""
        try:
            data = read_json()
            start, end = read_period(data)
            events = events_from_payload(data.get("events"))
            shifts = shifts_from_payload(data.get("shifts"))

            report = container.timesheet_service.build_timesheet(events, shifts, start, end)
            return jsonify({"success": True, "timesheet": report_to_dict(report)})
        except (ValidationError, ValueError) as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("timesheet calculation failed")
            return jsonify({"success": False, "message": "internal error"}), 500

    @app.route("/api/v1/timesheets/daily-hours", methods=["POST"], endpoint="api_timesheets_daily_hours")
    def api_timesheets_daily_hours():
        try:
            data = read_json()
            start, end = read_period(data)
            events = events_from_payload(data.get("events"))
            shifts = shifts_from_payload(data.get("shifts"))

            days = container.timesheet_service.daily_hours(events, start, end, shifts=shifts)
            return jsonify({"success": True, "days": [daily_hours_to_dict(d) for d in days]})
        except (ValidationError, ValueError) as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("daily hours aggregation failed")
            return jsonify({"success": False, "message": "internal error"}), 500

    @app.route("/api/v1/weeks/<day>", methods=["GET"], endpoint="api_week_bounds")
    def api_week_bounds(day: str):
        """Monday..Sunday bounds of the ISO week containing ``day`` (YYYY-MM-DD)."""
        try:
            bounds = get_week_bounds(parse_iso_date(day))
        except ValueError:
            return jsonify({"success": False, "message": "day must be YYYY-MM-DD"}), 400

        return jsonify(
            {
                "success": True,
                "week": iso_week_key(bounds.start),
                "start": bounds.start.strftime("%Y-%m-%d"),
                "end": bounds.end.strftime("%Y-%m-%d"),
                "days": [d.strftime("%Y-%m-%d") for d in bounds.days],
                "previous": previous_week(bounds.start).strftime("%Y-%m-%d"),
                "next": next_week(bounds.start).strftime("%Y-%m-%d"),
            }
        )
