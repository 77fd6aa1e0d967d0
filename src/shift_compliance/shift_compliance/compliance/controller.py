from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.request_payload import read_json, read_period
from ..common.validators import require_non_empty
from ..core.exceptions import ValidationError
from ..container import Container
from ..shifts.mapper import shifts_from_payload
from ..timeclock.mapper import events_from_payload
from .mapper import rules_from_payload, violation_to_dict

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/v1/compliance/check", methods=["POST"], endpoint="api_compliance_check")
    def api_compliance_check():
        """Evaluate the posted rules; violations are returned, not stored."""
        try:
            data = read_json()
            user_id = require_non_empty(data.get("user_id"), "user_id")
            start, end = read_period(data)
            rules = rules_from_payload(data.get("rules"))

            if not any(r.is_active for r in rules):
                return jsonify({"success": True, "message": "no active rules", "violations": [], "count": 0})

            violations = container.compliance_service.run_checks(
                user_id=user_id,
                events=events_from_payload(data.get("events")),
                shifts=shifts_from_payload(data.get("shifts")),
                rules=rules,
                period_start=start,
                period_end=end,
            )
            return jsonify(
                {
                    "success": True,
                    "violations": [violation_to_dict(v) for v in violations],
                    "count": len(violations),
                }
            )
        except (ValidationError, ValueError) as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("compliance check failed")
            return jsonify({"success": False, "message": "internal error"}), 500
