from __future__ import annotations

from typing import Any, Mapping

from ..common.validators import require_bool, require_list, require_non_empty, require_number
from ..core.exceptions import ValidationError
from .model import ComplianceRule, ComplianceViolation


def rule_from_payload(r: Mapping[str, Any]) -> ComplianceRule:
    threshold = r.get("threshold_value") or {}
    if not isinstance(threshold, dict):
        raise ValidationError("threshold_value must be an object")
    threshold = dict(threshold)
    if threshold.get("hours") is not None:
        threshold["hours"] = require_number(threshold["hours"], "threshold_value.hours")
    return ComplianceRule(
        id=require_non_empty(r.get("id"), "id"),
        rule_key=require_non_empty(r.get("rule_key"), "rule_key"),
        is_active=require_bool(r.get("is_active"), "is_active", default=True),
        threshold_value=threshold,
    )


def rules_from_payload(rows: Any) -> list[ComplianceRule]:
    return [rule_from_payload(r) for r in require_list(rows, "rules")]


def violation_to_dict(v: ComplianceViolation) -> dict:
    return {
        "org_id": v.org_id,
        "location_id": v.location_id,
        "user_id": v.user_id,
        "rule_id": v.rule_id,
        "violation_date": v.violation_date.strftime("%Y-%m-%d"),
        "severity": v.severity.value,
        "details": v.details,
        "is_silenced": v.is_silenced,
    }
