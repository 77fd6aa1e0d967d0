from __future__ import annotations

from typing import Any, Mapping, Optional

from ..common.validators import require_enum, require_instant, require_list, require_non_empty, require_non_negative_int
from ..core.enums import ShiftStatus
from ..core.exceptions import ValidationError
from .model import Shift


def shift_from_payload(r: Mapping[str, Any]) -> Shift:
    start_at = require_instant(r.get("start_at"), "start_at")
    end_at = require_instant(r.get("end_at"), "end_at")
    if end_at <= start_at:
        raise ValidationError("end_at must be after start_at")

    actual_break: Optional[int] = None
    if r.get("actual_break_minutes") is not None:
        actual_break = require_non_negative_int(r["actual_break_minutes"], "actual_break_minutes")

    return Shift(
        id=require_non_empty(r.get("id"), "id"),
        org_id=require_non_empty(r.get("org_id"), "org_id"),
        location_id=require_non_empty(r.get("location_id"), "location_id"),
        start_at=start_at,
        end_at=end_at,
        break_minutes=require_non_negative_int(r.get("break_minutes") or 0, "break_minutes"),
        status=require_enum(r.get("status") or ShiftStatus.ASSIGNED.value, ShiftStatus, "status"),
        actual_start_at=require_instant(r["actual_start_at"], "actual_start_at") if r.get("actual_start_at") else None,
        actual_end_at=require_instant(r["actual_end_at"], "actual_end_at") if r.get("actual_end_at") else None,
        actual_break_minutes=actual_break,
    )


def shifts_from_payload(rows: Any) -> list[Shift]:
    return [shift_from_payload(r) for r in require_list(rows, "shifts")]
