from __future__ import annotations

from datetime import datetime
from typing import Any

from flask import request

from ..core.exceptions import ValidationError
from .validators import require_instant, require_period


def read_json() -> dict[str, Any]:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("request body must be a JSON object")
    return data


def read_period(data: dict[str, Any]) -> tuple[datetime, datetime]:
    start = require_instant(data.get("period_start"), "period_start")
    end = require_instant(data.get("period_end"), "period_end")
    return require_period(start, end)
