from __future__ import annotations

import logging
import uuid
from datetime import datetime, time, timedelta
from typing import Optional

from ..common.datetime_utils import Zone, local_date, minutes_between, now_utc, resolve_zone, round_minutes, to_utc
from ..core.constants import DEFAULT_DOUBLE_PUNCH_SECONDS, DEFAULT_TIMEZONE
from ..core.enums import ClockEventKind, ClockEventSource, ShiftStatus
from ..shifts.model import Shift
from ..shifts.repository import ShiftRepository
from .model import ClockEvent, PunchValidation
from .repository import ClockEventRepository
from .shift_tracking import apply_punch_to_shift
from .validator import is_double_punch, validate_punch_sequence

logger = logging.getLogger(__name__)

DUPLICATE_PUNCH = "duplicate punch detected - please wait a few seconds"
AD_HOC_SHIFT_HOURS = 4


class PunchService:
    """Records punches after the double-tap guard and sequence validation.

    The service takes no locks: callers must serialize punches per
    (user, location), e.g. with a row lock held around ``punch``.
    """

    def __init__(
        self,
        events: ClockEventRepository,
        shifts: ShiftRepository,
        *,
        tz: Zone = DEFAULT_TIMEZONE,
        double_punch_seconds: int = DEFAULT_DOUBLE_PUNCH_SECONDS,
    ):
        self._events = events
        self._shifts = shifts
        self._tz = resolve_zone(tz)
        self._double_punch_seconds = int(double_punch_seconds)

    def _day_bounds(self, now: datetime) -> tuple[datetime, datetime]:
        day = local_date(now, self._tz)
        start = to_utc(datetime.combine(day, time.min), self._tz)
        end = to_utc(datetime.combine(day + timedelta(days=1), time.min), self._tz)
        return start, end

    def punch(
        self,
        *,
        user_id: str,
        location_id: str,
        org_id: str,
        kind: ClockEventKind,
        now: Optional[datetime] = None,
        source: ClockEventSource = ClockEventSource.KIOSK,
    ) -> PunchValidation:
        now = now or now_utc()
        day_start, day_end = self._day_bounds(now)
        today = self._events.list_between(user_id=user_id, location_id=location_id, start=day_start, end=day_end)

        if is_double_punch(
            today,
            user_id=user_id,
            location_id=location_id,
            kind=kind,
            now=now,
            threshold_seconds=self._double_punch_seconds,
        ):
            logger.info("double punch ignored user=%s location=%s kind=%s", user_id, location_id, kind.value)
            return PunchValidation.reject(DUPLICATE_PUNCH)

        active = self._shifts.get_active_for(user_id=user_id, location_id=location_id)
        result = validate_punch_sequence(
            kind,
            active_shift_status=active.status if active else None,
            last_event_kind=today[-1].kind if today else None,
        )
        if not result.valid:
            logger.info("punch rejected user=%s kind=%s reason=%s", user_id, kind.value, result.error)
            return result

        event = ClockEvent(
            user_id=user_id,
            location_id=location_id,
            org_id=org_id,
            kind=kind,
            occurred_at=now,
            source=source,
            id=uuid.uuid4().hex,
        )
        self._events.append(event)
        self._track_shift(event, active=active, today=today, day_start=day_start, day_end=day_end)
        return result

    def _track_shift(self, event: ClockEvent, *, active: Optional[Shift], today, day_start, day_end) -> None:
        if event.kind == ClockEventKind.CLOCK_IN:
            planned = self._shifts.get_planned_for(
                user_id=event.user_id, location_id=event.location_id, start=day_start, end=day_end
            )
            shift = planned or self._ad_hoc_shift(event)
            self._shifts.save(apply_punch_to_shift(shift, event), user_id=event.user_id)
            return

        if not active:
            return

        if event.kind == ClockEventKind.CLOCK_OUT:
            self._shifts.save(apply_punch_to_shift(active, event), user_id=event.user_id)
        elif event.kind == ClockEventKind.BREAK_END:
            break_start = next((e for e in reversed(today) if e.kind == ClockEventKind.BREAK_START), None)
            if not break_start:
                logger.warning("break_end without break_start user=%s", event.user_id)
                return
            minutes = round_minutes(minutes_between(break_start.occurred_at, event.occurred_at))
            self._shifts.save(apply_punch_to_shift(active, event, break_minutes=minutes), user_id=event.user_id)

    def _ad_hoc_shift(self, event: ClockEvent) -> Shift:
        logger.info("no planned shift for user=%s, opening ad-hoc shift", event.user_id)
        return Shift(
            id=uuid.uuid4().hex,
            org_id=event.org_id,
            location_id=event.location_id,
            start_at=event.occurred_at,
            end_at=event.occurred_at + timedelta(hours=AD_HOC_SHIFT_HOURS),
            break_minutes=0,
            status=ShiftStatus.ASSIGNED,
            actual_break_minutes=0,
        )
