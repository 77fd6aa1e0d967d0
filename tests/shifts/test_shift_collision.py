from __future__ import annotations

from datetime import datetime, timezone

from src.shift_compliance.shift_compliance.core.enums import ShiftStatus
from src.shift_compliance.shift_compliance.shifts.collision import has_shift_collision, overlaps
from src.shift_compliance.shift_compliance.shifts.model import Shift


def _at(hour: int, day: int = 6) -> datetime:
    return datetime(2025, 1, day, hour, 0, tzinfo=timezone.utc)


def _shift(shift_id: str, start: int, end: int, status=ShiftStatus.ASSIGNED) -> Shift:
    return Shift(id=shift_id, org_id="o", location_id="l", start_at=_at(start), end_at=_at(end), status=status)


def test_touching_intervals_do_not_overlap():
    assert not overlaps(_at(8), _at(12), _at(12), _at(16))
    assert overlaps(_at(8), _at(13), _at(12), _at(16))


def test_collision_detected_against_existing_shift():
    shifts = [_shift("s1", 8, 12)]

    assert has_shift_collision(shifts, _at(11), _at(15))
    assert not has_shift_collision(shifts, _at(12), _at(15))


def test_collision_ignores_excluded_and_cancelled_shifts():
    shifts = [_shift("s1", 8, 12), _shift("s2", 13, 17, status=ShiftStatus.CANCELLED)]

    assert not has_shift_collision(shifts, _at(9), _at(11), exclude_shift_id="s1")
    assert not has_shift_collision(shifts, _at(14), _at(16))
