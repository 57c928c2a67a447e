"""Booking Overlap: conflict detection for tutor bookings. Pure, no IO.

Invariants:
    - Intervals are half-open [start, end): back-to-back bookings never conflict
    - [s1, e1) and [s2, e2) conflict iff s1 < e2 and s2 < e1
    - Only bookings of the same tutor with status != cancelled are considered
    - Duration must be a positive number of minutes

Design Decisions:
    - Caller loads candidate bookings and writes afterwards without a
      transaction; concurrent bookers can still race (accepted)
"""

from collections.abc import Iterable
from datetime import datetime, timedelta
from typing import Protocol

from chirpolly.core.domain_types import BookingStatus
from chirpolly.core.errors import DomainValidationError
from chirpolly.core.timeutils import as_utc


class BookingLike(Protocol):
    """Structural contract for anything with a tutor, a start, and a length."""
    tutor_id: str
    scheduled_at: datetime
    duration: int
    status: str


def booking_interval(start: datetime, duration_minutes: int) -> tuple[datetime, datetime]:
    """Half-open [start, end) interval for a booking."""
    if duration_minutes <= 0:
        raise DomainValidationError(
            f"duration must be positive, got {duration_minutes}", "duration",
        )
    start = as_utc(start)
    return start, start + timedelta(minutes=duration_minutes)


def intervals_overlap(
    start1: datetime, end1: datetime, start2: datetime, end2: datetime,
) -> bool:
    return as_utc(start1) < as_utc(end2) and as_utc(start2) < as_utc(end1)


def blocks_tutor(booking: BookingLike, tutor_id: str) -> bool:
    """True if the booking occupies the tutor's calendar."""
    return (
        booking.tutor_id == tutor_id
        and BookingStatus(booking.status) != BookingStatus.CANCELLED
    )


def has_conflict(
    bookings: Iterable[BookingLike],
    tutor_id: str,
    start: datetime,
    duration_minutes: int,
) -> bool:
    """True if [start, start + duration) overlaps any active booking of the tutor."""
    req_start, req_end = booking_interval(start, duration_minutes)
    for booking in bookings:
        if not blocks_tutor(booking, tutor_id):
            continue
        b_start, b_end = booking_interval(booking.scheduled_at, booking.duration)
        if intervals_overlap(req_start, req_end, b_start, b_end):
            return True
    return False


def is_slot_available(
    bookings: Iterable[BookingLike],
    tutor_id: str,
    start: datetime,
    duration_minutes: int,
) -> bool:
    return not has_conflict(bookings, tutor_id, start, duration_minutes)
