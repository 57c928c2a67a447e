"""Status Rules: allowed lifecycle moves for bookings, payouts, and applications.

Invariants:
    - Booking: pending -> confirmed | cancelled; confirmed -> completed | cancelled
    - completed and cancelled bookings are terminal
    - Payout: pending -> processing | failed; processing -> completed | failed;
      failed -> pending (retry); completed is terminal
    - Application: pending -> approved | rejected; both outcomes terminal
    - A booking is upcoming iff it starts after now and is pending or confirmed
    - A booking can be reviewed iff it is completed and has no review yet
"""

from datetime import datetime

from chirpolly.core.domain_types import (
    ApplicationStatus, BookingStatus, PayoutStatus,
)
from chirpolly.core.errors import InvalidStatusTransitionError
from chirpolly.core.timeutils import as_utc

ACTIVE_BOOKING_STATUSES = frozenset({BookingStatus.PENDING, BookingStatus.CONFIRMED})

_BOOKING_TRANSITIONS: dict[BookingStatus, frozenset[BookingStatus]] = {
    BookingStatus.PENDING: frozenset({BookingStatus.CONFIRMED, BookingStatus.CANCELLED}),
    BookingStatus.CONFIRMED: frozenset({BookingStatus.COMPLETED, BookingStatus.CANCELLED}),
    BookingStatus.COMPLETED: frozenset(),
    BookingStatus.CANCELLED: frozenset(),
}

_PAYOUT_TRANSITIONS: dict[PayoutStatus, frozenset[PayoutStatus]] = {
    PayoutStatus.PENDING: frozenset({PayoutStatus.PROCESSING, PayoutStatus.FAILED}),
    PayoutStatus.PROCESSING: frozenset({PayoutStatus.COMPLETED, PayoutStatus.FAILED}),
    PayoutStatus.FAILED: frozenset({PayoutStatus.PENDING}),
    PayoutStatus.COMPLETED: frozenset(),
}

_APPLICATION_TRANSITIONS: dict[ApplicationStatus, frozenset[ApplicationStatus]] = {
    ApplicationStatus.PENDING: frozenset({ApplicationStatus.APPROVED, ApplicationStatus.REJECTED}),
    ApplicationStatus.APPROVED: frozenset(),
    ApplicationStatus.REJECTED: frozenset(),
}


def check_booking_transition(current: str, requested: str) -> BookingStatus:
    """Return the requested status or raise InvalidStatusTransitionError."""
    cur, req = BookingStatus(current), BookingStatus(requested)
    if req not in _BOOKING_TRANSITIONS[cur]:
        raise InvalidStatusTransitionError("Booking", cur.value, req.value)
    return req


def check_payout_transition(current: str, requested: str) -> PayoutStatus:
    cur, req = PayoutStatus(current), PayoutStatus(requested)
    if req not in _PAYOUT_TRANSITIONS[cur]:
        raise InvalidStatusTransitionError("Payout", cur.value, req.value)
    return req


def check_application_transition(current: str, requested: str) -> ApplicationStatus:
    cur, req = ApplicationStatus(current), ApplicationStatus(requested)
    if req not in _APPLICATION_TRANSITIONS[cur]:
        raise InvalidStatusTransitionError("Application", cur.value, req.value)
    return req


def is_active_booking(status: str) -> bool:
    return BookingStatus(status) in ACTIVE_BOOKING_STATUSES


def is_upcoming(status: str, scheduled_at: datetime, now: datetime) -> bool:
    return is_active_booking(status) and as_utc(scheduled_at) > as_utc(now)


def can_review(status: str, has_review: bool) -> bool:
    return BookingStatus(status) == BookingStatus.COMPLETED and not has_review
