"""Booking and review request validation.

Invariants:
    - scheduled_at must carry a timezone
    - duration bounded to 15-180 minutes
    - blank student_name becomes "Anonymous"
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from chirpolly.schemas.booking import BookingCreate, BookingStatusUpdate, ReviewCreate

_BASE = {
    "student_id": "student-1",
    "tutor_id": "demo-tutor-1",
    "scheduled_at": "2030-01-07T10:00:00+00:00",
    "duration": 60,
}


def test_valid_booking_parses_aware_datetime():
    body = BookingCreate(**_BASE)
    assert body.scheduled_at == datetime(2030, 1, 7, 10, 0, tzinfo=timezone.utc)
    assert body.student_name == "Anonymous"


def test_naive_scheduled_at_rejected():
    with pytest.raises(ValidationError):
        BookingCreate(**{**_BASE, "scheduled_at": "2030-01-07T10:00:00"})


@pytest.mark.parametrize("duration", [0, 10, 181])
def test_duration_bounds(duration):
    with pytest.raises(ValidationError):
        BookingCreate(**{**_BASE, "duration": duration})


def test_blank_student_name_defaults():
    body = BookingCreate(**{**_BASE, "student_name": "   "})
    assert body.student_name == "Anonymous"


def test_status_update_rejects_pending():
    with pytest.raises(ValidationError):
        BookingStatusUpdate(status="pending")


def test_status_update_accepts_cancellation_details():
    body = BookingStatusUpdate(
        status="cancelled", cancelled_by="student", cancellation_reason="Sick",
    )
    assert body.cancelled_by.value == "student"


@pytest.mark.parametrize("rating", [0, 6])
def test_review_rating_bounds(rating):
    with pytest.raises(ValidationError):
        ReviewCreate(rating=rating)
