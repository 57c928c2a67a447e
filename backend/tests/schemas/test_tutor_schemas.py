"""Tutor application and availability validation."""

import pytest
from pydantic import ValidationError

from chirpolly.schemas.tutor import AvailabilitySlotIn, TutorApplicationCreate

_APPLICATION = {
    "user_id": "user-1",
    "name": "Ana Lima",
    "email": "ana@example.com",
    "native_languages": ["pt"],
    "teaching_languages": ["pt", "en"],
    "specialty": "Conversational Portuguese",
    "bio": "Olá! I teach Brazilian Portuguese through music.",
    "hourly_rate": 30,
}


def test_application_strips_text_fields():
    body = TutorApplicationCreate(**{**_APPLICATION, "name": "  Ana Lima  "})
    assert body.name == "Ana Lima"


def test_application_requires_a_teaching_language():
    with pytest.raises(ValidationError):
        TutorApplicationCreate(**{**_APPLICATION, "teaching_languages": []})


@pytest.mark.parametrize("rate", [0, -5, 1001])
def test_hourly_rate_bounds(rate):
    with pytest.raises(ValidationError):
        TutorApplicationCreate(**{**_APPLICATION, "hourly_rate": rate})


def test_slot_requires_start_before_end():
    with pytest.raises(ValidationError):
        AvailabilitySlotIn(day_of_week=1, start_time="17:00", end_time="09:00")


@pytest.mark.parametrize("value", ["9:00", "24:00", "12:60"])
def test_slot_time_format(value):
    with pytest.raises(ValidationError):
        AvailabilitySlotIn(day_of_week=1, start_time=value, end_time="23:00")


def test_slot_day_of_week_range():
    with pytest.raises(ValidationError):
        AvailabilitySlotIn(day_of_week=7, start_time="09:00", end_time="10:00")
