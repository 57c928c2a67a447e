"""Booking Schemas: creation, status changes, reviews, and availability checks.

Invariants:
    - scheduled_at must carry a timezone
    - duration in minutes, 15-180
    - Review rating is an integer 1-5
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from chirpolly.core.domain_types import BookingStatus, CancelledBy


class BookingCreate(BaseModel):
    student_id: str = Field(min_length=1, max_length=128)
    student_name: str = Field("Anonymous", max_length=200)
    tutor_id: str = Field(min_length=1, max_length=64)
    scheduled_at: datetime
    duration: int = Field(ge=15, le=180)
    language: str | None = Field(None, max_length=10)
    notes: str = Field("", max_length=2000)

    @field_validator("scheduled_at")
    @classmethod
    def require_timezone(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            raise ValueError("scheduled_at must include a timezone offset")
        return v

    @field_validator("student_name")
    @classmethod
    def default_name(cls, v: str) -> str:
        return v.strip() or "Anonymous"


class BookingStatusUpdate(BaseModel):
    status: Literal["confirmed", "completed", "cancelled"]
    meeting_link: str | None = Field(None, max_length=1000)
    cancelled_by: CancelledBy | None = None
    cancellation_reason: str | None = Field(None, max_length=2000)
    tutor_notes: str | None = Field(None, max_length=5000)
    vocabulary_to_review: list[str] = Field(default_factory=list, max_length=50)


class BookingResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    student_id: str
    student_name: str
    tutor_id: str
    tutor_name: str
    scheduled_at: datetime
    duration: int
    language: str | None
    price: float
    platform_fee: float
    tutor_payout: float
    currency: str
    status: BookingStatus
    notes: str
    meeting_link: str | None
    cancelled_by: str | None
    cancellation_reason: str | None
    tutor_notes: str | None
    vocabulary_to_review: list[str]
    created_at: datetime
    updated_at: datetime


class AvailabilityResponse(BaseModel):
    tutor_id: str
    start: datetime
    duration: int
    available: bool
    within_schedule: bool


class ReviewCreate(BaseModel):
    rating: int = Field(ge=1, le=5)
    comment: str = Field("", max_length=2000)


class ReviewResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    booking_id: str
    tutor_id: str
    student_id: str
    student_name: str
    rating: int
    comment: str
    language: str | None
    was_verified_session: bool
    created_at: datetime
