"""Tutor Schemas: profiles, applications, and availability.

Invariants:
    - AvailabilitySlotIn: day_of_week 0-6 (Sunday=0), HH:MM times, start < end
    - hourly_rate strictly positive, at most 1000
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from chirpolly.core.domain_types import ApplicationStatus

_HHMM = r"^([01]\d|2[0-3]):[0-5]\d$"


class AvailabilitySlotIn(BaseModel):
    day_of_week: int = Field(ge=0, le=6)
    start_time: str = Field(pattern=_HHMM)
    end_time: str = Field(pattern=_HHMM)
    timezone: str = Field("UTC", max_length=64)

    @model_validator(mode="after")
    def start_before_end(self):
        if self.start_time >= self.end_time:
            raise ValueError("start_time must be before end_time")
        return self


class TutorProfileResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    name: str
    email: str
    photo_url: str | None
    native_languages: list[str]
    teaching_languages: list[str]
    specialty: str
    bio: str
    hourly_rate: float
    rating: float
    total_sessions: int
    total_reviews: int
    is_online: bool
    is_verified: bool
    availability: list[AvailabilitySlotIn]
    created_at: datetime
    updated_at: datetime


class OnlineStatusUpdate(BaseModel):
    is_online: bool


class TimeSlotsResponse(BaseModel):
    tutor_id: str
    date: str
    times: list[str]


class TutorApplicationCreate(BaseModel):
    user_id: str = Field(min_length=1, max_length=128)
    name: str = Field(min_length=1, max_length=200)
    email: str = Field(min_length=3, max_length=320, pattern=r"^[^@\s]+@[^@\s]+$")
    native_languages: list[str] = Field(min_length=1, max_length=10)
    teaching_languages: list[str] = Field(min_length=1, max_length=10)
    specialty: str = Field(min_length=1, max_length=300)
    bio: str = Field(min_length=10, max_length=5000)
    hourly_rate: float = Field(gt=0, le=1000)
    availability: list[AvailabilitySlotIn] = Field(default_factory=list)

    @field_validator("name", "specialty", "bio")
    @classmethod
    def strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("field cannot be empty or whitespace")
        return v


class TutorApplicationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    name: str
    email: str
    native_languages: list[str]
    teaching_languages: list[str]
    specialty: str
    bio: str
    hourly_rate: float
    availability: list[AvailabilitySlotIn]
    status: ApplicationStatus
    created_at: datetime
    reviewed_at: datetime | None
    reviewed_by: str | None


class ApplicationDecision(BaseModel):
    decision: Literal["approved", "rejected"]
    reviewed_by: str = Field(min_length=1, max_length=128)
