"""Tutor Marketplace routes: search, profiles, online status, bookable times, reviews.

Invariants:
    - GET /tutors lists verified tutors only, highest rated first
    - GET /tutors/{id}/slots?date=YYYY-MM-DD uses the tutor's weekly schedule
"""

from datetime import date

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from chirpolly.config import Settings, get_settings
from chirpolly.core.tutor_filters import TutorFilters
from chirpolly.infrastructure.database import get_db
from chirpolly.schemas.booking import ReviewResponse
from chirpolly.schemas.tutor import (
    OnlineStatusUpdate, TimeSlotsResponse, TutorProfileResponse,
)
from chirpolly.services import tutor_service

router = APIRouter(prefix="/api/v1/tutors", tags=["tutors"])


@router.get("", response_model=list[TutorProfileResponse])
async def list_tutors(
    language: str | None = Query(None, max_length=10),
    online_only: bool = False,
    min_rating: float | None = Query(None, ge=0, le=5),
    db: AsyncSession = Depends(get_db),
):
    filters = TutorFilters(
        language=language, online_only=online_only, min_rating=min_rating,
    )
    return await tutor_service.list_tutors(db, filters)


@router.get("/by-user/{user_id}", response_model=TutorProfileResponse)
async def get_tutor_by_user(user_id: str, db: AsyncSession = Depends(get_db)):
    """Verified tutor profile owned by a user; 404 if the user is not a tutor."""
    return await tutor_service.get_tutor_by_user(db, user_id)


@router.get("/{tutor_id}", response_model=TutorProfileResponse)
async def get_tutor(tutor_id: str, db: AsyncSession = Depends(get_db)):
    return await tutor_service.get_tutor(db, tutor_id)


@router.patch("/{tutor_id}/online", response_model=TutorProfileResponse)
async def set_online_status(
    tutor_id: str, body: OnlineStatusUpdate, db: AsyncSession = Depends(get_db),
):
    return await tutor_service.set_online_status(db, tutor_id, body.is_online)


@router.get("/{tutor_id}/slots", response_model=TimeSlotsResponse)
async def get_time_slots(
    tutor_id: str,
    day: date = Query(alias="date"),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    times = await tutor_service.available_times(
        db, tutor_id, day, settings.slot_step_minutes,
    )
    return TimeSlotsResponse(tutor_id=tutor_id, date=day.isoformat(), times=times)


@router.get("/{tutor_id}/reviews", response_model=list[ReviewResponse])
async def list_reviews(tutor_id: str, db: AsyncSession = Depends(get_db)):
    return await tutor_service.list_reviews(db, tutor_id)
