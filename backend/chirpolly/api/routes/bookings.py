"""Booking routes: create, list, upcoming, availability, status changes, reviews.

Invariants:
    - POST /bookings returns 409 BOOKING_CONFLICT when the slot overlaps a
      non-cancelled booking of the tutor
    - GET /bookings/upcoming returns at most upcoming_bookings_limit bookings
"""

from datetime import datetime

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from chirpolly.config import Settings, get_settings
from chirpolly.core.domain_types import BookingRole
from chirpolly.infrastructure.database import get_db
from chirpolly.schemas.booking import (
    AvailabilityResponse, BookingCreate, BookingResponse,
    BookingStatusUpdate, ReviewCreate, ReviewResponse,
)
from chirpolly.services import booking_service, review_service

router = APIRouter(prefix="/api/v1/bookings", tags=["bookings"])


@router.post(
    "", response_model=BookingResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_booking(
    body: BookingCreate,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    return await booking_service.create_booking(db, body, settings)


@router.get("", response_model=list[BookingResponse])
async def list_bookings(
    user_id: str,
    role: BookingRole = BookingRole.STUDENT,
    db: AsyncSession = Depends(get_db),
):
    return await booking_service.list_bookings(db, user_id, role)


@router.get("/upcoming", response_model=list[BookingResponse])
async def upcoming_bookings(
    user_id: str,
    role: BookingRole = BookingRole.STUDENT,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    return await booking_service.upcoming_bookings(
        db, user_id, role, settings.upcoming_bookings_limit,
    )


@router.get("/availability", response_model=AvailabilityResponse)
async def check_availability(
    tutor_id: str,
    start: datetime,
    duration: int = Query(ge=15, le=180),
    db: AsyncSession = Depends(get_db),
):
    available, within = await booking_service.check_availability(
        db, tutor_id, start, duration,
    )
    return AvailabilityResponse(
        tutor_id=tutor_id, start=start, duration=duration,
        available=available, within_schedule=within,
    )


@router.patch("/{booking_id}/status", response_model=BookingResponse)
async def update_status(
    booking_id: str,
    body: BookingStatusUpdate,
    db: AsyncSession = Depends(get_db),
):
    return await booking_service.update_status(db, booking_id, body)


@router.post(
    "/{booking_id}/review", response_model=ReviewResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_review(
    booking_id: str, body: ReviewCreate, db: AsyncSession = Depends(get_db),
):
    return await review_service.create_review(db, booking_id, body)
