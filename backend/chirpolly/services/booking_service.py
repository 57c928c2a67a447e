"""Booking Service: create, list, and move bookings through their lifecycle.

Invariants:
    - Only verified tutors can be booked
    - New bookings start in the future and never overlap a non-cancelled booking
      of the same tutor (core/booking_overlap.py)
    - Price, platform fee, and tutor payout computed server-side (core/pricing.py)
    - Status changes follow core/status_rules.py and stamp confirmed_at,
      completed_at, or cancelled_at
    - Completing a booking bumps the tutor's total_sessions and adds
      vocabulary_to_review to the student's deck

Design Decisions:
    - Conflict check is read-then-write with no lock; concurrent requests for
      the same slot can both succeed
    - The weekly schedule is advisory: reported by check_availability,
      not enforced on create
"""

import logging
from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from chirpolly.config import Settings
from chirpolly.core.availability import AvailabilitySlot, is_within_availability
from chirpolly.core.booking_overlap import has_conflict, is_slot_available
from chirpolly.core.domain_types import BookingRole, BookingStatus, NotificationType
from chirpolly.core.errors import (
    BookingConflictError, DomainValidationError, ResourceNotFoundError,
)
from chirpolly.core.pricing import calculate_session_price
from chirpolly.core.status_rules import check_booking_transition, is_upcoming
from chirpolly.core.timeutils import as_utc, utc_now
from chirpolly.models.booking import Booking
from chirpolly.models.tutor_profile import TutorProfile
from chirpolly.schemas.booking import BookingCreate, BookingStatusUpdate
from chirpolly.services.lookup import get_or_404
from chirpolly.services.notification_service import notify
from chirpolly.services.vocabulary_service import add_words_for_review

logger = logging.getLogger(__name__)


async def create_booking(
    db: AsyncSession, body: BookingCreate, settings: Settings,
) -> Booking:
    start = as_utc(body.scheduled_at)
    if start <= utc_now():
        raise DomainValidationError(
            "Booking must be scheduled in the future", "scheduled_at",
        )
    tutor = await get_or_404(db, TutorProfile, body.tutor_id, "Tutor")
    if not tutor.is_verified:
        raise ResourceNotFoundError("Bookable tutor", tutor.id)

    existing = await _calendar_bookings(db, tutor.id)
    if has_conflict(existing, tutor.id, start, body.duration):
        logger.info(
            "Booking rejected: slot taken",
            extra={"tutor_id": tutor.id, "user_id": body.student_id},
        )
        raise BookingConflictError(tutor.id)

    price = calculate_session_price(
        tutor.hourly_rate, body.duration, settings.platform_fee_percent,
    )
    booking = Booking(
        student_id=body.student_id,
        student_name=body.student_name,
        tutor_id=tutor.id,
        tutor_name=tutor.name,
        scheduled_at=start,
        duration=body.duration,
        language=body.language or next(iter(tutor.teaching_languages), None),
        price=price.session_price,
        platform_fee=price.platform_fee,
        tutor_payout=price.tutor_payout,
        currency=settings.currency,
        status=BookingStatus.PENDING.value,
        notes=body.notes,
    )
    db.add(booking)
    await db.flush()
    notify(
        db, tutor.user_id, NotificationType.BOOKING_REQUEST,
        "New booking request",
        f"{body.student_name} requested a {body.duration}-minute session",
        action_url=f"/bookings/{booking.id}",
    )
    await db.commit()
    await db.refresh(booking)
    logger.info(
        "Booking created",
        extra={"booking_id": booking.id, "tutor_id": tutor.id, "user_id": body.student_id},
    )
    return booking


async def list_bookings(
    db: AsyncSession, user_id: str, role: BookingRole,
) -> list[Booking]:
    """All of the user's bookings, most recent first."""
    result = await db.execute(
        select(Booking)
        .where(_role_column(role) == user_id)
        .order_by(Booking.scheduled_at.desc())
    )
    return list(result.scalars().all())


async def upcoming_bookings(
    db: AsyncSession, user_id: str, role: BookingRole, limit: int,
) -> list[Booking]:
    """Pending or confirmed bookings still ahead, soonest first."""
    now = utc_now()
    result = await db.execute(
        select(Booking)
        .where(_role_column(role) == user_id)
        .where(Booking.scheduled_at > now)
        .order_by(Booking.scheduled_at.asc())
    )
    upcoming = [
        b for b in result.scalars().all()
        if is_upcoming(b.status, b.scheduled_at, now)
    ]
    return upcoming[:limit]


async def check_availability(
    db: AsyncSession, tutor_id: str, start: datetime, duration: int,
) -> tuple[bool, bool]:
    """Return (free of conflicts, inside the tutor's weekly schedule)."""
    tutor = await get_or_404(db, TutorProfile, tutor_id, "Tutor")
    existing = await _calendar_bookings(db, tutor.id)
    available = is_slot_available(existing, tutor.id, start, duration)
    slots = [AvailabilitySlot.from_dict(s) for s in tutor.availability]
    within = any(
        is_within_availability([slot], _wall_clock(start, slot.timezone), duration)
        for slot in slots
    )
    return available, within


async def update_status(
    db: AsyncSession, booking_id: str, body: BookingStatusUpdate,
) -> Booking:
    booking = await get_or_404(db, Booking, booking_id, "Booking")
    new_status = check_booking_transition(booking.status, body.status)
    now = utc_now()
    booking.status = new_status.value
    booking.updated_at = now

    if new_status == BookingStatus.CONFIRMED:
        booking.confirmed_at = now
        if body.meeting_link:
            booking.meeting_link = body.meeting_link
        notify(
            db, booking.student_id, NotificationType.BOOKING_CONFIRMED,
            "Booking confirmed",
            f"{booking.tutor_name} confirmed your session",
            action_url=f"/bookings/{booking.id}",
        )
    elif new_status == BookingStatus.COMPLETED:
        await _complete(db, booking, body, now)
    elif new_status == BookingStatus.CANCELLED:
        booking.cancelled_at = now
        booking.cancelled_by = body.cancelled_by.value if body.cancelled_by else None
        booking.cancellation_reason = body.cancellation_reason

    await db.commit()
    await db.refresh(booking)
    logger.info(
        f"Booking {new_status.value}", extra={"booking_id": booking.id},
    )
    return booking


async def _complete(
    db: AsyncSession, booking: Booking, body: BookingStatusUpdate, now: datetime,
) -> None:
    booking.completed_at = now
    if body.tutor_notes is not None:
        booking.tutor_notes = body.tutor_notes
    if body.vocabulary_to_review:
        booking.vocabulary_to_review = list(body.vocabulary_to_review)
        add_words_for_review(
            db, booking.student_id, body.vocabulary_to_review, booking.language, now,
        )
    tutor = await db.get(TutorProfile, booking.tutor_id)
    if tutor is not None:
        tutor.total_sessions += 1
    notify(
        db, booking.student_id, NotificationType.SESSION_COMPLETED,
        "Session completed",
        f"How was your session with {booking.tutor_name}? Leave a review.",
        action_url=f"/bookings/{booking.id}/review",
    )


async def _calendar_bookings(
    db: AsyncSession, tutor_id: str,
) -> list[Booking]:
    result = await db.execute(
        select(Booking)
        .where(Booking.tutor_id == tutor_id)
        .where(Booking.status != BookingStatus.CANCELLED.value)
    )
    return list(result.scalars().all())


def _role_column(role: BookingRole):
    return Booking.student_id if role == BookingRole.STUDENT else Booking.tutor_id


def _wall_clock(start: datetime, tz_name: str) -> datetime:
    """`start` as naive local time in `tz_name` (UTC when the zone is unknown)."""
    try:
        zone = ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning(f"Unknown timezone '{tz_name}', using UTC")
        zone = ZoneInfo("UTC")
    return as_utc(start).astimezone(zone).replace(tzinfo=None)
