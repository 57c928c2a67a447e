"""Tutor Service: marketplace listing, tutor profile lookups, and bookable times.

Invariants:
    - Only verified tutors are listed, looked up by user, or bookable
    - Filtering and ordering are delegated to core/tutor_filters.py
    - Bookable times come from the weekly schedule (core/availability.py)
"""

import logging
from datetime import date

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from chirpolly.core.availability import AvailabilitySlot, generate_time_slots
from chirpolly.core.errors import ResourceNotFoundError
from chirpolly.core.timeutils import utc_now
from chirpolly.core.tutor_filters import TutorFilters, filter_tutors
from chirpolly.models.review import Review
from chirpolly.models.tutor_profile import TutorProfile
from chirpolly.services.lookup import get_or_404

logger = logging.getLogger(__name__)


async def list_tutors(db: AsyncSession, filters: TutorFilters) -> list[TutorProfile]:
    result = await db.execute(
        select(TutorProfile).where(TutorProfile.is_verified.is_(True)),
    )
    return filter_tutors(result.scalars().all(), filters)


async def get_tutor(db: AsyncSession, tutor_id: str) -> TutorProfile:
    return await get_or_404(db, TutorProfile, tutor_id, "Tutor")


async def get_tutor_by_user(db: AsyncSession, user_id: str) -> TutorProfile:
    """The verified tutor profile owned by `user_id`."""
    result = await db.execute(
        select(TutorProfile)
        .where(TutorProfile.user_id == user_id)
        .where(TutorProfile.is_verified.is_(True))
        .limit(1)
    )
    tutor = result.scalar_one_or_none()
    if tutor is None:
        raise ResourceNotFoundError("Tutor for user", user_id)
    return tutor


async def set_online_status(
    db: AsyncSession, tutor_id: str, is_online: bool,
) -> TutorProfile:
    tutor = await get_tutor(db, tutor_id)
    tutor.is_online = is_online
    tutor.updated_at = utc_now()
    await db.commit()
    logger.info(
        f"Tutor online status set to {is_online}", extra={"tutor_id": tutor_id},
    )
    return tutor


async def available_times(
    db: AsyncSession, tutor_id: str, day: date, step_minutes: int,
) -> list[str]:
    tutor = await get_tutor(db, tutor_id)
    slots = [AvailabilitySlot.from_dict(s) for s in tutor.availability]
    return generate_time_slots(slots, day, step_minutes)


async def list_reviews(db: AsyncSession, tutor_id: str) -> list[Review]:
    await get_tutor(db, tutor_id)
    result = await db.execute(
        select(Review)
        .where(Review.tutor_id == tutor_id)
        .order_by(Review.created_at.desc())
    )
    return list(result.scalars().all())
