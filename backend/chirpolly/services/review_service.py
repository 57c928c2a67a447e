"""Review Service: one student review per completed booking.

Invariants:
    - Only completed bookings without an existing review can be reviewed
    - The tutor's rating and total_reviews are updated in the same commit
      (core/ratings.py)
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from chirpolly.core.domain_types import NotificationType
from chirpolly.core.errors import ReviewNotAllowedError
from chirpolly.core.ratings import apply_review
from chirpolly.core.status_rules import can_review
from chirpolly.models.booking import Booking
from chirpolly.models.review import Review
from chirpolly.models.tutor_profile import TutorProfile
from chirpolly.schemas.booking import ReviewCreate
from chirpolly.services.lookup import get_or_404
from chirpolly.services.notification_service import notify

logger = logging.getLogger(__name__)


async def create_review(
    db: AsyncSession, booking_id: str, body: ReviewCreate,
) -> Review:
    booking = await get_or_404(db, Booking, booking_id, "Booking")
    result = await db.execute(
        select(Review.id).where(Review.booking_id == booking_id),
    )
    has_review = result.first() is not None
    if not can_review(booking.status, has_review):
        reason = (
            "This session has already been reviewed"
            if has_review else "Only completed sessions can be reviewed"
        )
        raise ReviewNotAllowedError(reason)

    review = Review(
        booking_id=booking.id,
        tutor_id=booking.tutor_id,
        student_id=booking.student_id,
        student_name=booking.student_name,
        rating=body.rating,
        comment=body.comment.strip(),
        language=booking.language,
        was_verified_session=True,
    )
    db.add(review)

    tutor = await get_or_404(db, TutorProfile, booking.tutor_id, "Tutor")
    tutor.rating, tutor.total_reviews = apply_review(
        tutor.rating, tutor.total_reviews, body.rating,
    )
    notify(
        db, tutor.user_id, NotificationType.REVIEW_RECEIVED,
        "New review",
        f"{booking.student_name} rated your session {body.rating}/5",
        action_url=f"/tutors/{tutor.id}/reviews",
    )
    await db.commit()
    await db.refresh(review)
    logger.info(
        "Review created",
        extra={"booking_id": booking.id, "tutor_id": tutor.id},
    )
    return review
