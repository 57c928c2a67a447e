"""Payout Service: batch a tutor's completed, unpaid bookings into a payout.

Invariants:
    - A payout covers every completed booking of the tutor with no payout_id
    - amount = sum of the bookings' tutor_payout, rounded to cents
    - Status changes follow core/status_rules.py; completing stamps processed_at
      and notifies the tutor
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from chirpolly.config import Settings
from chirpolly.core.domain_types import BookingStatus, NotificationType, PayoutStatus
from chirpolly.core.errors import DomainValidationError
from chirpolly.core.pricing import round_money
from chirpolly.core.status_rules import check_payout_transition
from chirpolly.core.timeutils import utc_now
from chirpolly.models.booking import Booking
from chirpolly.models.payout import Payout
from chirpolly.models.tutor_profile import TutorProfile
from chirpolly.schemas.payout import PayoutCreate, PayoutStatusUpdate
from chirpolly.services.lookup import get_or_404
from chirpolly.services.notification_service import notify

logger = logging.getLogger(__name__)


async def create_payout(
    db: AsyncSession, body: PayoutCreate, settings: Settings,
) -> Payout:
    tutor = await get_or_404(db, TutorProfile, body.tutor_id, "Tutor")
    result = await db.execute(
        select(Booking)
        .where(Booking.tutor_id == tutor.id)
        .where(Booking.status == BookingStatus.COMPLETED.value)
        .where(Booking.payout_id.is_(None))
        .order_by(Booking.scheduled_at.asc())
    )
    bookings = list(result.scalars().all())
    if not bookings:
        raise DomainValidationError(
            "No completed sessions awaiting payout", "tutor_id",
        )

    payout = Payout(
        tutor_id=tutor.id,
        amount=round_money(sum(b.tutor_payout for b in bookings)),
        currency=settings.currency,
        status=PayoutStatus.PENDING.value,
        booking_ids=[b.id for b in bookings],
        payout_method=body.payout_method.value,
        payout_destination=body.payout_destination,
    )
    db.add(payout)
    await db.flush()
    for booking in bookings:
        booking.payout_id = payout.id
    await db.commit()
    await db.refresh(payout)
    logger.info(
        f"Payout created for {len(bookings)} sessions",
        extra={"tutor_id": tutor.id},
    )
    return payout


async def list_payouts(db: AsyncSession, tutor_id: str) -> list[Payout]:
    result = await db.execute(
        select(Payout)
        .where(Payout.tutor_id == tutor_id)
        .order_by(Payout.created_at.desc())
    )
    return list(result.scalars().all())


async def update_status(
    db: AsyncSession, payout_id: str, body: PayoutStatusUpdate,
) -> Payout:
    payout = await get_or_404(db, Payout, payout_id, "Payout")
    new_status = check_payout_transition(payout.status, body.status)
    payout.status = new_status.value

    if new_status == PayoutStatus.FAILED:
        payout.failure_reason = body.failure_reason
    elif new_status == PayoutStatus.PENDING:
        payout.failure_reason = None
    elif new_status == PayoutStatus.COMPLETED:
        payout.processed_at = utc_now()
        tutor = await db.get(TutorProfile, payout.tutor_id)
        if tutor is not None:
            notify(
                db, tutor.user_id, NotificationType.PAYOUT_PROCESSED,
                "Payout sent",
                f"{payout.amount:.2f} {payout.currency} is on its way",
                action_url=f"/payouts/{payout.id}",
            )

    await db.commit()
    await db.refresh(payout)
    logger.info(f"Payout {new_status.value}", extra={"tutor_id": payout.tutor_id})
    return payout
