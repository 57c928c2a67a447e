"""Notification Service: in-app notifications for booking, review, message, and payout events.

Invariants:
    - notify() only adds to the session; the calling service owns the commit
    - Listing is newest first
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from chirpolly.core.domain_types import NotificationType
from chirpolly.models.notification import Notification
from chirpolly.services.lookup import get_or_404

logger = logging.getLogger(__name__)

_LIST_LIMIT = 100


def notify(
    db: AsyncSession,
    user_id: str,
    kind: NotificationType,
    title: str,
    body: str = "",
    action_url: str | None = None,
) -> Notification:
    notification = Notification(
        user_id=user_id, type=kind.value, title=title,
        body=body, action_url=action_url,
    )
    db.add(notification)
    logger.info(
        f"Notification queued: {kind.value}", extra={"user_id": user_id},
    )
    return notification


async def list_notifications(
    db: AsyncSession, user_id: str, unread_only: bool = False,
) -> list[Notification]:
    query = select(Notification).where(Notification.user_id == user_id)
    if unread_only:
        query = query.where(Notification.read.is_(False))
    result = await db.execute(
        query.order_by(Notification.created_at.desc()).limit(_LIST_LIMIT),
    )
    return list(result.scalars().all())


async def mark_read(db: AsyncSession, notification_id: str) -> Notification:
    notification = await get_or_404(db, Notification, notification_id, "Notification")
    notification.read = True
    await db.commit()
    return notification
