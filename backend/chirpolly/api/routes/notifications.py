"""Notification routes."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from chirpolly.infrastructure.database import get_db
from chirpolly.schemas.notification import NotificationResponse
from chirpolly.services import notification_service

router = APIRouter(prefix="/api/v1/notifications", tags=["notifications"])


@router.get("", response_model=list[NotificationResponse])
async def list_notifications(
    user_id: str, unread_only: bool = False, db: AsyncSession = Depends(get_db),
):
    return await notification_service.list_notifications(db, user_id, unread_only)


@router.post("/{notification_id}/read", response_model=NotificationResponse)
async def mark_read(notification_id: str, db: AsyncSession = Depends(get_db)):
    return await notification_service.mark_read(db, notification_id)
