"""Notification Schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from chirpolly.core.domain_types import NotificationType


class NotificationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    type: NotificationType
    title: str
    body: str
    read: bool
    action_url: str | None
    created_at: datetime
