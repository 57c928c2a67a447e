"""Conversation ORM: one message thread per tutor/student pair.

Invariants:
    - id is "{tutor_id}_{student_id}" (core/conversation_ids.py)
    - unread_counts maps participant user id -> unread message count
    - last_message_* mirror the newest message for inbox listings
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column

from chirpolly.db.base import Base


class Conversation(Base):
    __tablename__ = "conversations"

    id: Mapped[str] = mapped_column(String(300), primary_key=True)
    tutor_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    student_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    last_message_text: Mapped[str | None] = mapped_column(Text, nullable=True)
    last_message_sender: Mapped[str | None] = mapped_column(String(128), nullable=True)
    last_message_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    unread_counts: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
