"""Messaging Service: one conversation per tutor/student pair.

Invariants:
    - Conversation id is "{tutor_id}_{student_id}" (core/conversation_ids.py)
    - Only participants can post or mark a conversation read
    - An id already held by a different pair is never handed out
    - Sending bumps the other participant's unread count and last_message_*
    - Messages listed oldest first; conversations by latest activity
"""

import logging

from sqlalchemy import or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from chirpolly.core.conversation_ids import generate_conversation_id, other_participant
from chirpolly.core.domain_types import NotificationType
from chirpolly.core.errors import DomainValidationError
from chirpolly.core.timeutils import as_utc, utc_now
from chirpolly.models.conversation import Conversation
from chirpolly.models.message import Message
from chirpolly.schemas.messaging import MessageCreate
from chirpolly.services.lookup import get_or_404
from chirpolly.services.notification_service import notify

logger = logging.getLogger(__name__)

_PREVIEW_CHARS = 80


async def open_conversation(
    db: AsyncSession, tutor_id: str, student_id: str,
) -> Conversation:
    """Get the pair's conversation, creating it on first contact."""
    if tutor_id == student_id:
        raise DomainValidationError(
            "A conversation needs two different participants", "student_id",
        )
    conversation_id = generate_conversation_id(tutor_id, student_id)
    conversation = await db.get(Conversation, conversation_id)
    if conversation is not None and (
        conversation.tutor_id != tutor_id or conversation.student_id != student_id
    ):
        raise DomainValidationError(
            f"Conversation id '{conversation_id}' belongs to another pair", "student_id",
        )
    if conversation is None:
        conversation = Conversation(
            id=conversation_id,
            tutor_id=tutor_id,
            student_id=student_id,
            unread_counts={tutor_id: 0, student_id: 0},
        )
        db.add(conversation)
        await db.commit()
        await db.refresh(conversation)
        logger.info(
            "Conversation created", extra={"conversation_id": conversation_id},
        )
    return conversation


async def list_conversations(db: AsyncSession, user_id: str) -> list[Conversation]:
    result = await db.execute(
        select(Conversation).where(
            or_(Conversation.tutor_id == user_id, Conversation.student_id == user_id),
        )
    )
    conversations = list(result.scalars().all())
    return sorted(
        conversations,
        key=lambda c: as_utc(c.last_message_at or c.created_at),
        reverse=True,
    )


async def list_messages(db: AsyncSession, conversation_id: str) -> list[Message]:
    await get_or_404(db, Conversation, conversation_id, "Conversation")
    result = await db.execute(
        select(Message)
        .where(Message.conversation_id == conversation_id)
        .order_by(Message.created_at.asc())
    )
    return list(result.scalars().all())


async def send_message(
    db: AsyncSession, conversation_id: str, body: MessageCreate,
) -> Message:
    conversation = await get_or_404(db, Conversation, conversation_id, "Conversation")
    _require_participant(conversation, body.sender_id)
    recipient = other_participant(
        conversation.tutor_id, conversation.student_id, body.sender_id,
    )
    now = utc_now()
    message = Message(
        conversation_id=conversation.id,
        sender_id=body.sender_id,
        sender_name=body.sender_name,
        text=body.text,
        created_at=now,
    )
    db.add(message)

    # JSON column: assign a new dict so the change is tracked
    counts = dict(conversation.unread_counts or {})
    counts[recipient] = counts.get(recipient, 0) + 1
    conversation.unread_counts = counts
    conversation.last_message_text = body.text
    conversation.last_message_sender = body.sender_id
    conversation.last_message_at = now

    notify(
        db, recipient, NotificationType.MESSAGE_RECEIVED,
        f"New message from {body.sender_name}",
        body.text[:_PREVIEW_CHARS],
        action_url=f"/messages/{conversation.id}",
    )
    await db.commit()
    await db.refresh(message)
    return message


async def mark_read(
    db: AsyncSession, conversation_id: str, user_id: str,
) -> Conversation:
    """Reset the user's unread count and mark the other side's messages read."""
    conversation = await get_or_404(db, Conversation, conversation_id, "Conversation")
    _require_participant(conversation, user_id)
    await db.execute(
        update(Message)
        .where(Message.conversation_id == conversation_id)
        .where(Message.sender_id != user_id)
        .values(read=True)
    )
    counts = dict(conversation.unread_counts or {})
    counts[user_id] = 0
    conversation.unread_counts = counts
    await db.commit()
    await db.refresh(conversation)
    return conversation


def _require_participant(conversation: Conversation, user_id: str) -> None:
    if user_id not in (conversation.tutor_id, conversation.student_id):
        raise DomainValidationError(
            f"User '{user_id}' is not part of this conversation", "user_id",
        )
