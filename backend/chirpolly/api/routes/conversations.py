"""Messaging routes: tutor/student conversations."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from chirpolly.infrastructure.database import get_db
from chirpolly.schemas.messaging import (
    ConversationOpen, ConversationResponse, MarkRead, MessageCreate, MessageResponse,
)
from chirpolly.services import messaging_service

router = APIRouter(prefix="/api/v1/conversations", tags=["conversations"])


@router.post("", response_model=ConversationResponse)
async def open_conversation(
    body: ConversationOpen, db: AsyncSession = Depends(get_db),
):
    """Get or create the conversation for a tutor/student pair."""
    return await messaging_service.open_conversation(
        db, body.tutor_id, body.student_id,
    )


@router.get("", response_model=list[ConversationResponse])
async def list_conversations(user_id: str, db: AsyncSession = Depends(get_db)):
    return await messaging_service.list_conversations(db, user_id)


@router.get("/{conversation_id}/messages", response_model=list[MessageResponse])
async def list_messages(conversation_id: str, db: AsyncSession = Depends(get_db)):
    return await messaging_service.list_messages(db, conversation_id)


@router.post(
    "/{conversation_id}/messages", response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def send_message(
    conversation_id: str, body: MessageCreate, db: AsyncSession = Depends(get_db),
):
    return await messaging_service.send_message(db, conversation_id, body)


@router.post("/{conversation_id}/read", response_model=ConversationResponse)
async def mark_read(
    conversation_id: str, body: MarkRead, db: AsyncSession = Depends(get_db),
):
    return await messaging_service.mark_read(db, conversation_id, body.user_id)
