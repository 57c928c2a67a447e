"""Messaging Schemas: tutor/student conversations and their messages."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ConversationOpen(BaseModel):
    tutor_id: str = Field(min_length=1, max_length=128)
    student_id: str = Field(min_length=1, max_length=128)


class ConversationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    tutor_id: str
    student_id: str
    last_message_text: str | None
    last_message_sender: str | None
    last_message_at: datetime | None
    unread_counts: dict[str, int]
    created_at: datetime


class MessageCreate(BaseModel):
    sender_id: str = Field(min_length=1, max_length=128)
    sender_name: str = Field("Anonymous", max_length=200)
    text: str = Field(min_length=1, max_length=5000)


class MessageResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    conversation_id: str
    sender_id: str
    sender_name: str
    text: str
    read: bool
    created_at: datetime


class MarkRead(BaseModel):
    user_id: str = Field(min_length=1, max_length=128)
