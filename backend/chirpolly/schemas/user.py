"""User Schemas: profile upsert and response."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from chirpolly.core.domain_types import UserRole


class UserUpsert(BaseModel):
    email: str = Field(min_length=3, max_length=320, pattern=r"^[^@\s]+@[^@\s]+$")
    display_name: str = Field("", max_length=200)
    photo_url: str | None = Field(None, max_length=1000)
    role: UserRole = UserRole.STUDENT
    learning_languages: list[str] = Field(default_factory=list, max_length=20)
    current_levels: dict[str, str] = Field(default_factory=dict)
    timezone: str = Field("UTC", max_length=64)
    preferred_currency: str = Field("USD", min_length=3, max_length=3)


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    display_name: str
    photo_url: str | None
    role: UserRole
    learning_languages: list[str]
    current_levels: dict[str, str]
    timezone: str
    preferred_currency: str
    created_at: datetime
    last_active_at: datetime
