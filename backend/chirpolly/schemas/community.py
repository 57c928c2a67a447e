"""Community Schemas: posts, comments, and likes."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PostCreate(BaseModel):
    user_id: str = Field(min_length=1, max_length=128)
    user_name: str = Field("Anonymous", max_length=200)
    user_avatar: str | None = Field(None, max_length=1000)
    content: str = Field(min_length=1, max_length=5000)
    image_url: str | None = Field(None, max_length=1000)
    language: str | None = Field(None, max_length=10)

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("content cannot be empty or whitespace")
        return v


class PostResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    user_name: str
    user_avatar: str | None
    content: str
    image_url: str | None
    language: str | None
    likes_count: int
    comments_count: int
    created_at: datetime


class CommentCreate(BaseModel):
    user_id: str = Field(min_length=1, max_length=128)
    user_name: str = Field("Anonymous", max_length=200)
    user_avatar: str | None = Field(None, max_length=1000)
    content: str = Field(min_length=1, max_length=2000)

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("content cannot be empty or whitespace")
        return v


class CommentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    post_id: str
    user_id: str
    user_name: str
    user_avatar: str | None
    content: str
    created_at: datetime


class LikeToggle(BaseModel):
    user_id: str = Field(min_length=1, max_length=128)


class LikeToggleResponse(BaseModel):
    liked: bool
    likes_count: int


class LikeStatusResponse(BaseModel):
    liked: bool
