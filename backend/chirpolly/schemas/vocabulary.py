"""Vocabulary Schemas: flashcards and SM-2 reviews.

Invariants:
    - ReviewSubmit carries exactly one of rating (button) or quality (0-5)
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

from chirpolly.core.domain_types import ReviewRating


class VocabularyWordCreate(BaseModel):
    word: str = Field(min_length=1, max_length=200)
    transliteration: str = Field("", max_length=200)
    meaning: str = Field("", max_length=500)
    audio_prompt: str = Field("", max_length=500)
    language: str | None = Field(None, max_length=10)


class VocabularyWordResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    word: str
    transliteration: str
    meaning: str
    audio_prompt: str
    language: str | None
    easiness_factor: float
    interval: int
    repetitions: int
    next_review_at: datetime | None
    created_at: datetime


class ReviewSubmit(BaseModel):
    rating: ReviewRating | None = None
    quality: int | None = None

    @model_validator(mode="after")
    def exactly_one(self):
        if (self.rating is None) == (self.quality is None):
            raise ValueError("provide exactly one of rating or quality")
        return self
