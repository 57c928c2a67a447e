"""VocabularyWord ORM: one flashcard in a user's SRS deck.

Invariants:
    - easiness_factor >= 1.3, interval in days, repetitions >= 0
    - next_review_at <= now means the word is due (core/spaced_repetition.py)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Integer, Float, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from chirpolly.db.base import Base


class VocabularyWord(Base):
    __tablename__ = "vocabulary_words"

    id: Mapped[str] = mapped_column(
        String(64), primary_key=True, default=lambda: str(uuid.uuid4()),
    )
    user_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    word: Mapped[str] = mapped_column(String(200), nullable=False)
    transliteration: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    meaning: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    audio_prompt: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    language: Mapped[str | None] = mapped_column(String(10), nullable=True)
    easiness_factor: Mapped[float] = mapped_column(Float, nullable=False, default=2.5)
    interval: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    repetitions: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    next_review_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
