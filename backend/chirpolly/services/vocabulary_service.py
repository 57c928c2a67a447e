"""Vocabulary Service: a user's flashcard deck scheduled with SM-2.

Invariants:
    - New words start with the SM-2 defaults and are due immediately
    - A review writes back easiness_factor, interval, repetitions, next_review_at
      computed by core/spaced_repetition.py
    - Due words: no review date or next_review_at <= now, oldest due first
"""

import logging
from collections.abc import Iterable
from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from chirpolly.core.spaced_repetition import (
    calculate_next_review, get_due_words, initialize_srs, quality_for_rating,
)
from chirpolly.core.timeutils import as_utc, utc_now
from chirpolly.models.vocabulary_word import VocabularyWord
from chirpolly.schemas.vocabulary import ReviewSubmit, VocabularyWordCreate
from chirpolly.services.lookup import get_or_404

logger = logging.getLogger(__name__)


def _new_word(user_id: str, word: str, now: datetime, **fields) -> VocabularyWord:
    schedule = initialize_srs(now)
    return VocabularyWord(
        user_id=user_id,
        word=word,
        easiness_factor=schedule.easiness_factor,
        interval=schedule.interval,
        repetitions=schedule.repetitions,
        next_review_at=schedule.next_review_at,
        **fields,
    )


async def add_word(
    db: AsyncSession, user_id: str, body: VocabularyWordCreate,
) -> VocabularyWord:
    fields = body.model_dump(exclude={"word"})
    word = _new_word(user_id, body.word.strip(), utc_now(), **fields)
    db.add(word)
    await db.commit()
    await db.refresh(word)
    return word


def add_words_for_review(
    db: AsyncSession,
    user_id: str,
    words: Iterable[str],
    language: str | None,
    now: datetime,
) -> list[VocabularyWord]:
    """Queue words from a finished session; the caller commits."""
    added = []
    for text in words:
        text = text.strip()
        if not text:
            continue
        word = _new_word(user_id, text, now, language=language)
        db.add(word)
        added.append(word)
    return added


async def list_words(db: AsyncSession, user_id: str) -> list[VocabularyWord]:
    result = await db.execute(
        select(VocabularyWord)
        .where(VocabularyWord.user_id == user_id)
        .order_by(VocabularyWord.created_at.asc())
    )
    return list(result.scalars().all())


async def due_words(
    db: AsyncSession, user_id: str, now: datetime | None = None,
) -> list[VocabularyWord]:
    now = now or utc_now()
    words = await list_words(db, user_id)
    due = get_due_words(words, now)
    return sorted(
        due,
        key=lambda w: (
            w.next_review_at is not None,
            as_utc(w.next_review_at) if w.next_review_at else now,
        ),
    )


async def review_word(
    db: AsyncSession, word_id: str, body: ReviewSubmit,
) -> VocabularyWord:
    word = await get_or_404(db, VocabularyWord, word_id, "Vocabulary word")
    quality = (
        quality_for_rating(body.rating) if body.rating is not None else body.quality
    )
    schedule = calculate_next_review(
        quality,
        utc_now(),
        easiness_factor=word.easiness_factor,
        interval=word.interval,
        repetitions=word.repetitions,
    )
    word.easiness_factor = schedule.easiness_factor
    word.interval = schedule.interval
    word.repetitions = schedule.repetitions
    word.next_review_at = schedule.next_review_at
    await db.commit()
    await db.refresh(word)
    logger.info(
        f"Word reviewed, next in {schedule.interval}d",
        extra={"user_id": word.user_id},
    )
    return word
