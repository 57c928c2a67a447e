"""Spaced Repetition: SM-2 scheduling for vocabulary review. Pure, no IO.

Invariants:
    - Easiness factor never drops below MIN_EASINESS (1.3)
    - quality < 3 resets repetitions to 0 and interval to 1 day
    - quality >= 3: repetition 1 -> 1 day, repetition 2 -> 6 days,
      repetition n>=3 -> round(previous interval * new easiness)
    - Inputs are never mutated; a new ReviewSchedule is returned
    - `now` is always passed in, never read from the clock here

Design Decisions:
    - Review buttons map onto the 0-5 scale as again=0, hard=3, good=4, easy=5
    - Half-up rounding for intervals (round() would bank 2.5 -> 2)
"""

import math
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Protocol, TypeVar

from chirpolly.core.domain_types import ReviewRating
from chirpolly.core.errors import DomainValidationError
from chirpolly.core.timeutils import as_utc

DEFAULT_EASINESS = 2.5
DEFAULT_INTERVAL = 0  # days, due immediately
DEFAULT_REPETITIONS = 0
MIN_EASINESS = 1.3
MIN_QUALITY = 0
MAX_QUALITY = 5
PASSING_QUALITY = 3

RATING_QUALITY: dict[ReviewRating, int] = {
    ReviewRating.AGAIN: 0,
    ReviewRating.HARD: 3,
    ReviewRating.GOOD: 4,
    ReviewRating.EASY: 5,
}


@dataclass(frozen=True)
class ReviewSchedule:
    """SRS state of one word after a review (or on first learning)."""
    easiness_factor: float
    interval: int
    repetitions: int
    next_review_at: datetime


class Schedulable(Protocol):
    next_review_at: datetime | None


S = TypeVar("S", bound=Schedulable)


def quality_for_rating(rating: ReviewRating) -> int:
    """Map a flashcard button to its SM-2 quality."""
    return RATING_QUALITY[rating]


def update_easiness(easiness_factor: float, quality: int) -> float:
    """EF' = EF + (0.1 - (5 - q) * (0.08 + (5 - q) * 0.02)), floored at 1.3."""
    miss = MAX_QUALITY - quality
    return max(MIN_EASINESS, easiness_factor + (0.1 - miss * (0.08 + miss * 0.02)))


def calculate_next_review(
    quality: int,
    now: datetime,
    easiness_factor: float | None = None,
    interval: int | None = None,
    repetitions: int | None = None,
) -> ReviewSchedule:
    """Recompute easiness, repetitions, and interval after a review.

    Missing SRS fields (words never reviewed) fall back to the SM-2 defaults.
    Raises DomainValidationError when quality is outside 0-5.
    """
    if not MIN_QUALITY <= quality <= MAX_QUALITY:
        raise DomainValidationError(
            f"quality must be between {MIN_QUALITY} and {MAX_QUALITY}, got {quality}",
            "quality",
        )
    ef = DEFAULT_EASINESS if easiness_factor is None else easiness_factor
    prev_interval = DEFAULT_INTERVAL if interval is None else interval
    reps = DEFAULT_REPETITIONS if repetitions is None else repetitions

    new_ef = update_easiness(ef, quality)

    if quality < PASSING_QUALITY:
        new_reps = 0
        new_interval = 1
    else:
        new_reps = reps + 1
        if new_reps == 1:
            new_interval = 1
        elif new_reps == 2:
            new_interval = 6
        else:
            new_interval = _round_half_up(prev_interval * new_ef)

    return ReviewSchedule(
        easiness_factor=new_ef,
        interval=new_interval,
        repetitions=new_reps,
        next_review_at=now + timedelta(days=new_interval),
    )


def initialize_srs(now: datetime) -> ReviewSchedule:
    """Fresh schedule for a newly learned word: defaults, due immediately."""
    return ReviewSchedule(
        easiness_factor=DEFAULT_EASINESS,
        interval=DEFAULT_INTERVAL,
        repetitions=DEFAULT_REPETITIONS,
        next_review_at=now,
    )


def is_due(next_review_at: datetime | None, now: datetime) -> bool:
    """Words with no review date are new, hence due."""
    return next_review_at is None or as_utc(next_review_at) <= as_utc(now)


def get_due_words(words: Iterable[S], now: datetime) -> list[S]:
    """Filter words due for review, preserving input order."""
    return [w for w in words if is_due(w.next_review_at, now)]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
