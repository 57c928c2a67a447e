"""SM-2 scheduler tests: pure, `now` injected.

Tests cover:
    - Failing quality (< 3) resets repetitions and schedules tomorrow
    - Passing quality walks the 1 -> 6 -> round(prev * EF) ladder
    - Easiness factor update and its 1.3 floor
    - Quality bounds, rating buttons, due-word filtering
"""

from datetime import datetime, timedelta, timezone

import pytest

from chirpolly.core.domain_types import ReviewRating
from chirpolly.core.errors import DomainValidationError
from chirpolly.core.spaced_repetition import (
    MIN_EASINESS,
    calculate_next_review,
    get_due_words,
    initialize_srs,
    is_due,
    quality_for_rating,
    update_easiness,
)

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


class _Word:
    def __init__(self, name, next_review_at):
        self.name = name
        self.next_review_at = next_review_at


# --- Failing reviews ----------------------------------------------------------

@pytest.mark.parametrize("quality", [0, 1, 2])
def test_failing_quality_resets_progress(quality):
    schedule = calculate_next_review(
        quality, NOW, easiness_factor=2.5, interval=30, repetitions=7,
    )
    assert schedule.repetitions == 0
    assert schedule.interval == 1
    assert schedule.next_review_at == NOW + timedelta(days=1)


# --- Passing reviews ----------------------------------------------------------

def test_first_success_schedules_one_day():
    schedule = calculate_next_review(4, NOW)
    assert schedule.repetitions == 1
    assert schedule.interval == 1


def test_second_success_schedules_six_days():
    schedule = calculate_next_review(
        4, NOW, easiness_factor=2.5, interval=1, repetitions=1,
    )
    assert schedule.repetitions == 2
    assert schedule.interval == 6
    assert schedule.next_review_at == NOW + timedelta(days=6)


def test_third_success_multiplies_previous_interval_by_new_ef():
    # q=5 raises EF 2.5 -> 2.6; 6 * 2.6 = 15.6 -> 16
    schedule = calculate_next_review(
        5, NOW, easiness_factor=2.5, interval=6, repetitions=2,
    )
    assert schedule.repetitions == 3
    assert schedule.easiness_factor == pytest.approx(2.6)
    assert schedule.interval == 16


def test_interval_rounds_half_up():
    # q=4 keeps EF at 2.5; 5 * 2.5 = 12.5 -> 13
    schedule = calculate_next_review(
        4, NOW, easiness_factor=2.5, interval=5, repetitions=3,
    )
    assert schedule.interval == 13


def test_missing_fields_use_defaults():
    schedule = calculate_next_review(3, NOW, None, None, None)
    assert schedule.repetitions == 1
    assert schedule.interval == 1
    assert schedule.easiness_factor == pytest.approx(2.36)


# --- Easiness factor ----------------------------------------------------------

@pytest.mark.parametrize("quality,expected", [
    (5, 2.6), (4, 2.5), (3, 2.36), (2, 2.18), (1, 1.96), (0, 1.7),
])
def test_update_easiness_from_default(quality, expected):
    assert update_easiness(2.5, quality) == pytest.approx(expected)


def test_easiness_never_below_floor():
    ef = 1.4
    for _ in range(5):
        ef = update_easiness(ef, 0)
    assert ef == MIN_EASINESS


def test_review_does_not_go_below_floor():
    schedule = calculate_next_review(
        0, NOW, easiness_factor=1.3, interval=10, repetitions=4,
    )
    assert schedule.easiness_factor == MIN_EASINESS


# --- Validation ---------------------------------------------------------------

@pytest.mark.parametrize("quality", [-1, 6, 10])
def test_quality_out_of_range_rejected(quality):
    with pytest.raises(DomainValidationError):
        calculate_next_review(quality, NOW)


# --- Rating buttons, init, due filter -----------------------------------------

@pytest.mark.parametrize("rating,quality", [
    (ReviewRating.AGAIN, 0),
    (ReviewRating.HARD, 3),
    (ReviewRating.GOOD, 4),
    (ReviewRating.EASY, 5),
])
def test_rating_maps_to_quality(rating, quality):
    assert quality_for_rating(rating) == quality


def test_initialize_srs_is_due_immediately():
    schedule = initialize_srs(NOW)
    assert schedule.easiness_factor == 2.5
    assert schedule.interval == 0
    assert schedule.repetitions == 0
    assert schedule.next_review_at == NOW
    assert is_due(schedule.next_review_at, NOW)


def test_get_due_words_keeps_new_and_overdue_in_order():
    words = [
        _Word("future", NOW + timedelta(days=2)),
        _Word("new", None),
        _Word("overdue", NOW - timedelta(hours=1)),
        _Word("exactly_now", NOW),
    ]
    due = get_due_words(words, NOW)
    assert [w.name for w in due] == ["new", "overdue", "exactly_now"]


def test_is_due_treats_naive_datetime_as_utc():
    naive_past = (NOW - timedelta(minutes=1)).replace(tzinfo=None)
    assert is_due(naive_past, NOW)
