"""Flashcard review submission: exactly one of rating or quality."""

import pytest
from pydantic import ValidationError

from chirpolly.core.domain_types import ReviewRating
from chirpolly.schemas.vocabulary import ReviewSubmit


def test_rating_only():
    assert ReviewSubmit(rating="good").rating == ReviewRating.GOOD


def test_quality_only():
    assert ReviewSubmit(quality=3).quality == 3


def test_neither_rejected():
    with pytest.raises(ValidationError):
        ReviewSubmit()


def test_both_rejected():
    with pytest.raises(ValidationError):
        ReviewSubmit(rating="easy", quality=5)
