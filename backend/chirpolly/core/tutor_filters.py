"""Tutor Filters: marketplace search over tutor profiles. Pure, no IO.

Invariants:
    - language matches teaching OR native languages
    - online_only keeps tutors with is_online True
    - min_rating is inclusive
    - Result ordered by rating, highest first; ties keep input order
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol, TypeVar


class TutorLike(Protocol):
    teaching_languages: list[str]
    native_languages: list[str]
    is_online: bool
    rating: float


T = TypeVar("T", bound=TutorLike)


@dataclass(frozen=True)
class TutorFilters:
    language: str | None = None
    online_only: bool = False
    min_rating: float | None = None


def matches(tutor: TutorLike, filters: TutorFilters) -> bool:
    if filters.language and (
        filters.language not in tutor.teaching_languages
        and filters.language not in tutor.native_languages
    ):
        return False
    if filters.online_only and not tutor.is_online:
        return False
    if filters.min_rating is not None and tutor.rating < filters.min_rating:
        return False
    return True


def filter_tutors(tutors: Iterable[T], filters: TutorFilters) -> list[T]:
    kept = [t for t in tutors if matches(t, filters)]
    return sorted(kept, key=lambda t: t.rating, reverse=True)
