"""Tutor rating aggregation after a new review.

Invariants:
    - Review ratings are integers 1-5
    - New average = (old_avg * old_count + rating) / (old_count + 1), 2 decimals
"""

from chirpolly.core.errors import DomainValidationError

MIN_RATING = 1
MAX_RATING = 5


def apply_review(average: float, count: int, rating: int) -> tuple[float, int]:
    """Return (new_average, new_count)."""
    if not MIN_RATING <= rating <= MAX_RATING:
        raise DomainValidationError(
            f"rating must be between {MIN_RATING} and {MAX_RATING}", "rating",
        )
    new_count = count + 1
    new_average = (average * count + rating) / new_count
    return round(new_average, 2), new_count
