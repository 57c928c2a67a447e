"""Tutor Availability: weekly schedule to bookable start times. Pure, no IO.

Invariants:
    - Slots are matched on weekday with 0 = Sunday ... 6 = Saturday
    - Generated start times are HH:MM, step minutes apart, strictly before slot end
    - Times from multiple slots on the same day are returned sorted, without duplicates
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

from chirpolly.core.errors import DomainValidationError

DEFAULT_SLOT_STEP_MINUTES = 30


@dataclass(frozen=True)
class AvailabilitySlot:
    day_of_week: int
    start_time: str  # "09:00"
    end_time: str    # "17:00"
    timezone: str = "UTC"

    @classmethod
    def from_dict(cls, data: dict) -> "AvailabilitySlot":
        return cls(
            day_of_week=int(data["day_of_week"]),
            start_time=data["start_time"],
            end_time=data["end_time"],
            timezone=data.get("timezone", "UTC"),
        )

    def to_dict(self) -> dict:
        return {
            "day_of_week": self.day_of_week,
            "start_time": self.start_time,
            "end_time": self.end_time,
            "timezone": self.timezone,
        }


def parse_hhmm(value: str) -> time:
    """Parse 'HH:MM' (24h) into a time."""
    try:
        hours, minutes = (int(part) for part in value.split(":"))
        return time(hour=hours, minute=minutes)
    except ValueError as e:
        raise DomainValidationError(f"invalid time '{value}': {e}", "time")


def weekday_index(day: date) -> int:
    """Python's Monday=0 weekday converted to Sunday=0."""
    return (day.weekday() + 1) % 7


def generate_time_slots(
    availability: Iterable[AvailabilitySlot],
    day: date,
    step_minutes: int = DEFAULT_SLOT_STEP_MINUTES,
) -> list[str]:
    """Bookable start times for `day` according to the weekly schedule."""
    if step_minutes <= 0:
        raise DomainValidationError("step must be positive", "step_minutes")
    dow = weekday_index(day)
    times: set[str] = set()
    for slot in availability:
        if slot.day_of_week != dow:
            continue
        current = datetime.combine(day, parse_hhmm(slot.start_time))
        end = datetime.combine(day, parse_hhmm(slot.end_time))
        while current < end:
            times.add(current.strftime("%H:%M"))
            current += timedelta(minutes=step_minutes)
    return sorted(times)


def is_within_availability(
    availability: Iterable[AvailabilitySlot],
    start: datetime,
    duration_minutes: int,
) -> bool:
    """True if [start, start + duration) fits entirely inside one slot.

    `start` is interpreted in the slot's wall-clock time.
    """
    end = start + timedelta(minutes=duration_minutes)
    if end.date() != start.date():
        return False
    dow = weekday_index(start.date())
    for slot in availability:
        if slot.day_of_week != dow:
            continue
        if parse_hhmm(slot.start_time) <= start.time() and end.time() <= parse_hhmm(slot.end_time):
            return True
    return False
