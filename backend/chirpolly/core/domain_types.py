"""Domain Types: enums and identity types shared across the codebase.

Invariants:
    - All valid states encoded as Enums, no raw string matching in core/
    - str Enums serialize to JSON without custom encoders
    - DayOfWeek follows the client convention: 0 = Sunday ... 6 = Saturday
"""

from enum import Enum, IntEnum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)
TutorId = NewType("TutorId", str)
BookingId = NewType("BookingId", str)
ConversationId = NewType("ConversationId", str)


# ─── Enums ───────────────────────────────────────────────────────

class UserRole(str, Enum):
    STUDENT = "student"
    TUTOR = "tutor"
    BOTH = "both"


class BookingStatus(str, Enum):
    """Booking lifecycle states, maps to bookings.status."""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class BookingRole(str, Enum):
    """Which side of a booking a user is looking from."""
    STUDENT = "student"
    TUTOR = "tutor"


class CancelledBy(str, Enum):
    STUDENT = "student"
    TUTOR = "tutor"
    ADMIN = "admin"


class ApplicationStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class PayoutStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


class PayoutMethod(str, Enum):
    STRIPE = "stripe"
    BANK_TRANSFER = "bank_transfer"
    PAYPAL = "paypal"


class NotificationType(str, Enum):
    BOOKING_REQUEST = "booking_request"
    BOOKING_CONFIRMED = "booking_confirmed"
    SESSION_REMINDER = "session_reminder"
    SESSION_COMPLETED = "session_completed"
    REVIEW_RECEIVED = "review_received"
    MESSAGE_RECEIVED = "message_received"
    PAYOUT_PROCESSED = "payout_processed"


class VoiceGender(str, Enum):
    """Text-to-speech voice gender, names match Google SsmlVoiceGender."""
    MALE = "MALE"
    FEMALE = "FEMALE"
    NEUTRAL = "NEUTRAL"


class ReviewRating(str, Enum):
    """Flashcard review buttons. Quality values live in spaced_repetition."""
    AGAIN = "again"
    HARD = "hard"
    GOOD = "good"
    EASY = "easy"


class DayOfWeek(IntEnum):
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
