"""Booking ORM: a scheduled lesson between a student and a tutor.

Invariants:
    - status: pending -> confirmed -> completed, or -> cancelled (core/status_rules.py)
    - [scheduled_at, scheduled_at + duration) is the occupied interval
    - price = platform_fee + tutor_payout (core/pricing.py)
    - payout_id set once the tutor payout includes this booking
    - student_name/tutor_name denormalized for list views
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, Float, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column

from chirpolly.db.base import Base


class Booking(Base):
    __tablename__ = "bookings"

    id: Mapped[str] = mapped_column(
        String(64), primary_key=True, default=lambda: str(uuid.uuid4()),
    )
    student_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    student_name: Mapped[str] = mapped_column(String(200), nullable=False)
    tutor_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    tutor_name: Mapped[str] = mapped_column(String(200), nullable=False)
    scheduled_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True,
    )
    duration: Mapped[int] = mapped_column(Integer, nullable=False)  # minutes
    language: Mapped[str | None] = mapped_column(String(10), nullable=True)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    platform_fee: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    tutor_payout: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default="USD")
    status: Mapped[str] = mapped_column(String(10), nullable=False, default="pending")
    notes: Mapped[str] = mapped_column(Text, nullable=False, default="")
    meeting_link: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    cancelled_by: Mapped[str | None] = mapped_column(String(10), nullable=True)
    cancellation_reason: Mapped[str | None] = mapped_column(Text, nullable=True)
    tutor_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    vocabulary_to_review: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    payout_id: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
    confirmed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    cancelled_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
