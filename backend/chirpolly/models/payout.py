"""Payout ORM: a transfer of accumulated tutor earnings.

Invariants:
    - amount == sum of tutor_payout over booking_ids
    - A booking belongs to at most one payout (Booking.payout_id)
    - processed_at set when status becomes completed
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, Float, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column

from chirpolly.db.base import Base


class Payout(Base):
    __tablename__ = "payouts"

    id: Mapped[str] = mapped_column(
        String(64), primary_key=True, default=lambda: str(uuid.uuid4()),
    )
    tutor_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    amount: Mapped[float] = mapped_column(Float, nullable=False)
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default="USD")
    status: Mapped[str] = mapped_column(String(12), nullable=False, default="pending")
    booking_ids: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    payout_method: Mapped[str] = mapped_column(String(20), nullable=False)
    payout_destination: Mapped[str | None] = mapped_column(String(20), nullable=True)
    failure_reason: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    processed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
