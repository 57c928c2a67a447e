"""Payout Schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from chirpolly.core.domain_types import PayoutMethod, PayoutStatus


class PayoutCreate(BaseModel):
    tutor_id: str = Field(min_length=1, max_length=64)
    payout_method: PayoutMethod
    payout_destination: str | None = Field(None, max_length=20)


class PayoutStatusUpdate(BaseModel):
    status: Literal["pending", "processing", "completed", "failed"]
    failure_reason: str | None = Field(None, max_length=2000)


class PayoutResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    tutor_id: str
    amount: float
    currency: str
    status: PayoutStatus
    booking_ids: list[str]
    payout_method: PayoutMethod
    payout_destination: str | None
    failure_reason: str | None
    created_at: datetime
    processed_at: datetime | None
