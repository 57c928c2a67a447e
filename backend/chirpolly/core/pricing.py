"""Session Pricing: hourly rate and duration to price, platform fee, and payout.

Invariants:
    - session_price = hourly_rate / 60 * duration, rounded to 2 decimals
    - platform_fee = rounded session_price * fee_percent, rounded to 2 decimals
    - tutor_payout = session_price - platform_fee, so the split always sums exactly
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP

from chirpolly.core.errors import DomainValidationError

DEFAULT_PLATFORM_FEE_PERCENT = 0.20


@dataclass(frozen=True)
class SessionPrice:
    session_price: float
    platform_fee: float
    tutor_payout: float


def calculate_session_price(
    hourly_rate: float,
    duration_minutes: int,
    platform_fee_percent: float = DEFAULT_PLATFORM_FEE_PERCENT,
) -> SessionPrice:
    if hourly_rate < 0:
        raise DomainValidationError("hourly_rate cannot be negative", "hourly_rate")
    if duration_minutes <= 0:
        raise DomainValidationError("duration must be positive", "duration")
    if not 0 <= platform_fee_percent <= 1:
        raise DomainValidationError(
            "platform_fee_percent must be between 0 and 1", "platform_fee_percent",
        )
    price = round_money(hourly_rate / 60 * duration_minutes)
    fee = round_money(price * platform_fee_percent)
    return SessionPrice(
        session_price=price,
        platform_fee=fee,
        tutor_payout=round_money(price - fee),
    )


def round_money(amount: float) -> float:
    """Round half-up to cents."""
    return float(Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))
