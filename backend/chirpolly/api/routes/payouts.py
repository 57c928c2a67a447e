"""Payout routes."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from chirpolly.config import Settings, get_settings
from chirpolly.infrastructure.database import get_db
from chirpolly.schemas.payout import PayoutCreate, PayoutResponse, PayoutStatusUpdate
from chirpolly.services import payout_service

router = APIRouter(prefix="/api/v1/payouts", tags=["payouts"])


@router.post(
    "", response_model=PayoutResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_payout(
    body: PayoutCreate,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Batch all completed, unpaid sessions of the tutor."""
    return await payout_service.create_payout(db, body, settings)


@router.get("", response_model=list[PayoutResponse])
async def list_payouts(tutor_id: str, db: AsyncSession = Depends(get_db)):
    return await payout_service.list_payouts(db, tutor_id)


@router.patch("/{payout_id}/status", response_model=PayoutResponse)
async def update_status(
    payout_id: str, body: PayoutStatusUpdate, db: AsyncSession = Depends(get_db),
):
    return await payout_service.update_status(db, payout_id, body)
