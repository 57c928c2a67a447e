"""Tutor Application routes: apply, check status, decide."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from chirpolly.infrastructure.database import get_db
from chirpolly.schemas.tutor import (
    ApplicationDecision, TutorApplicationCreate, TutorApplicationResponse,
)
from chirpolly.services import application_service

router = APIRouter(prefix="/api/v1/tutor-applications", tags=["tutor-applications"])


@router.post(
    "", response_model=TutorApplicationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_application(
    body: TutorApplicationCreate, db: AsyncSession = Depends(get_db),
):
    return await application_service.submit_application(db, body)


@router.get("/by-user/{user_id}", response_model=TutorApplicationResponse)
async def latest_application(user_id: str, db: AsyncSession = Depends(get_db)):
    """The user's most recent application."""
    return await application_service.latest_application(db, user_id)


@router.post("/{application_id}/decision", response_model=TutorApplicationResponse)
async def decide_application(
    application_id: str,
    body: ApplicationDecision,
    db: AsyncSession = Depends(get_db),
):
    """Approve or reject; approval creates a verified tutor profile."""
    return await application_service.decide_application(
        db, application_id, body.decision, body.reviewed_by,
    )
