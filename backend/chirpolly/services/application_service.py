"""Tutor Application Service: submit, look up, and decide tutor applications.

Invariants:
    - A user with a pending or approved application cannot submit another
    - Decisions follow core/status_rules.py (pending -> approved | rejected)
    - Approval creates a verified TutorProfile and gives the user the tutor role
      (students become "both")
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from chirpolly.core.domain_types import ApplicationStatus, UserRole
from chirpolly.core.errors import ApplicationExistsError, ResourceNotFoundError
from chirpolly.core.status_rules import check_application_transition
from chirpolly.core.timeutils import utc_now
from chirpolly.models.tutor_application import TutorApplication
from chirpolly.models.tutor_profile import TutorProfile
from chirpolly.models.user import User
from chirpolly.schemas.tutor import TutorApplicationCreate
from chirpolly.services.lookup import get_or_404

logger = logging.getLogger(__name__)

_BLOCKING_STATUSES = (ApplicationStatus.PENDING.value, ApplicationStatus.APPROVED.value)


async def submit_application(
    db: AsyncSession, body: TutorApplicationCreate,
) -> TutorApplication:
    result = await db.execute(
        select(TutorApplication)
        .where(TutorApplication.user_id == body.user_id)
        .where(TutorApplication.status.in_(_BLOCKING_STATUSES))
        .limit(1)
    )
    existing = result.scalar_one_or_none()
    if existing is not None:
        raise ApplicationExistsError(body.user_id, existing.status)

    fields = body.model_dump()
    application = TutorApplication(**fields)
    db.add(application)
    await db.commit()
    await db.refresh(application)
    logger.info("Tutor application submitted", extra={"user_id": body.user_id})
    return application


async def latest_application(db: AsyncSession, user_id: str) -> TutorApplication:
    result = await db.execute(
        select(TutorApplication)
        .where(TutorApplication.user_id == user_id)
        .order_by(TutorApplication.created_at.desc())
        .limit(1)
    )
    application = result.scalar_one_or_none()
    if application is None:
        raise ResourceNotFoundError("Tutor application for user", user_id)
    return application


async def decide_application(
    db: AsyncSession, application_id: str, decision: str, reviewed_by: str,
) -> TutorApplication:
    application = await get_or_404(
        db, TutorApplication, application_id, "Tutor application",
    )
    new_status = check_application_transition(application.status, decision)
    application.status = new_status.value
    application.reviewed_at = utc_now()
    application.reviewed_by = reviewed_by

    if new_status == ApplicationStatus.APPROVED:
        db.add(_profile_from_application(application))
        await _grant_tutor_role(db, application.user_id)

    await db.commit()
    await db.refresh(application)
    logger.info(
        f"Tutor application {new_status.value}",
        extra={"user_id": application.user_id},
    )
    return application


def _profile_from_application(application: TutorApplication) -> TutorProfile:
    return TutorProfile(
        user_id=application.user_id,
        name=application.name,
        email=application.email,
        native_languages=list(application.native_languages),
        teaching_languages=list(application.teaching_languages),
        specialty=application.specialty,
        bio=application.bio,
        hourly_rate=application.hourly_rate,
        availability=list(application.availability),
        is_verified=True,
    )


async def _grant_tutor_role(db: AsyncSession, user_id: str) -> None:
    user = await db.get(User, user_id)
    if user is None:
        return
    if user.role == UserRole.STUDENT.value:
        user.role = UserRole.BOTH.value
