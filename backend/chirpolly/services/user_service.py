"""User Service: profile upsert keyed by the external auth uid."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from chirpolly.core.timeutils import utc_now
from chirpolly.models.user import User
from chirpolly.schemas.user import UserUpsert
from chirpolly.services.lookup import get_or_404

logger = logging.getLogger(__name__)


async def upsert_user(db: AsyncSession, user_id: str, body: UserUpsert) -> User:
    """Create the profile on first sign-in, otherwise overwrite its fields."""
    user = await db.get(User, user_id)
    fields = body.model_dump()
    fields["role"] = body.role.value
    if user is None:
        user = User(id=user_id, **fields)
        db.add(user)
        logger.info("User created", extra={"user_id": user_id})
    else:
        for key, value in fields.items():
            setattr(user, key, value)
        user.last_active_at = utc_now()
    await db.commit()
    await db.refresh(user)
    return user


async def get_user(db: AsyncSession, user_id: str) -> User:
    return await get_or_404(db, User, user_id, "User")
