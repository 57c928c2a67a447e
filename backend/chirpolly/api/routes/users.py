"""User profile routes."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from chirpolly.infrastructure.database import get_db
from chirpolly.schemas.user import UserResponse, UserUpsert
from chirpolly.services import user_service

router = APIRouter(prefix="/api/v1/users", tags=["users"])


@router.put("/{user_id}", response_model=UserResponse)
async def upsert_user(
    user_id: str, body: UserUpsert, db: AsyncSession = Depends(get_db),
):
    """Create or update the profile for an authenticated user id."""
    return await user_service.upsert_user(db, user_id, body)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: str, db: AsyncSession = Depends(get_db)):
    return await user_service.get_user(db, user_id)
