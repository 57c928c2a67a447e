"""Vocabulary routes: a user's SM-2 flashcard deck."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from chirpolly.infrastructure.database import get_db
from chirpolly.schemas.vocabulary import (
    ReviewSubmit, VocabularyWordCreate, VocabularyWordResponse,
)
from chirpolly.services import vocabulary_service

router = APIRouter(prefix="/api/v1", tags=["vocabulary"])


@router.post(
    "/users/{user_id}/vocabulary", response_model=VocabularyWordResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_word(
    user_id: str, body: VocabularyWordCreate, db: AsyncSession = Depends(get_db),
):
    return await vocabulary_service.add_word(db, user_id, body)


@router.get("/users/{user_id}/vocabulary", response_model=list[VocabularyWordResponse])
async def list_words(user_id: str, db: AsyncSession = Depends(get_db)):
    return await vocabulary_service.list_words(db, user_id)


@router.get(
    "/users/{user_id}/vocabulary/due", response_model=list[VocabularyWordResponse],
)
async def due_words(user_id: str, db: AsyncSession = Depends(get_db)):
    """Words due now, most overdue first."""
    return await vocabulary_service.due_words(db, user_id)


@router.post("/vocabulary/{word_id}/review", response_model=VocabularyWordResponse)
async def review_word(
    word_id: str, body: ReviewSubmit, db: AsyncSession = Depends(get_db),
):
    """Apply one SM-2 review (button rating or raw 0-5 quality)."""
    return await vocabulary_service.review_word(db, word_id, body)
