"""Community Feed routes: posts, comments, likes.

Invariants:
    - GET /posts returns newest first, feed_page_size posts by default
    - DELETE /posts/{id} also removes the post's comments and likes
"""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from chirpolly.config import Settings, get_settings
from chirpolly.infrastructure.database import get_db
from chirpolly.schemas.community import (
    CommentCreate, CommentResponse, LikeStatusResponse,
    LikeToggle, LikeToggleResponse, PostCreate, PostResponse,
)
from chirpolly.services import community_service

router = APIRouter(prefix="/api/v1/posts", tags=["community"])


@router.post(
    "", response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_post(body: PostCreate, db: AsyncSession = Depends(get_db)):
    return await community_service.create_post(db, body)


@router.get("", response_model=list[PostResponse])
async def list_posts(
    limit: int | None = Query(None, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    return await community_service.list_posts(db, limit or settings.feed_page_size)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(post_id: str, db: AsyncSession = Depends(get_db)):
    await community_service.delete_post(db, post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{post_id}/comments", response_model=list[CommentResponse])
async def list_comments(post_id: str, db: AsyncSession = Depends(get_db)):
    return await community_service.list_comments(db, post_id)


@router.post(
    "/{post_id}/comments", response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    post_id: str, body: CommentCreate, db: AsyncSession = Depends(get_db),
):
    return await community_service.add_comment(db, post_id, body)


@router.post("/{post_id}/likes/toggle", response_model=LikeToggleResponse)
async def toggle_like(
    post_id: str, body: LikeToggle, db: AsyncSession = Depends(get_db),
):
    liked, likes_count = await community_service.toggle_like(db, post_id, body.user_id)
    return LikeToggleResponse(liked=liked, likes_count=likes_count)


@router.get("/{post_id}/likes/{user_id}", response_model=LikeStatusResponse)
async def has_liked(post_id: str, user_id: str, db: AsyncSession = Depends(get_db)):
    return LikeStatusResponse(
        liked=await community_service.has_liked(db, post_id, user_id),
    )
