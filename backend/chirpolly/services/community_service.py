"""Community Service: the social feed of posts, comments, and likes.

Invariants:
    - Feed is newest first, limited to the configured page size by default
    - Comments are listed oldest first; each one bumps the post's comments_count
    - toggle_like flips the (post, user) like; likes_count never drops below 0
    - Deleting a post deletes its comments and likes in the same commit
    - Post language: author's choice, else detected from content, else None

Design Decisions:
    - Counters are denormalized on the post, updated by the mutating call
"""

import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from chirpolly.core.detect_language import detect_language_code
from chirpolly.models.comment import Comment
from chirpolly.models.like import Like
from chirpolly.models.post import Post
from chirpolly.schemas.community import CommentCreate, PostCreate
from chirpolly.services.lookup import get_or_404

logger = logging.getLogger(__name__)


async def create_post(db: AsyncSession, body: PostCreate) -> Post:
    language = body.language or detect_language_code(body.content)
    post = Post(
        user_id=body.user_id,
        user_name=body.user_name or "Anonymous",
        user_avatar=body.user_avatar,
        content=body.content,
        image_url=body.image_url,
        language=language,
    )
    db.add(post)
    await db.commit()
    await db.refresh(post)
    logger.info("Post created", extra={"post_id": post.id, "user_id": body.user_id})
    return post


async def list_posts(db: AsyncSession, limit: int) -> list[Post]:
    result = await db.execute(
        select(Post).order_by(Post.created_at.desc()).limit(limit),
    )
    return list(result.scalars().all())


async def delete_post(db: AsyncSession, post_id: str) -> None:
    post = await get_or_404(db, Post, post_id, "Post")
    await db.execute(delete(Comment).where(Comment.post_id == post_id))
    await db.execute(delete(Like).where(Like.post_id == post_id))
    await db.delete(post)
    await db.commit()
    logger.info("Post deleted", extra={"post_id": post_id})


async def add_comment(db: AsyncSession, post_id: str, body: CommentCreate) -> Comment:
    post = await get_or_404(db, Post, post_id, "Post")
    comment = Comment(
        post_id=post.id,
        user_id=body.user_id,
        user_name=body.user_name or "Anonymous",
        user_avatar=body.user_avatar,
        content=body.content,
    )
    db.add(comment)
    post.comments_count += 1
    await db.commit()
    await db.refresh(comment)
    return comment


async def list_comments(db: AsyncSession, post_id: str) -> list[Comment]:
    await get_or_404(db, Post, post_id, "Post")
    result = await db.execute(
        select(Comment)
        .where(Comment.post_id == post_id)
        .order_by(Comment.created_at.asc())
    )
    return list(result.scalars().all())


async def toggle_like(db: AsyncSession, post_id: str, user_id: str) -> tuple[bool, int]:
    """Like or unlike; returns (liked, likes_count)."""
    post = await get_or_404(db, Post, post_id, "Post")
    existing = await _find_like(db, post_id, user_id)
    if existing is not None:
        await db.delete(existing)
        post.likes_count = max(0, post.likes_count - 1)
        liked = False
    else:
        db.add(Like(post_id=post_id, user_id=user_id))
        post.likes_count += 1
        liked = True
    await db.commit()
    return liked, post.likes_count


async def has_liked(db: AsyncSession, post_id: str, user_id: str) -> bool:
    return await _find_like(db, post_id, user_id) is not None


async def _find_like(db: AsyncSession, post_id: str, user_id: str) -> Like | None:
    result = await db.execute(
        select(Like).where(Like.post_id == post_id).where(Like.user_id == user_id),
    )
    return result.scalar_one_or_none()
