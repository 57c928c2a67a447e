"""Initial schema: users, tutors, bookings, messaging, community, payouts, vocabulary.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at", sa.DateTime(timezone=True),
        nullable=False, server_default=sa.func.now(),
    )


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(128), primary_key=True),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("display_name", sa.String(200), nullable=False, server_default=""),
        sa.Column("photo_url", sa.String(1000), nullable=True),
        sa.Column("role", sa.String(10), nullable=False, server_default="student"),
        sa.Column("learning_languages", sa.JSON, nullable=False),
        sa.Column("current_levels", sa.JSON, nullable=False),
        sa.Column("timezone", sa.String(64), nullable=False, server_default="UTC"),
        sa.Column("preferred_currency", sa.String(3), nullable=False, server_default="USD"),
        _created_at(),
        sa.Column("last_active_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "tutor_profiles",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("user_id", sa.String(128), nullable=False, index=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("photo_url", sa.String(1000), nullable=True),
        sa.Column("native_languages", sa.JSON, nullable=False),
        sa.Column("teaching_languages", sa.JSON, nullable=False),
        sa.Column("specialty", sa.String(300), nullable=False, server_default=""),
        sa.Column("bio", sa.Text, nullable=False, server_default=""),
        sa.Column("hourly_rate", sa.Float, nullable=False),
        sa.Column("rating", sa.Float, nullable=False, server_default="0"),
        sa.Column("total_sessions", sa.Integer, nullable=False, server_default="0"),
        sa.Column("total_reviews", sa.Integer, nullable=False, server_default="0"),
        sa.Column("is_online", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("is_verified", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("availability", sa.JSON, nullable=False),
        _created_at(),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "tutor_applications",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("user_id", sa.String(128), nullable=False, index=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("native_languages", sa.JSON, nullable=False),
        sa.Column("teaching_languages", sa.JSON, nullable=False),
        sa.Column("specialty", sa.String(300), nullable=False, server_default=""),
        sa.Column("bio", sa.Text, nullable=False, server_default=""),
        sa.Column("hourly_rate", sa.Float, nullable=False),
        sa.Column("availability", sa.JSON, nullable=False),
        sa.Column("status", sa.String(10), nullable=False, server_default="pending"),
        _created_at(),
        sa.Column("reviewed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("reviewed_by", sa.String(128), nullable=True),
    )

    op.create_table(
        "bookings",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("student_id", sa.String(128), nullable=False, index=True),
        sa.Column("student_name", sa.String(200), nullable=False),
        sa.Column("tutor_id", sa.String(64), nullable=False, index=True),
        sa.Column("tutor_name", sa.String(200), nullable=False),
        sa.Column("scheduled_at", sa.DateTime(timezone=True), nullable=False, index=True),
        sa.Column("duration", sa.Integer, nullable=False),
        sa.Column("language", sa.String(10), nullable=True),
        sa.Column("price", sa.Float, nullable=False),
        sa.Column("platform_fee", sa.Float, nullable=False, server_default="0"),
        sa.Column("tutor_payout", sa.Float, nullable=False, server_default="0"),
        sa.Column("currency", sa.String(3), nullable=False, server_default="USD"),
        sa.Column("status", sa.String(10), nullable=False, server_default="pending"),
        sa.Column("notes", sa.Text, nullable=False, server_default=""),
        sa.Column("meeting_link", sa.String(1000), nullable=True),
        sa.Column("cancelled_by", sa.String(10), nullable=True),
        sa.Column("cancellation_reason", sa.Text, nullable=True),
        sa.Column("tutor_notes", sa.Text, nullable=True),
        sa.Column("vocabulary_to_review", sa.JSON, nullable=False),
        sa.Column("payout_id", sa.String(64), nullable=True, index=True),
        _created_at(),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("confirmed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("cancelled_at", sa.DateTime(timezone=True), nullable=True),
    )

    op.create_table(
        "reviews",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("booking_id", sa.String(64), nullable=False, unique=True),
        sa.Column("tutor_id", sa.String(64), nullable=False, index=True),
        sa.Column("student_id", sa.String(128), nullable=False),
        sa.Column("student_name", sa.String(200), nullable=False),
        sa.Column("rating", sa.Integer, nullable=False),
        sa.Column("comment", sa.Text, nullable=False, server_default=""),
        sa.Column("language", sa.String(10), nullable=True),
        sa.Column("was_verified_session", sa.Boolean, nullable=False, server_default="true"),
        _created_at(),
    )

    op.create_table(
        "conversations",
        sa.Column("id", sa.String(300), primary_key=True),
        sa.Column("tutor_id", sa.String(128), nullable=False, index=True),
        sa.Column("student_id", sa.String(128), nullable=False, index=True),
        sa.Column("last_message_text", sa.Text, nullable=True),
        sa.Column("last_message_sender", sa.String(128), nullable=True),
        sa.Column("last_message_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("unread_counts", sa.JSON, nullable=False),
        _created_at(),
    )

    op.create_table(
        "messages",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column(
            "conversation_id", sa.String(300),
            sa.ForeignKey("conversations.id"), nullable=False, index=True,
        ),
        sa.Column("sender_id", sa.String(128), nullable=False),
        sa.Column("sender_name", sa.String(200), nullable=False),
        sa.Column("text", sa.Text, nullable=False),
        sa.Column("read", sa.Boolean, nullable=False, server_default="false"),
        _created_at(),
    )

    op.create_table(
        "posts",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("user_id", sa.String(128), nullable=False, index=True),
        sa.Column("user_name", sa.String(200), nullable=False),
        sa.Column("user_avatar", sa.String(1000), nullable=True),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column("image_url", sa.String(1000), nullable=True),
        sa.Column("language", sa.String(10), nullable=True),
        sa.Column("likes_count", sa.Integer, nullable=False, server_default="0"),
        sa.Column("comments_count", sa.Integer, nullable=False, server_default="0"),
        sa.Column(
            "created_at", sa.DateTime(timezone=True),
            nullable=False, server_default=sa.func.now(), index=True,
        ),
    )

    op.create_table(
        "comments",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column(
            "post_id", sa.String(64),
            sa.ForeignKey("posts.id", ondelete="CASCADE"), nullable=False, index=True,
        ),
        sa.Column("user_id", sa.String(128), nullable=False),
        sa.Column("user_name", sa.String(200), nullable=False),
        sa.Column("user_avatar", sa.String(1000), nullable=True),
        sa.Column("content", sa.Text, nullable=False),
        _created_at(),
    )

    op.create_table(
        "likes",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column(
            "post_id", sa.String(64),
            sa.ForeignKey("posts.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("user_id", sa.String(128), nullable=False),
        _created_at(),
        sa.UniqueConstraint("post_id", "user_id", name="uq_likes_post_user"),
    )

    op.create_table(
        "payouts",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("tutor_id", sa.String(64), nullable=False, index=True),
        sa.Column("amount", sa.Float, nullable=False),
        sa.Column("currency", sa.String(3), nullable=False, server_default="USD"),
        sa.Column("status", sa.String(12), nullable=False, server_default="pending"),
        sa.Column("booking_ids", sa.JSON, nullable=False),
        sa.Column("payout_method", sa.String(20), nullable=False),
        sa.Column("payout_destination", sa.String(20), nullable=True),
        sa.Column("failure_reason", sa.Text, nullable=True),
        _created_at(),
        sa.Column("processed_at", sa.DateTime(timezone=True), nullable=True),
    )

    op.create_table(
        "notifications",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("user_id", sa.String(128), nullable=False, index=True),
        sa.Column("type", sa.String(30), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("body", sa.Text, nullable=False, server_default=""),
        sa.Column("read", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("action_url", sa.String(1000), nullable=True),
        _created_at(),
    )

    op.create_table(
        "vocabulary_words",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("user_id", sa.String(128), nullable=False, index=True),
        sa.Column("word", sa.String(200), nullable=False),
        sa.Column("transliteration", sa.String(200), nullable=False, server_default=""),
        sa.Column("meaning", sa.String(500), nullable=False, server_default=""),
        sa.Column("audio_prompt", sa.String(500), nullable=False, server_default=""),
        sa.Column("language", sa.String(10), nullable=True),
        sa.Column("easiness_factor", sa.Float, nullable=False, server_default="2.5"),
        sa.Column("interval", sa.Integer, nullable=False, server_default="0"),
        sa.Column("repetitions", sa.Integer, nullable=False, server_default="0"),
        sa.Column("next_review_at", sa.DateTime(timezone=True), nullable=True, index=True),
        _created_at(),
    )


def downgrade() -> None:
    for table in (
        "vocabulary_words", "notifications", "payouts", "likes", "comments",
        "posts", "messages", "conversations", "reviews", "bookings",
        "tutor_applications", "tutor_profiles", "users",
    ):
        op.drop_table(table)
