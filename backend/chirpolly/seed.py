"""Demo Data: three verified tutors for an empty marketplace.

Invariants:
    - Seeding is a no-op when any tutor profile already exists
    - Ids are stable ("demo-tutor-1".."demo-tutor-3") so links survive re-seeding

Usage:
    python -m chirpolly.seed
"""

import asyncio
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from chirpolly.config import get_settings
from chirpolly.db.session import create_session_factory
from chirpolly.infrastructure.observability import setup_logging
from chirpolly.models.tutor_profile import TutorProfile

logger = logging.getLogger(__name__)


def _weekly(days: tuple[int, ...], start: str, end: str, tz: str) -> list[dict]:
    return [
        {"day_of_week": d, "start_time": start, "end_time": end, "timezone": tz}
        for d in days
    ]


DEMO_TUTORS = [
    {
        "id": "demo-tutor-1",
        "user_id": "demo-user-1",
        "name": "Elodie Moreau",
        "email": "elodie@example.com",
        "photo_url": "https://picsum.photos/seed/tutor1/200",
        "native_languages": ["fr"],
        "teaching_languages": ["fr", "en"],
        "specialty": "Conversational French & Accent Correction",
        "bio": (
            "Bonjour! Let's chat about French culture, food, and film. "
            "I can help you sound like a true Parisian!"
        ),
        "hourly_rate": 40.0,
        "rating": 4.9,
        "total_sessions": 127,
        "total_reviews": 45,
        "is_online": True,
        "availability": _weekly((1, 3, 5), "09:00", "17:00", "Europe/Paris"),
    },
    {
        "id": "demo-tutor-2",
        "user_id": "demo-user-2",
        "name": "Kenji Tanaka",
        "email": "kenji@example.com",
        "photo_url": "https://picsum.photos/seed/tutor2/200",
        "native_languages": ["ja"],
        "teaching_languages": ["ja", "en"],
        "specialty": "Beginner Japanese & JLPT N5 Prep",
        "bio": (
            "こんにちは！I make learning Japanese fun and easy, focusing on "
            "practical phrases for your first trip to Japan."
        ),
        "hourly_rate": 50.0,
        "rating": 4.8,
        "total_sessions": 203,
        "total_reviews": 78,
        "is_online": True,
        "availability": _weekly((2, 4), "10:00", "18:00", "Asia/Tokyo"),
    },
    {
        "id": "demo-tutor-3",
        "user_id": "demo-user-3",
        "name": "Sofia Rossi",
        "email": "sofia@example.com",
        "photo_url": "https://picsum.photos/seed/tutor3/200",
        "native_languages": ["es"],
        "teaching_languages": ["es", "en"],
        "specialty": "Business Spanish & DELE Exam Prep",
        "bio": (
            "Hola! I have 5 years of experience helping professionals master "
            "Spanish for the workplace. Let's elevate your career."
        ),
        "hourly_rate": 60.0,
        "rating": 5.0,
        "total_sessions": 312,
        "total_reviews": 92,
        "is_online": False,
        "availability": _weekly((1, 3, 5), "14:00", "20:00", "Europe/Madrid"),
    },
]


async def seed_demo_tutors(db: AsyncSession) -> int:
    """Insert the demo tutors into an empty marketplace. Returns rows added."""
    result = await db.execute(select(TutorProfile.id).limit(1))
    if result.first() is not None:
        logger.info("Tutors present, demo seed skipped")
        return 0
    for data in DEMO_TUTORS:
        db.add(TutorProfile(is_verified=True, **data))
    await db.commit()
    logger.info(f"Seeded {len(DEMO_TUTORS)} demo tutors")
    return len(DEMO_TUTORS)


async def _run() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    session_factory = create_session_factory(settings.database_url)
    async with session_factory() as db:
        await seed_demo_tutors(db)
    await session_factory.kw["bind"].dispose()


if __name__ == "__main__":
    asyncio.run(_run())
