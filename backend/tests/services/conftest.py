"""Service test fixtures: async DB, FastAPI test client, fake AI and speech gateways.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB session
    - db_manager patched so the readiness probe sees the test engine
    - Voice routes get FakeTutorClient / FakeSpeechGateway via dependency overrides

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - Fakes record their calls and can be told to fail, no SDK objects needed
"""

from datetime import datetime, timedelta, timezone

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

import chirpolly.infrastructure.database as db_module
from chirpolly.api.routes.voice import get_speech_gateway, get_tutor_client
from chirpolly.core.domain_types import VoiceGender
from chirpolly.db.base import Base
from chirpolly.infrastructure.database import DatabaseSessionManager, get_db
from chirpolly.main import app
from chirpolly.models.tutor_profile import TutorProfile
import chirpolly.models  # noqa: F401


# -- Fake gateways -------------------------------------------------------------


class _TextBlock:
    type = "text"

    def __init__(self, text: str):
        self.text = text


class _Response:
    def __init__(self, text: str | None):
        self.content = [] if text is None else [_TextBlock(text)]


class FakeTutorClient:
    """Stands in for ResilientAnthropicClient.create_message."""

    def __init__(self, reply: str | None = "Bonjour! Comment ça va?"):
        self.reply = reply
        self.error: Exception | None = None
        self.calls: list[dict] = []

    async def create_message(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return _Response(self.reply)


class FakeSpeechGateway:
    """Stands in for GoogleSpeechGateway."""

    def __init__(self, transcript: str = "Hello Polly", audio: bytes = b"ID3fake-mp3"):
        self.transcript = transcript
        self.audio = audio
        self.transcribe_error: Exception | None = None
        self.synthesize_error: Exception | None = None
        self.transcribed: list[tuple[bytes, str]] = []
        self.synthesized: list[tuple[str, str, VoiceGender]] = []

    async def transcribe(self, audio: bytes, language_code: str) -> str:
        self.transcribed.append((audio, language_code))
        if self.transcribe_error is not None:
            raise self.transcribe_error
        return self.transcript

    async def synthesize(
        self, text: str, language_code: str, voice_gender: VoiceGender,
    ) -> bytes:
        self.synthesized.append((text, language_code, voice_gender))
        if self.synthesize_error is not None:
            raise self.synthesize_error
        return self.audio


# -- Database + client ---------------------------------------------------------


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def fake_tutor_client():
    return FakeTutorClient()


@pytest.fixture
def fake_speech():
    return FakeSpeechGateway()


@pytest.fixture
async def client(test_engine, test_session_factory, fake_tutor_client, fake_speech):
    """FastAPI test client with DB and external gateways overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_tutor_client] = lambda: fake_tutor_client
    app.dependency_overrides[get_speech_gateway] = lambda: fake_speech

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


# -- Seed data -----------------------------------------------------------------


@pytest.fixture
def next_monday() -> datetime:
    """10:00 UTC on a Monday at least two days from now."""
    base = datetime.now(timezone.utc).replace(
        hour=10, minute=0, second=0, microsecond=0,
    ) + timedelta(days=2)
    return base + timedelta(days=(0 - base.weekday()) % 7)


@pytest.fixture
async def tutor(test_db):
    """Verified tutor, 40/h, Monday-Friday 09:00-17:00 UTC."""
    profile = TutorProfile(
        id="tutor-1",
        user_id="tutor-user-1",
        name="Elodie Moreau",
        email="elodie@example.com",
        native_languages=["fr"],
        teaching_languages=["fr", "en"],
        specialty="Conversational French",
        bio="Bonjour! Let's talk about French film.",
        hourly_rate=40.0,
        rating=4.9,
        total_sessions=10,
        total_reviews=4,
        is_online=True,
        is_verified=True,
        availability=[
            {"day_of_week": d, "start_time": "09:00", "end_time": "17:00", "timezone": "UTC"}
            for d in (1, 2, 3, 4, 5)
        ],
    )
    test_db.add(profile)
    await test_db.commit()
    await test_db.refresh(profile)
    return profile
