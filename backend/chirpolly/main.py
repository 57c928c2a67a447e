"""ChirPolly API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly, one router per resource
    - Global error handlers map ChirpollyError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Logging and database initialized on startup via the lifespan context manager
    - Demo tutors seeded on startup only when SEED_DEMO_DATA is set
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from chirpolly.api.error_handlers import register_error_handlers
from chirpolly.api.routes import (
    applications, bookings, community, conversations, health,
    notifications, payouts, tutors, users, vocabulary, voice,
)
from chirpolly.config import get_settings
from chirpolly.infrastructure.database import init_db
from chirpolly.infrastructure.observability import setup_logging
from chirpolly.seed import seed_demo_tutors

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.seed_demo_data:
        async with manager.session() as db:
            await seed_demo_tutors(db)
    logger.info("ChirPolly API started")
    yield
    await manager.dispose()
    logger.info("ChirPolly API shutting down")


app = FastAPI(title="ChirPolly API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(users.router)
app.include_router(tutors.router)
app.include_router(applications.router)
app.include_router(bookings.router)
app.include_router(conversations.router)
app.include_router(community.router)
app.include_router(vocabulary.router)
app.include_router(payouts.router)
app.include_router(notifications.router)
app.include_router(voice.router)

register_error_handlers(app)
