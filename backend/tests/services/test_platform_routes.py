"""Health probes, user profiles, notifications, and demo seeding."""

from sqlalchemy import func, select

from chirpolly.core.domain_types import NotificationType
from chirpolly.models.tutor_profile import TutorProfile
from chirpolly.seed import DEMO_TUTORS, seed_demo_tutors
from chirpolly.services.notification_service import notify


# --- Health -------------------------------------------------------------------

async def test_liveness(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["service"] == "chirpolly-api"


async def test_readiness_with_database(client):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"


# --- Users --------------------------------------------------------------------

PROFILE = {
    "email": "sam@example.com",
    "display_name": "Sam",
    "learning_languages": ["ja"],
    "current_levels": {"ja": "beginner"},
    "timezone": "Europe/London",
}


async def test_upsert_creates_then_updates(client):
    created = await client.put("/api/v1/users/uid-1", json=PROFILE)
    assert created.status_code == 200
    assert created.json()["role"] == "student"
    assert created.json()["preferred_currency"] == "USD"

    updated = await client.put(
        "/api/v1/users/uid-1", json={**PROFILE, "display_name": "Samira"},
    )
    assert updated.json()["display_name"] == "Samira"
    assert updated.json()["created_at"] == created.json()["created_at"]


async def test_invalid_email_rejected(client):
    res = await client.put("/api/v1/users/uid-1", json={**PROFILE, "email": "not-an-email"})
    assert res.status_code == 400


async def test_unknown_user_404(client):
    res = await client.get("/api/v1/users/nobody")
    assert res.status_code == 404


# --- Notifications ------------------------------------------------------------

async def _seed_notifications(test_db):
    notify(test_db, "uid-1", NotificationType.BOOKING_CONFIRMED, "Booking confirmed")
    notify(test_db, "uid-1", NotificationType.MESSAGE_RECEIVED, "New message", "Hi!")
    notify(test_db, "uid-2", NotificationType.REVIEW_RECEIVED, "New review")
    await test_db.commit()


async def test_notifications_are_per_user(client, test_db):
    await _seed_notifications(test_db)
    res = await client.get("/api/v1/notifications", params={"user_id": "uid-1"})
    assert {n["type"] for n in res.json()} == {"booking_confirmed", "message_received"}
    assert all(n["read"] is False for n in res.json())


async def test_mark_notification_read(client, test_db):
    await _seed_notifications(test_db)
    first = (await client.get("/api/v1/notifications", params={"user_id": "uid-1"})).json()[0]

    res = await client.post(f"/api/v1/notifications/{first['id']}/read")
    assert res.json()["read"] is True

    unread = await client.get(
        "/api/v1/notifications", params={"user_id": "uid-1", "unread_only": True},
    )
    assert first["id"] not in [n["id"] for n in unread.json()]
    assert len(unread.json()) == 1


# --- Demo seed ----------------------------------------------------------------

async def test_seed_fills_empty_marketplace_once(client, test_db):
    assert await seed_demo_tutors(test_db) == len(DEMO_TUTORS)
    assert await seed_demo_tutors(test_db) == 0

    count = await test_db.scalar(select(func.count()).select_from(TutorProfile))
    assert count == len(DEMO_TUTORS)

    listed = await client.get("/api/v1/tutors")
    assert [t["name"] for t in listed.json()] == ["Sofia Rossi", "Elodie Moreau", "Kenji Tanaka"]


async def test_seed_skips_when_tutors_exist(test_db, tutor):
    assert await seed_demo_tutors(test_db) == 0
