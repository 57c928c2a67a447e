"""Tutor marketplace and tutor application routes."""

from datetime import timedelta

import pytest

from chirpolly.models.tutor_profile import TutorProfile
from chirpolly.models.user import User


def _profile(id, rating, *, online=True, verified=True, teaching=("es",), native=("es",)):
    return TutorProfile(
        id=id, user_id=f"user-{id}", name=id.title(), email=f"{id}@example.com",
        native_languages=list(native), teaching_languages=list(teaching),
        specialty="Conversation", bio="Experienced tutor.", hourly_rate=30.0,
        rating=rating, is_online=online, is_verified=verified,
    )


@pytest.fixture
async def marketplace(test_db, tutor):
    test_db.add_all([
        _profile("ana", 4.5, teaching=("es", "en")),
        _profile("luis", 4.95, online=False),
        _profile("hidden", 5.0, verified=False),
        _profile("kenji", 4.2, teaching=("ja",), native=("ja",)),
    ])
    await test_db.commit()


# --- Listing ------------------------------------------------------------------

async def test_list_verified_only_highest_rated_first(client, marketplace):
    res = await client.get("/api/v1/tutors")
    assert res.status_code == 200
    assert [t["id"] for t in res.json()] == ["luis", "tutor-1", "ana", "kenji"]


async def test_filter_by_language_matches_native_or_teaching(client, marketplace):
    res = await client.get("/api/v1/tutors", params={"language": "en"})
    assert [t["id"] for t in res.json()] == ["tutor-1", "ana"]


async def test_filter_online_and_min_rating(client, marketplace):
    res = await client.get("/api/v1/tutors", params={"online_only": True, "min_rating": 4.5})
    assert [t["id"] for t in res.json()] == ["tutor-1", "ana"]


async def test_min_rating_out_of_range(client):
    res = await client.get("/api/v1/tutors", params={"min_rating": 6})
    assert res.status_code == 400


# --- Profiles -----------------------------------------------------------------

async def test_get_tutor(client, tutor):
    res = await client.get("/api/v1/tutors/tutor-1")
    assert res.status_code == 200
    assert res.json()["name"] == "Elodie Moreau"


async def test_get_unknown_tutor_404(client):
    res = await client.get("/api/v1/tutors/nobody")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_by_user(client, tutor):
    res = await client.get("/api/v1/tutors/by-user/tutor-user-1")
    assert res.json()["id"] == "tutor-1"

    missing = await client.get("/api/v1/tutors/by-user/student-1")
    assert missing.status_code == 404


async def test_toggle_online(client, tutor):
    res = await client.patch("/api/v1/tutors/tutor-1/online", json={"is_online": False})
    assert res.status_code == 200
    assert res.json()["is_online"] is False

    online = await client.get("/api/v1/tutors", params={"online_only": True})
    assert online.json() == []


# --- Bookable times -----------------------------------------------------------

async def test_slots_on_a_working_day(client, tutor, next_monday):
    res = await client.get(
        "/api/v1/tutors/tutor-1/slots", params={"date": next_monday.date().isoformat()},
    )
    assert res.status_code == 200
    times = res.json()["times"]
    assert times[0] == "09:00"
    assert times[-1] == "16:30"
    assert len(times) == 16


async def test_no_slots_on_sunday(client, tutor, next_monday):
    sunday = next_monday.date() - timedelta(days=1)
    res = await client.get(
        "/api/v1/tutors/tutor-1/slots", params={"date": sunday.isoformat()},
    )
    assert res.json()["times"] == []


async def test_reviews_empty_for_new_tutor(client, tutor):
    res = await client.get("/api/v1/tutors/tutor-1/reviews")
    assert res.json() == []


# --- Applications -------------------------------------------------------------

APPLICATION = {
    "user_id": "student-9",
    "name": "  Marta Silva ",
    "email": "marta@example.com",
    "native_languages": ["pt"],
    "teaching_languages": ["pt", "en"],
    "specialty": "Brazilian Portuguese",
    "bio": "Olá! I teach everyday Portuguese through music.",
    "hourly_rate": 35,
    "availability": [
        {"day_of_week": 2, "start_time": "18:00", "end_time": "21:00", "timezone": "America/Sao_Paulo"},
    ],
}


async def test_submit_application(client):
    res = await client.post("/api/v1/tutor-applications", json=APPLICATION)
    assert res.status_code == 201
    body = res.json()
    assert body["status"] == "pending"
    assert body["name"] == "Marta Silva"
    assert body["reviewed_at"] is None


async def test_second_pending_application_conflicts(client):
    await client.post("/api/v1/tutor-applications", json=APPLICATION)
    res = await client.post("/api/v1/tutor-applications", json=APPLICATION)
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "APPLICATION_EXISTS"


async def test_application_validation(client):
    res = await client.post(
        "/api/v1/tutor-applications",
        json={**APPLICATION, "hourly_rate": 0, "bio": "short"},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_approval_creates_verified_tutor_and_upgrades_role(client, test_db):
    test_db.add(User(id="student-9", email="marta@example.com", role="student"))
    await test_db.commit()

    app_id = (await client.post("/api/v1/tutor-applications", json=APPLICATION)).json()["id"]
    res = await client.post(
        f"/api/v1/tutor-applications/{app_id}/decision",
        json={"decision": "approved", "reviewed_by": "admin-1"},
    )
    assert res.status_code == 200
    assert res.json()["status"] == "approved"
    assert res.json()["reviewed_by"] == "admin-1"

    profile = (await client.get("/api/v1/tutors/by-user/student-9")).json()
    assert profile["is_verified"] is True
    assert profile["hourly_rate"] == 35
    assert profile["teaching_languages"] == ["pt", "en"]

    user = (await client.get("/api/v1/users/student-9")).json()
    assert user["role"] == "both"


async def test_decided_application_is_terminal(client):
    app_id = (await client.post("/api/v1/tutor-applications", json=APPLICATION)).json()["id"]
    url = f"/api/v1/tutor-applications/{app_id}/decision"
    await client.post(url, json={"decision": "rejected", "reviewed_by": "admin-1"})
    res = await client.post(url, json={"decision": "approved", "reviewed_by": "admin-1"})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_STATUS_TRANSITION"


async def test_rejected_applicant_may_reapply(client):
    first = (await client.post("/api/v1/tutor-applications", json=APPLICATION)).json()["id"]
    await client.post(
        f"/api/v1/tutor-applications/{first}/decision",
        json={"decision": "rejected", "reviewed_by": "admin-1"},
    )
    res = await client.post("/api/v1/tutor-applications", json=APPLICATION)
    assert res.status_code == 201

    latest = await client.get("/api/v1/tutor-applications/by-user/student-9")
    assert latest.json()["id"] == res.json()["id"]
    assert latest.json()["status"] == "pending"
