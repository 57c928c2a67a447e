"""Vocabulary routes: new words due at once, SM-2 reviews persisted."""

from datetime import datetime, timedelta, timezone

import pytest

from chirpolly.models.vocabulary_word import VocabularyWord


async def _add(client, word="ありがとう", user_id="student-1"):
    res = await client.post(f"/api/v1/users/{user_id}/vocabulary", json={
        "word": word, "transliteration": "arigatou", "meaning": "thank you", "language": "ja",
    })
    assert res.status_code == 201, res.text
    return res.json()


async def test_new_word_starts_with_defaults_and_is_due(client):
    word = await _add(client)
    assert word["easiness_factor"] == 2.5
    assert word["interval"] == 0
    assert word["repetitions"] == 0

    due = await client.get("/api/v1/users/student-1/vocabulary/due")
    assert [w["id"] for w in due.json()] == [word["id"]]


async def test_good_review_schedules_tomorrow(client):
    word = await _add(client)
    res = await client.post(f"/api/v1/vocabulary/{word['id']}/review", json={"rating": "good"})
    assert res.status_code == 200
    reviewed = res.json()
    assert reviewed["repetitions"] == 1
    assert reviewed["interval"] == 1
    assert reviewed["easiness_factor"] == pytest.approx(2.5)

    due = await client.get("/api/v1/users/student-1/vocabulary/due")
    assert due.json() == []


async def test_review_ladder_with_quality(client):
    word = await _add(client)
    url = f"/api/v1/vocabulary/{word['id']}/review"
    intervals = []
    for _ in range(3):
        res = await client.post(url, json={"quality": 5})
        intervals.append(res.json()["interval"])
    # EF climbs 2.6 -> 2.7 -> 2.8; third interval = round(6 * 2.8) = 17
    assert intervals == [1, 6, 17]


async def test_again_resets_progress(client):
    word = await _add(client)
    url = f"/api/v1/vocabulary/{word['id']}/review"
    await client.post(url, json={"quality": 5})
    await client.post(url, json={"quality": 5})
    res = await client.post(url, json={"rating": "again"})
    assert res.json()["repetitions"] == 0
    assert res.json()["interval"] == 1


async def test_quality_out_of_range_is_validation_error(client):
    word = await _add(client)
    res = await client.post(f"/api/v1/vocabulary/{word['id']}/review", json={"quality": 7})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_due_words_most_overdue_first(client, test_db):
    now = datetime.now(timezone.utc)
    for name, offset in (("soon", -1), ("later", 3), ("oldest", -10)):
        test_db.add(VocabularyWord(
            user_id="student-2", word=name, next_review_at=now + timedelta(days=offset),
        ))
    await test_db.commit()

    due = await client.get("/api/v1/users/student-2/vocabulary/due")
    assert [w["word"] for w in due.json()] == ["oldest", "soon"]


async def test_review_unknown_word_404(client):
    res = await client.post("/api/v1/vocabulary/missing/review", json={"rating": "easy"})
    assert res.status_code == 404
