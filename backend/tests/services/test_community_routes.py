"""Community feed routes: posts, comments, likes, deletion cascade.

Invariants:
    - Feed newest first, default page of 20
    - toggle-like twice returns to the original state; likes_count never negative
    - Deleting a post removes its comments and likes
"""

from datetime import datetime, timedelta, timezone

from sqlalchemy import func, select

from chirpolly.models.comment import Comment
from chirpolly.models.like import Like
from chirpolly.models.post import Post


async def _post(client, content="Just finished my first lesson in Japanese!", **extra):
    res = await client.post("/api/v1/posts", json={
        "user_id": "user-1", "user_name": "Sam", "content": content, **extra,
    })
    assert res.status_code == 201, res.text
    return res.json()


# --- Posts --------------------------------------------------------------------

async def test_create_post_defaults_counters(client):
    post = await _post(client, language="ja")
    assert post["likes_count"] == 0
    assert post["comments_count"] == 0
    assert post["language"] == "ja"


async def test_post_language_detected_when_missing(client):
    post = await _post(
        client,
        "Hoy practiqué pedir un café en español y el camarero entendió todo lo que dije.",
    )
    assert post["language"] == "es"


async def test_blank_post_rejected(client):
    res = await client.post("/api/v1/posts", json={"user_id": "u", "content": "   "})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_feed_is_newest_first_and_limited(client, test_db):
    base = datetime(2026, 1, 1, tzinfo=timezone.utc)
    for i in range(25):
        test_db.add(Post(
            user_id="user-1", user_name="Sam", content=f"post {i}",
            created_at=base + timedelta(minutes=i),
        ))
    await test_db.commit()

    res = await client.get("/api/v1/posts")
    posts = res.json()
    assert len(posts) == 20
    assert posts[0]["content"] == "post 24"
    assert posts[-1]["content"] == "post 5"

    limited = await client.get("/api/v1/posts", params={"limit": 3})
    assert [p["content"] for p in limited.json()] == ["post 24", "post 23", "post 22"]


# --- Comments -----------------------------------------------------------------

async def test_comments_oldest_first_and_counted(client):
    post = await _post(client)
    for text in ("first", "second"):
        res = await client.post(f"/api/v1/posts/{post['id']}/comments", json={
            "user_id": "user-2", "user_name": "Kim", "content": text,
        })
        assert res.status_code == 201

    comments = await client.get(f"/api/v1/posts/{post['id']}/comments")
    assert [c["content"] for c in comments.json()] == ["first", "second"]

    feed = await client.get("/api/v1/posts")
    assert feed.json()[0]["comments_count"] == 2


async def test_comment_on_missing_post_404(client):
    res = await client.post("/api/v1/posts/nope/comments", json={
        "user_id": "user-2", "content": "hello",
    })
    assert res.status_code == 404


# --- Likes --------------------------------------------------------------------

async def test_toggle_like_is_an_involution(client):
    post = await _post(client)
    url = f"/api/v1/posts/{post['id']}/likes/toggle"

    first = await client.post(url, json={"user_id": "user-2"})
    assert first.json() == {"liked": True, "likes_count": 1}
    status = await client.get(f"/api/v1/posts/{post['id']}/likes/user-2")
    assert status.json() == {"liked": True}

    second = await client.post(url, json={"user_id": "user-2"})
    assert second.json() == {"liked": False, "likes_count": 0}
    status = await client.get(f"/api/v1/posts/{post['id']}/likes/user-2")
    assert status.json() == {"liked": False}


async def test_likes_count_never_negative(client, test_db):
    post = await _post(client)
    # Counter drifted to 0 while a like row exists
    db_post = await test_db.get(Post, post["id"])
    test_db.add(Like(post_id=post["id"], user_id="user-3"))
    db_post.likes_count = 0
    await test_db.commit()

    res = await client.post(
        f"/api/v1/posts/{post['id']}/likes/toggle", json={"user_id": "user-3"},
    )
    assert res.json() == {"liked": False, "likes_count": 0}


async def test_likes_from_different_users_accumulate(client):
    post = await _post(client)
    url = f"/api/v1/posts/{post['id']}/likes/toggle"
    await client.post(url, json={"user_id": "a"})
    res = await client.post(url, json={"user_id": "b"})
    assert res.json() == {"liked": True, "likes_count": 2}


# --- Deletion -----------------------------------------------------------------

async def test_delete_post_cascades(client, test_db):
    post = await _post(client)
    await client.post(f"/api/v1/posts/{post['id']}/comments", json={
        "user_id": "user-2", "content": "nice",
    })
    await client.post(f"/api/v1/posts/{post['id']}/likes/toggle", json={"user_id": "user-2"})

    res = await client.delete(f"/api/v1/posts/{post['id']}")
    assert res.status_code == 204

    for model in (Post, Comment, Like):
        count = await test_db.scalar(select(func.count()).select_from(model))
        assert count == 0


async def test_delete_missing_post_404(client):
    res = await client.delete("/api/v1/posts/missing")
    assert res.status_code == 404
