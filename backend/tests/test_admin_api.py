"""Tests for the admin dashboard, users and moderation queue."""
from datetime import datetime, timedelta

from quillpress.models import AppUser, Comment, ContentStatus, ContentType, UserRole
from tests.conftest import ADMIN_ID, USER_ID


def test_dashboard_counts(client, db, admin_headers, make_item):
    make_item(title="A1")
    make_item(title="A2", status=ContentStatus.DRAFT)
    make_item(title="A3", status=ContentStatus.DRAFT)
    blog = make_item(title="B1", content_type=ContentType.BLOG)
    db.add(Comment(content_item_id=blog.id, author_id=USER_ID, content="Nice"))
    db.commit()

    response = client.get("/api/admin/dashboard", headers=admin_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["stats"] == {
        "totalArticles": 3,
        "totalBlogs": 1,
        "totalUsers": 2,
        "totalComments": 1,
        "publishedArticles": 1,
        "draftArticles": 2,
        "publishedBlogs": 1,
        "draftBlogs": 0,
    }
    assert [item["title"] for item in body["recentItems"]] == ["B1", "A3", "A2", "A1"]
    assert body["recentComments"][0]["contentItem"]["slug"] == blog.slug
    assert body["recentComments"][0]["contentItem"]["contentType"] == "blog"


def test_dashboard_limits_recent_lists(client, admin_headers, make_item):
    for n in range(7):
        make_item(title=f"Item {n}")

    body = client.get("/api/admin/dashboard", headers=admin_headers).json()
    assert len(body["recentItems"]) == 5
    assert body["recentItems"][0]["title"] == "Item 6"


def test_dashboard_requires_admin(client, user_headers):
    assert client.get("/api/admin/dashboard").status_code == 401
    assert client.get("/api/admin/dashboard", headers=user_headers).status_code == 403


def test_list_users_paginated(client, db, admin_headers):
    base = datetime(2024, 3, 1)
    db.add_all(
        [
            AppUser(
                id=f"00000000-0000-0000-0000-{n:012d}",
                email=f"reader{n}@example.com",
                role=UserRole.USER,
                created_at=base + timedelta(days=n),
            )
            for n in range(3)
        ]
    )
    db.commit()

    response = client.get(
        "/api/admin/users", params={"page": 1, "pageSize": 2}, headers=admin_headers
    )

    body = response.json()
    assert response.status_code == 200
    assert body["total"] == 5
    assert body["pageSize"] == 2
    assert len(body["data"]) == 2
    assert {"id", "email", "username", "role", "createdAt"} <= set(body["data"][0])


def test_moderation_queue_newest_first(client, db, admin_headers, make_item):
    item = make_item(title="Talked about")
    start = datetime(2024, 4, 1)
    db.add_all(
        [
            Comment(
                content_item_id=item.id,
                author_id=ADMIN_ID,
                content=f"comment {n}",
                created_at=start + timedelta(hours=n),
            )
            for n in range(3)
        ]
    )
    db.commit()

    body = client.get("/api/admin/comments", headers=admin_headers).json()

    assert body["total"] == 3
    assert [comment["content"] for comment in body["data"]] == [
        "comment 2",
        "comment 1",
        "comment 0",
    ]
    first = body["data"][0]
    assert first["user"] == {"id": ADMIN_ID, "username": "editor"}
    assert first["contentItem"]["title"] == "Talked about"
