"""Tests for the articles and blogs HTTP routes."""
import pytest

from quillpress.models import ContentStatus, ContentType
from tests.conftest import ADMIN_ID


def test_create_article(client, admin_headers, category, tags):
    response = client.post(
        "/api/articles",
        json={
            "title": "Hello World",
            "content": "<p>hi</p>",
            "status": "draft",
            "categoryId": category.id,
            "tagIds": [tags[0].id],
            "seoTitle": "Hello",
        },
        headers=admin_headers,
    )

    assert response.status_code == 201
    body = response.json()
    assert body["slug"] == "hello-world"
    assert body["publishedAt"] is None
    assert body["contentType"] == "article"
    assert body["authorId"] == ADMIN_ID
    assert body["seoTitle"] == "Hello"
    assert body["category"]["slug"] == "engineering"
    assert [tag["slug"] for tag in body["tags"]] == ["python"]

    again = client.post(
        "/api/articles",
        json={"title": "Hello World", "content": "<p>again</p>"},
        headers=admin_headers,
    )
    assert again.json()["slug"] == "hello-world-2"


def test_create_requires_admin(client, user_headers):
    payload = {"title": "T", "content": "x"}
    assert client.post("/api/articles", json=payload).status_code == 401
    assert client.post("/api/articles", json=payload, headers=user_headers).status_code == 403


def test_create_missing_title_is_validation_error(client, admin_headers):
    response = client.post("/api/blogs", json={"content": "x"}, headers=admin_headers)
    assert response.status_code == 422
    assert response.json() == {"error": "title and content are required"}


def test_list_envelope_and_draft_visibility(client, admin_headers, make_item):
    make_item(title="Published")
    make_item(title="Draft", status=ContentStatus.DRAFT)

    public = client.get("/api/articles", params={"status": "draft"})
    admin = client.get("/api/articles", params={"status": "draft"}, headers=admin_headers)

    assert public.status_code == 200
    assert public.json()["total"] == 1
    assert [item["title"] for item in public.json()["data"]] == ["Published"]
    assert set(public.json()) == {"data", "page", "pageSize", "total"}
    assert [item["title"] for item in admin.json()["data"]] == ["Draft"]


def test_list_pagination_params(client, make_item):
    for n in range(25):
        make_item(title=f"Post {n}")

    page_3 = client.get("/api/articles", params={"page": "3", "pageSize": "10"}).json()
    page_4 = client.get("/api/articles", params={"page": "4", "pageSize": "10"}).json()
    capped = client.get("/api/articles", params={"pageSize": "999"}).json()
    junk = client.get("/api/articles", params={"page": "abc", "pageSize": "-2"}).json()

    assert (len(page_3["data"]), page_3["total"], page_3["page"]) == (5, 25, 3)
    assert (page_4["data"], page_4["total"]) == ([], 25)
    assert capped["pageSize"] == 50
    assert (junk["page"], junk["pageSize"], len(junk["data"])) == (1, 10, 10)


def test_list_filters(client, make_item, category, tags):
    make_item(title="Postgres tips", category=category, tags=[tags[1]])
    make_item(title="Python tips", tags=[tags[0]])

    by_query = client.get("/api/articles", params={"query": "postgres"}).json()
    by_category = client.get("/api/articles", params={"category": "engineering"}).json()
    by_tag = client.get("/api/articles", params={"tag": "python"}).json()

    assert [item["title"] for item in by_query["data"]] == ["Postgres tips"]
    assert [item["title"] for item in by_category["data"]] == ["Postgres tips"]
    assert [item["title"] for item in by_tag["data"]] == ["Python tips"]


def test_articles_and_blogs_are_separate(client, make_item):
    make_item(title="An article")
    make_item(title="A blog", content_type=ContentType.BLOG)

    blogs = client.get("/api/blogs").json()
    assert [item["title"] for item in blogs["data"]] == ["A blog"]


def test_get_by_slug_and_id(client, make_item):
    item = make_item(title="Draft", slug="secret-draft", status=ContentStatus.DRAFT)

    by_slug = client.get("/api/articles/secret-draft")
    by_id = client.get(f"/api/articles/{item.id}")

    assert by_slug.status_code == 200
    assert by_slug.json()["id"] == item.id
    assert by_id.json()["slug"] == "secret-draft"


def test_get_missing_is_not_found(client):
    response = client.get("/api/blogs/nothing-here")
    assert response.status_code == 404
    assert response.json() == {"error": "Blog not found"}


def test_patch_updates_only_sent_fields(client, admin_headers, make_item, tags):
    item = make_item(title="Original", excerpt="keep me", tags=[tags[0]])
    published_at = item.published_at.isoformat()

    response = client.patch(
        f"/api/articles/{item.slug}",
        json={"title": "Renamed", "tagIds": [tags[1].id]},
        headers=admin_headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "Renamed"
    assert body["excerpt"] == "keep me"
    assert body["publishedAt"] == published_at
    assert [tag["slug"] for tag in body["tags"]] == ["databases"]


def test_patch_slug_conflict(client, admin_headers, make_item):
    make_item(slug="taken")
    item = make_item(slug="mine")

    response = client.patch(
        f"/api/articles/{item.id}", json={"slug": "taken"}, headers=admin_headers
    )
    assert response.status_code == 409


def test_patch_requires_admin(client, user_headers, make_item):
    item = make_item()
    response = client.patch(f"/api/articles/{item.id}", json={"title": "x"}, headers=user_headers)
    assert response.status_code == 403


def test_delete(client, admin_headers, make_item):
    item_id = make_item(slug="doomed").id

    response = client.delete("/api/articles/doomed", headers=admin_headers)
    assert response.status_code == 204
    assert client.get(f"/api/articles/{item_id}").status_code == 404
    assert client.delete("/api/articles/doomed", headers=admin_headers).status_code == 404


def test_related(client, make_item, category):
    current = make_item(title="Current", category=category)
    make_item(title="Sibling", category=category)
    make_item(title="Elsewhere")

    response = client.get(f"/api/articles/{current.slug}/related")

    assert response.status_code == 200
    assert [item["title"] for item in response.json()] == ["Sibling"]


def test_related_rejects_bad_limit(client, make_item):
    item = make_item()
    assert client.get(f"/api/articles/{item.slug}/related", params={"limit": 0}).status_code == 422


def test_slug_check(client, admin_headers, make_item):
    item = make_item(slug="my-post")

    taken = client.get(
        "/api/articles/_slug-check", params={"slug": "My Post"}, headers=admin_headers
    )
    own = client.get(
        "/api/articles/_slug-check",
        params={"slug": "My Post", "excludeId": item.id},
        headers=admin_headers,
    )

    assert taken.json() == {"candidate": "My Post", "slug": "my-post-2"}
    assert own.json()["slug"] == "my-post"


@pytest.mark.parametrize("headers", [None, {"Authorization": "Bearer user-token"}])
def test_slug_check_requires_admin(client, headers):
    response = client.get("/api/articles/_slug-check", params={"slug": "x"}, headers=headers)
    assert response.status_code in (401, 403)


def test_item_titled_like_slug_helper_is_readable(client, admin_headers):
    created = client.post(
        "/api/articles",
        json={"title": "Slug Check", "content": "x", "status": "published"},
        headers=admin_headers,
    )
    assert created.json()["slug"] == "slug-check"

    response = client.get("/api/articles/slug-check")

    assert response.status_code == 200
    assert response.json()["id"] == created.json()["id"]
