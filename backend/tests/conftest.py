"""Shared fixtures: in-memory SQLite database, seeded roles and an API client."""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from quillpress.database import Base, enable_sqlite_foreign_keys, get_db
from quillpress.main import app
from quillpress.models import (
    AppUser,
    Category,
    ContentItem,
    ContentStatus,
    ContentType,
    Tag,
    UserRole,
)
from quillpress.services.identity import VerifiedIdentity, get_identity_client

USER_ID = "11111111-1111-1111-1111-111111111111"
ADMIN_ID = "22222222-2222-2222-2222-222222222222"
SUPER_ID = "33333333-3333-3333-3333-333333333333"

TOKENS = {
    "user-token": VerifiedIdentity(id=USER_ID, email="reader@example.com"),
    "admin-token": VerifiedIdentity(id=ADMIN_ID, email="editor@example.com"),
    "super-token": VerifiedIdentity(id=SUPER_ID, email="owner@example.com"),
}


class FakeIdentityClient:
    """Identity client answering from a fixed token table."""

    def __init__(self, identities):
        self.identities = identities
        self.calls = []

    def verify(self, token):
        self.calls.append(token)
        return self.identities.get(token)


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    event.listen(engine, "connect", enable_sqlite_foreign_keys)
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    # The plain reader has no app_users row on purpose.
    session.add_all(
        [
            AppUser(id=ADMIN_ID, email="editor@example.com", username="editor", role=UserRole.ADMIN),
            AppUser(id=SUPER_ID, email="owner@example.com", username="owner", role=UserRole.SUPERADMIN),
        ]
    )
    session.commit()
    yield session
    session.close()


@pytest.fixture
def identity_client():
    return FakeIdentityClient(TOKENS)


@pytest.fixture
def client(db, identity_client):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_identity_client] = lambda: identity_client
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers():
    return bearer("admin-token")


@pytest.fixture
def user_headers():
    return bearer("user-token")


@pytest.fixture
def super_headers():
    return bearer("super-token")


@pytest.fixture
def make_item(db):
    """Insert a content item directly, bypassing slug resolution."""
    counter = {"n": 0}
    base_time = datetime(2024, 1, 1, 12, 0, 0)

    def _make(
        title="Item",
        slug=None,
        content_type=ContentType.ARTICLE,
        status=ContentStatus.PUBLISHED,
        category=None,
        tags=(),
        excerpt=None,
        published_at=None,
    ):
        counter["n"] += 1
        created_at = base_time + timedelta(minutes=counter["n"])
        if published_at is None and status == ContentStatus.PUBLISHED:
            published_at = created_at
        item = ContentItem(
            content_type=content_type,
            title=title,
            slug=slug or f"item-{counter['n']}",
            content="<p>body</p>",
            excerpt=excerpt,
            status=status,
            published_at=published_at,
            category=category,
            tags=list(tags),
            author_id=ADMIN_ID,
            created_at=created_at,
            updated_at=created_at,
        )
        db.add(item)
        db.commit()
        db.refresh(item)
        return item

    return _make


@pytest.fixture
def category(db):
    record = Category(name="Engineering", slug="engineering", color="#3366ff")
    db.add(record)
    db.commit()
    db.refresh(record)
    return record


@pytest.fixture
def tags(db):
    records = [Tag(name="Python", slug="python"), Tag(name="Databases", slug="databases")]
    db.add_all(records)
    db.commit()
    for record in records:
        db.refresh(record)
    return records
