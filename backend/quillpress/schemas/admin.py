"""Admin dashboard schemas."""
from datetime import datetime

from quillpress.models.content_item import ContentStatus, ContentType
from quillpress.schemas.base import CamelModel
from quillpress.schemas.comment import AdminComment


class DashboardStats(CamelModel):
    """Headline counters for the admin dashboard."""

    total_articles: int
    total_blogs: int
    total_users: int
    total_comments: int
    published_articles: int
    draft_articles: int
    published_blogs: int
    draft_blogs: int


class RecentContentItem(CamelModel):
    """Compact content item row for the dashboard."""

    id: str
    content_type: ContentType
    title: str
    slug: str
    status: ContentStatus
    created_at: datetime
    published_at: datetime | None


class Dashboard(CamelModel):
    """Admin dashboard payload."""

    stats: DashboardStats
    recent_items: list[RecentContentItem]
    recent_comments: list[AdminComment]
