"""Admin dashboard and user listing."""
from __future__ import annotations

from typing import Any

from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload

from quillpress.models import AppUser, Comment, ContentItem, ContentStatus, ContentType
from quillpress.services.pagination import PageParams, paginate

RECENT_LIMIT = 5


class AdminService:
    """Read-only views for the back office."""

    def __init__(self, db: Session):
        self.db = db

    def _count_items(
        self,
        content_type: ContentType,
        status: ContentStatus | None = None,
    ) -> int:
        query = self.db.query(func.count(ContentItem.id)).filter(
            ContentItem.content_type == content_type
        )
        if status is not None:
            query = query.filter(ContentItem.status == status)
        return query.scalar() or 0

    def dashboard(self) -> dict[str, Any]:
        stats = {
            "total_articles": self._count_items(ContentType.ARTICLE),
            "total_blogs": self._count_items(ContentType.BLOG),
            "total_users": self.db.query(func.count(AppUser.id)).scalar() or 0,
            "total_comments": self.db.query(func.count(Comment.id)).scalar() or 0,
            "published_articles": self._count_items(
                ContentType.ARTICLE, ContentStatus.PUBLISHED
            ),
            "draft_articles": self._count_items(ContentType.ARTICLE, ContentStatus.DRAFT),
            "published_blogs": self._count_items(ContentType.BLOG, ContentStatus.PUBLISHED),
            "draft_blogs": self._count_items(ContentType.BLOG, ContentStatus.DRAFT),
        }
        recent_items = (
            self.db.query(ContentItem)
            .order_by(ContentItem.created_at.desc())
            .limit(RECENT_LIMIT)
            .all()
        )
        recent_comments = (
            self.db.query(Comment)
            .options(selectinload(Comment.user), selectinload(Comment.content_item))
            .order_by(Comment.created_at.desc())
            .limit(RECENT_LIMIT)
            .all()
        )
        return {
            "stats": stats,
            "recent_items": recent_items,
            "recent_comments": recent_comments,
        }

    def list_users(self, params: PageParams) -> dict[str, Any]:
        query = self.db.query(AppUser).order_by(AppUser.created_at.desc())
        return paginate(query, params)
