"""Content item schemas."""
from datetime import datetime

from quillpress.models.content_item import ContentStatus, ContentType
from quillpress.schemas.base import CamelModel
from quillpress.schemas.taxonomy import Category, Tag


class ContentItemCreate(CamelModel):
    """Schema for creating a content item.

    ``title`` and ``content`` are checked by the repository so that a missing
    and an empty value fail the same way.
    """

    title: str | None = None
    slug: str | None = None
    content: str | None = None
    excerpt: str | None = None
    category_id: str | None = None
    tag_ids: list[str] = []
    featured_image_url: str | None = None
    status: ContentStatus = ContentStatus.DRAFT
    seo_title: str | None = None
    meta_description: str | None = None
    keywords: str | None = None


class ContentItemUpdate(CamelModel):
    """Schema for updating a content item. Only fields that are sent change."""

    title: str | None = None
    slug: str | None = None
    content: str | None = None
    excerpt: str | None = None
    category_id: str | None = None
    tag_ids: list[str] | None = None
    featured_image_url: str | None = None
    status: ContentStatus | None = None
    seo_title: str | None = None
    meta_description: str | None = None
    keywords: str | None = None


class ContentFilters(CamelModel):
    """Filters shared by every content listing. Paging is passed separately."""

    status: str | None = None
    query: str | None = None
    category: str | None = None
    tag: str | None = None


class ContentItem(CamelModel):
    """Schema for content item response."""

    id: str
    content_type: ContentType
    title: str
    slug: str
    content: str
    excerpt: str | None
    status: ContentStatus
    published_at: datetime | None
    category_id: str | None
    featured_image_url: str | None
    seo_title: str | None
    meta_description: str | None
    keywords: str | None
    author_id: str
    created_at: datetime
    updated_at: datetime
    category: Category | None = None
    tags: list[Tag] = []


class SlugCheck(CamelModel):
    """Resolved slug for a candidate title or slug."""

    candidate: str
    slug: str
