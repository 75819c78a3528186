"""Comment schemas."""
from datetime import datetime

from quillpress.models.content_item import ContentType
from quillpress.schemas.base import CamelModel


class CommentCreate(CamelModel):
    """Schema for posting a comment."""

    content_id: str
    content: str | None = None
    parent_id: str | None = None


class CommentUser(CamelModel):
    """Public view of a comment author."""

    id: str
    username: str | None = None


class Comment(CamelModel):
    """Schema for a single comment."""

    id: str
    content_item_id: str
    author_id: str
    parent_id: str | None
    content: str
    created_at: datetime
    user: CommentUser | None = None


class CommentNode(Comment):
    """Comment with its nested replies."""

    children: list["CommentNode"] = []


CommentNode.model_rebuild()


class CommentedItem(CamelModel):
    """Content item summary shown next to moderated comments."""

    id: str
    title: str
    slug: str
    content_type: ContentType


class AdminComment(CamelModel):
    """Schema for a comment in the moderation queue."""

    id: str
    content: str
    created_at: datetime
    parent_id: str | None
    user: CommentUser | None = None
    content_item: CommentedItem | None = None
