"""SQLAlchemy models."""
from quillpress.models.category import Category
from quillpress.models.tag import Tag, content_item_tags
from quillpress.models.content_item import ContentItem, ContentStatus, ContentType
from quillpress.models.comment import Comment
from quillpress.models.app_user import AppUser, UserRole
from quillpress.models.app_settings import AppSettings

__all__ = [
    "Category",
    "Tag",
    "content_item_tags",
    "ContentItem",
    "ContentStatus",
    "ContentType",
    "Comment",
    "AppUser",
    "UserRole",
    "AppSettings",
]
