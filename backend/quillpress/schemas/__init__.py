"""Pydantic schemas for API request/response."""
from quillpress.schemas.pagination import Page
from quillpress.schemas.taxonomy import (
    Category,
    CategoryCreate,
    CategoryUpdate,
    Tag,
    TagCreate,
    TagUpdate,
)
from quillpress.schemas.content_item import (
    ContentFilters,
    ContentItem,
    ContentItemCreate,
    ContentItemUpdate,
    SlugCheck,
)
from quillpress.schemas.comment import AdminComment, CommentCreate, CommentNode
from quillpress.schemas.user import AppUser, Me
from quillpress.schemas.admin import Dashboard
from quillpress.schemas.settings import AppSettings, UploadDraft, UploadDraftRequest

__all__ = [
    "Page",
    "Category",
    "CategoryCreate",
    "CategoryUpdate",
    "Tag",
    "TagCreate",
    "TagUpdate",
    "ContentFilters",
    "ContentItem",
    "ContentItemCreate",
    "ContentItemUpdate",
    "SlugCheck",
    "AdminComment",
    "CommentCreate",
    "CommentNode",
    "AppUser",
    "Me",
    "Dashboard",
    "AppSettings",
    "UploadDraft",
    "UploadDraftRequest",
]
