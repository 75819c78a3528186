"""Category and tag schemas."""
from datetime import datetime

from quillpress.schemas.base import CamelModel


class CategoryCreate(CamelModel):
    """Schema for creating a category."""

    name: str | None = None
    slug: str | None = None
    description: str | None = None
    color: str | None = None


class CategoryUpdate(CamelModel):
    """Schema for updating a category."""

    name: str | None = None
    slug: str | None = None
    description: str | None = None
    color: str | None = None


class Category(CamelModel):
    """Schema for category response."""

    id: str
    name: str
    slug: str
    description: str | None = None
    color: str | None = None
    created_at: datetime


class TagCreate(CamelModel):
    """Schema for creating a tag."""

    name: str | None = None
    slug: str | None = None


class TagUpdate(CamelModel):
    """Schema for updating a tag."""

    name: str | None = None
    slug: str | None = None


class Tag(CamelModel):
    """Schema for tag response."""

    id: str
    name: str
    slug: str
    created_at: datetime
