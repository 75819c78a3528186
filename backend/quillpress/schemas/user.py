"""User schemas."""
from datetime import datetime

from quillpress.models.app_user import UserRole
from quillpress.schemas.base import CamelModel


class AppUser(CamelModel):
    """Schema for user response."""

    id: str
    email: str
    username: str | None
    role: UserRole
    created_at: datetime


class Me(CamelModel):
    """Identity of the calling admin."""

    id: str
    email: str | None
    role: UserRole
