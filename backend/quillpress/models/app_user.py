"""Application user model."""
import enum
from datetime import datetime

from sqlalchemy import Column, DateTime, Enum, String

from quillpress.database import Base


class UserRole(str, enum.Enum):
    """User role enumeration."""

    USER = "user"
    ADMIN = "admin"
    SUPERADMIN = "superadmin"


class AppUser(Base):
    """Role record keyed by the identity provider's user id."""

    __tablename__ = "app_users"

    id = Column(String(36), primary_key=True)
    email = Column(String(320), nullable=False)
    username = Column(String(255), nullable=True)
    role = Column(Enum(UserRole), default=UserRole.USER, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
