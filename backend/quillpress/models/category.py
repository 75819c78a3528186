"""Category model."""
from datetime import datetime
from uuid import uuid4

from sqlalchemy import Column, DateTime, String, Text

from quillpress.database import Base


class Category(Base):
    """Single-valued classification of a content item."""

    __tablename__ = "categories"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    name = Column(String(255), nullable=False)
    slug = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=True)
    color = Column(String(32), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
