"""Content item model."""
import enum
from datetime import datetime
from uuid import uuid4

from sqlalchemy import (
    Column,
    DateTime,
    Enum,
    ForeignKey,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from quillpress.database import Base


class ContentType(str, enum.Enum):
    """Content type enumeration."""

    ARTICLE = "article"
    BLOG = "blog"


class ContentStatus(str, enum.Enum):
    """Publication status enumeration."""

    DRAFT = "draft"
    PUBLISHED = "published"


class ContentItem(Base):
    """Publishable article or blog post."""

    __tablename__ = "content_items"
    __table_args__ = (
        UniqueConstraint("content_type", "slug", name="uq_content_items_type_slug"),
    )

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    content_type = Column(Enum(ContentType), nullable=False, index=True)
    title = Column(Text, nullable=False)
    slug = Column(String(255), nullable=False, index=True)
    content = Column(Text, nullable=False)
    excerpt = Column(Text, nullable=True)
    status = Column(
        Enum(ContentStatus), default=ContentStatus.DRAFT, nullable=False, index=True
    )
    published_at = Column(DateTime, nullable=True, index=True)
    category_id = Column(
        String(36), ForeignKey("categories.id", ondelete="SET NULL"), nullable=True
    )
    featured_image_url = Column(Text, nullable=True)
    seo_title = Column(Text, nullable=True)
    meta_description = Column(Text, nullable=True)
    keywords = Column(Text, nullable=True)
    author_id = Column(String(36), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    # Relationships
    category = relationship("Category")
    tags = relationship("Tag", secondary="content_item_tags", order_by="Tag.name")
    comments = relationship(
        "Comment",
        back_populates="content_item",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
