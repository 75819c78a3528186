"""Comment model."""
from datetime import datetime
from uuid import uuid4

from sqlalchemy import Column, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from quillpress.database import Base


class Comment(Base):
    """Reader comment on a content item, optionally replying to another comment."""

    __tablename__ = "comments"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    content_item_id = Column(
        String(36),
        ForeignKey("content_items.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    author_id = Column(String(36), nullable=False, index=True)
    parent_id = Column(
        String(36), ForeignKey("comments.id", ondelete="SET NULL"), nullable=True
    )
    content = Column(Text, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)

    # Relationships
    content_item = relationship("ContentItem", back_populates="comments")
    user = relationship(
        "AppUser",
        primaryjoin="foreign(Comment.author_id) == AppUser.id",
        viewonly=True,
    )
