"""Comment threads and moderation."""
from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from quillpress.exceptions import InfrastructureError, NotFoundError, ValidationError
from quillpress.models import Comment, ContentItem
from quillpress.schemas.comment import CommentCreate
from quillpress.services.comment_tree import nest
from quillpress.services.pagination import PageParams, paginate

logger = logging.getLogger(__name__)


def comment_to_dict(comment: Comment) -> dict[str, Any]:
    """Flatten a comment row, with its author's public fields."""
    return {
        "id": comment.id,
        "content_item_id": comment.content_item_id,
        "author_id": comment.author_id,
        "parent_id": comment.parent_id,
        "content": comment.content,
        "created_at": comment.created_at,
        "user": (
            {"id": comment.user.id, "username": comment.user.username}
            if comment.user
            else None
        ),
    }


class CommentService:
    """Read, post and moderate comments."""

    def __init__(self, db: Session):
        self.db = db

    def _commit(self, action: str) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Failed to %s comment", action)
            raise InfrastructureError(f"Failed to {action} comment") from exc

    def list_for_content(self, content_item_id: str) -> list[dict[str, Any]]:
        """Return the comment thread of one content item as a reply tree."""
        rows = (
            self.db.query(Comment)
            .options(selectinload(Comment.user))
            .filter(Comment.content_item_id == content_item_id)
            .order_by(Comment.created_at.asc())
            .all()
        )
        return nest(comment_to_dict(row) for row in rows)

    def create(self, payload: CommentCreate, author_id: str) -> Comment:
        content = (payload.content or "").strip()
        if not content:
            raise ValidationError("content is required")

        if self.db.get(ContentItem, payload.content_id) is None:
            raise NotFoundError("Content item not found")

        if payload.parent_id:
            parent = self.db.get(Comment, payload.parent_id)
            if parent is None or parent.content_item_id != payload.content_id:
                raise ValidationError("parent comment does not belong to this content item")

        comment = Comment(
            content_item_id=payload.content_id,
            author_id=author_id,
            parent_id=payload.parent_id or None,
            content=content,
        )
        self.db.add(comment)
        self._commit("create")
        self.db.refresh(comment)
        logger.info("Comment %s posted on %s", comment.id, comment.content_item_id)
        return comment

    def remove(self, comment_id: str) -> None:
        """Delete a comment. Its replies stay and become root comments."""
        comment = self.db.get(Comment, comment_id)
        if comment is None:
            raise NotFoundError("Comment not found")
        self.db.delete(comment)
        self._commit("delete")
        logger.info("Comment %s deleted", comment_id)

    def list_admin(self, params: PageParams) -> dict[str, Any]:
        """Moderation queue, newest first."""
        query = (
            self.db.query(Comment)
            .options(selectinload(Comment.user), selectinload(Comment.content_item))
            .order_by(Comment.created_at.desc())
        )
        return paginate(query, params)
