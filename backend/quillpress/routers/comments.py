"""Comments API router."""
from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from quillpress.auth import Caller, require_admin, require_auth
from quillpress.database import get_db
from quillpress.schemas.comment import Comment as CommentSchema, CommentCreate, CommentNode
from quillpress.services.comments import CommentService, comment_to_dict

router = APIRouter()


@router.get("", response_model=list[CommentNode])
def list_comments(
    content_id: str = Query(..., alias="contentId"),
    db: Session = Depends(get_db),
):
    """Comment thread of one content item, replies nested under parents."""
    return CommentService(db).list_for_content(content_id)


@router.post("", response_model=CommentSchema, status_code=status.HTTP_201_CREATED)
def create_comment(
    payload: CommentCreate,
    caller: Caller = Depends(require_auth),
    db: Session = Depends(get_db),
):
    """Post a comment or a reply."""
    comment = CommentService(db).create(payload, author_id=caller.id)
    return comment_to_dict(comment)


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_comment(
    comment_id: str,
    _: Caller = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Delete a comment."""
    CommentService(db).remove(comment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
