"""Admin API router."""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from quillpress.auth import Caller, require_admin
from quillpress.database import get_db
from quillpress.schemas.admin import Dashboard
from quillpress.schemas.comment import AdminComment
from quillpress.schemas.pagination import Page
from quillpress.schemas.user import AppUser as AppUserSchema, Me
from quillpress.services.admin import AdminService
from quillpress.services.comments import CommentService
from quillpress.services.pagination import PageParams
from quillpress.routers.dependencies import get_page_params

router = APIRouter()


@router.get("/me", response_model=Me)
def get_me(admin: Caller = Depends(require_admin)):
    """Identity and role of the calling admin."""
    return {"id": admin.id, "email": admin.email, "role": admin.role}


@router.get("/dashboard", response_model=Dashboard)
def get_dashboard(
    _: Caller = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Counters plus the latest content items and comments."""
    return AdminService(db).dashboard()


@router.get("/users", response_model=Page[AppUserSchema])
def list_users(
    params: PageParams = Depends(get_page_params),
    _: Caller = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """List users, newest first."""
    return AdminService(db).list_users(params)


@router.get("/comments", response_model=Page[AdminComment])
def list_comments(
    params: PageParams = Depends(get_page_params),
    _: Caller = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Moderation queue, newest first."""
    return CommentService(db).list_admin(params)
