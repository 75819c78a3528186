"""Content API router, mounted once per content type."""
from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from quillpress.auth import Caller, get_optional_auth, require_admin
from quillpress.database import get_db
from quillpress.models import ContentType
from quillpress.schemas.content_item import (
    ContentFilters,
    ContentItem as ContentItemSchema,
    ContentItemCreate,
    ContentItemUpdate,
    SlugCheck,
)
from quillpress.schemas.pagination import Page
from quillpress.schemas.settings import UploadDraft, UploadDraftRequest
from quillpress.services.app_settings import load_app_settings
from quillpress.services.content import ContentRepository
from quillpress.services.pagination import PageParams
from quillpress.services.uploads import create_upload_draft
from quillpress.routers.dependencies import get_page_params


def build_router(content_type: ContentType) -> APIRouter:
    """Build the CRUD router for one content type."""
    router = APIRouter()

    def get_repository(db: Session = Depends(get_db)) -> ContentRepository:
        return ContentRepository(db, content_type)

    @router.get("", response_model=Page[ContentItemSchema])
    def list_items(
        status_filter: str | None = Query(default=None, alias="status"),
        query: str | None = Query(default=None),
        category: str | None = Query(default=None),
        tag: str | None = Query(default=None),
        params: PageParams = Depends(get_page_params),
        caller: Caller = Depends(get_optional_auth),
        repository: ContentRepository = Depends(get_repository),
    ):
        """List items; non-admin callers only see published ones."""
        filters = ContentFilters(
            status=status_filter, query=query, category=category, tag=tag
        )
        return repository.list(filters, params, is_admin=caller.is_admin)

    @router.post("", response_model=ContentItemSchema, status_code=status.HTTP_201_CREATED)
    def create_item(
        payload: ContentItemCreate,
        admin: Caller = Depends(require_admin),
        repository: ContentRepository = Depends(get_repository),
    ):
        """Create an item with a unique slug."""
        return repository.create(payload, author_id=admin.id)

    @router.get("/_slug-check", response_model=SlugCheck)
    def check_slug(
        slug: str = Query(...),
        exclude_id: str | None = Query(default=None, alias="excludeId"),
        _: Caller = Depends(require_admin),
        repository: ContentRepository = Depends(get_repository),
    ):
        """Resolve a free slug before saving an edit."""
        return {"candidate": slug, "slug": repository.resolve_slug(slug, exclude_id)}

    @router.post("/upload-url", response_model=UploadDraft)
    def create_upload_url(
        payload: UploadDraftRequest,
        _: Caller = Depends(require_admin),
        db: Session = Depends(get_db),
    ):
        """Return where a featured image should be uploaded."""
        storage = load_app_settings(db).storage
        return create_upload_draft(storage, content_type, payload.filename)

    @router.get("/{id_or_slug}", response_model=ContentItemSchema)
    def get_item(
        id_or_slug: str,
        repository: ContentRepository = Depends(get_repository),
    ):
        """Get an item by id or slug."""
        return repository.get_by_id_or_slug(id_or_slug)

    @router.get("/{id_or_slug}/related", response_model=list[ContentItemSchema])
    def list_related(
        id_or_slug: str,
        limit: int | None = Query(default=None, ge=1, le=20),
        repository: ContentRepository = Depends(get_repository),
    ):
        """Published items from the same category."""
        return repository.related(id_or_slug, limit)

    @router.patch("/{id_or_slug}", response_model=ContentItemSchema)
    def update_item(
        id_or_slug: str,
        payload: ContentItemUpdate,
        _: Caller = Depends(require_admin),
        repository: ContentRepository = Depends(get_repository),
    ):
        """Update the fields present in the body."""
        return repository.update(id_or_slug, payload)

    @router.delete("/{id_or_slug}", status_code=status.HTTP_204_NO_CONTENT)
    def delete_item(
        id_or_slug: str,
        _: Caller = Depends(require_admin),
        repository: ContentRepository = Depends(get_repository),
    ):
        """Delete an item."""
        repository.remove(id_or_slug)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
