"""Categories and tags API routers."""
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from quillpress.auth import Caller, require_admin
from quillpress.database import get_db
from quillpress.schemas.taxonomy import (
    Category as CategorySchema,
    CategoryCreate,
    CategoryUpdate,
    Tag as TagSchema,
    TagCreate,
    TagUpdate,
)
from quillpress.services.taxonomy import CategoryRepository, TagRepository

categories_router = APIRouter()
tags_router = APIRouter()


@categories_router.get("", response_model=list[CategorySchema])
def list_categories(db: Session = Depends(get_db)):
    """List all categories by name."""
    return CategoryRepository(db).list()


@categories_router.post(
    "", response_model=CategorySchema, status_code=status.HTTP_201_CREATED
)
def create_category(
    payload: CategoryCreate,
    _: Caller = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Create a category."""
    return CategoryRepository(db).create(payload)


@categories_router.patch("/{category_id}", response_model=CategorySchema)
def update_category(
    category_id: str,
    payload: CategoryUpdate,
    _: Caller = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Update a category."""
    return CategoryRepository(db).update(category_id, payload)


@categories_router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category(
    category_id: str,
    _: Caller = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Delete a category; its items become uncategorized."""
    CategoryRepository(db).remove(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@tags_router.get("", response_model=list[TagSchema])
def list_tags(db: Session = Depends(get_db)):
    """List all tags by name."""
    return TagRepository(db).list()


@tags_router.post("", response_model=TagSchema, status_code=status.HTTP_201_CREATED)
def create_tag(
    payload: TagCreate,
    _: Caller = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Create a tag."""
    return TagRepository(db).create(payload)


@tags_router.patch("/{tag_id}", response_model=TagSchema)
def update_tag(
    tag_id: str,
    payload: TagUpdate,
    _: Caller = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Update a tag."""
    return TagRepository(db).update(tag_id, payload)


@tags_router.delete("/{tag_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_tag(
    tag_id: str,
    _: Caller = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Delete a tag and its links to content items."""
    TagRepository(db).remove(tag_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
