"""Category and tag management."""
from __future__ import annotations

import logging
from typing import Generic, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from quillpress.config import settings
from quillpress.exceptions import InfrastructureError, NotFoundError, ValidationError
from quillpress.models import Category, Tag
from quillpress.schemas.taxonomy import CategoryCreate, CategoryUpdate, TagCreate, TagUpdate
from quillpress.services.slugs import fallback_slug, normalize

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", Category, Tag)


class TaxonomyRepository(Generic[ModelT]):
    """CRUD over categories or tags.

    Slugs are derived from the name unless one is given; unlike content
    items they are not checked for uniqueness.
    """

    # Fields besides name/slug that count as an update on their own.
    extra_fields: tuple[str, ...] = ()

    def __init__(self, db: Session, model: type[ModelT], label: str):
        self.db = db
        self.model = model
        self.label = label

    def _slug_for(self, text: str | None) -> str:
        return normalize(text, settings.slug_max_length) or fallback_slug()

    def _commit(self, action: str) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Failed to %s %s", action, self.label.lower())
            raise InfrastructureError(f"Failed to {action} {self.label.lower()}") from exc

    def list(self) -> list[ModelT]:
        return self.db.query(self.model).order_by(self.model.name).all()

    def get(self, record_id: str) -> ModelT:
        record = self.db.get(self.model, record_id)
        if record is None:
            raise NotFoundError(f"{self.label} not found")
        return record

    def create(self, payload: CategoryCreate | TagCreate) -> ModelT:
        data = payload.model_dump(exclude_unset=True)
        name = (data.pop("name", None) or "").strip()
        if not name:
            raise ValidationError("name is required")
        slug = self._slug_for(data.pop("slug", None) or name)

        record = self.model(name=name, slug=slug, **data)
        self.db.add(record)
        self._commit("create")
        self.db.refresh(record)
        logger.info("Created %s %s (slug=%s)", self.label.lower(), record.id, record.slug)
        return record

    def update(self, record_id: str, payload: CategoryUpdate | TagUpdate) -> ModelT:
        updates = payload.model_dump(exclude_unset=True)
        allowed = ("name", "slug") + self.extra_fields
        if not any(updates.get(field) for field in allowed):
            raise ValidationError(f"{' or '.join(allowed)} is required")

        record = self.get(record_id)
        if "name" in updates:
            name = (updates["name"] or "").strip()
            if not name:
                raise ValidationError("name cannot be empty")
            updates["name"] = name

        if updates.get("slug"):
            updates["slug"] = self._slug_for(updates["slug"])
        elif "name" in updates or "slug" in updates:
            # A renamed record, or an explicitly blanked slug, re-derives from the name.
            updates["slug"] = self._slug_for(updates.get("name") or record.name)

        for field, value in updates.items():
            setattr(record, field, value)
        self._commit("update")
        self.db.refresh(record)
        return record

    def remove(self, record_id: str) -> None:
        record = self.get(record_id)
        self.db.delete(record)
        self._commit("delete")
        logger.info("Deleted %s %s", self.label.lower(), record_id)


class CategoryRepository(TaxonomyRepository[Category]):
    """Categories carry an optional description and color."""

    extra_fields = ("description", "color")

    def __init__(self, db: Session):
        super().__init__(db, Category, "Category")


class TagRepository(TaxonomyRepository[Tag]):
    def __init__(self, db: Session):
        super().__init__(db, Tag, "Tag")
