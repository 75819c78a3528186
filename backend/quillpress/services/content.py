"""Content repository: CRUD over one content type and its taxonomy links."""
from __future__ import annotations

import logging
import re
from datetime import datetime
from typing import Any

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Query, Session, selectinload

from quillpress.config import settings
from quillpress.exceptions import (
    ConflictError,
    InfrastructureError,
    NotFoundError,
    ValidationError,
)
from quillpress.models import Category, ContentItem, ContentStatus, ContentType, Tag
from quillpress.schemas.content_item import (
    ContentFilters,
    ContentItemCreate,
    ContentItemUpdate,
)
from quillpress.services.pagination import PageParams, paginate
from quillpress.services.slugs import fallback_slug, normalize, resolve

logger = logging.getLogger(__name__)

UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


def is_uuid(value: str) -> bool:
    return bool(UUID_PATTERN.match(value or ""))


def _utcnow() -> datetime:
    return datetime.utcnow()


def _match_id_or_slug(model, identifier: str):
    if is_uuid(identifier):
        return model.id == identifier.lower()
    return model.slug == identifier


class ContentRepository:
    """CRUD operations for articles or blogs.

    Every query is scoped to ``content_type``; slugs are unique per type.
    Writes touching the row and its tag links commit in one transaction.
    """

    def __init__(self, db: Session, content_type: ContentType):
        self.db = db
        self.content_type = content_type

    @property
    def label(self) -> str:
        return self.content_type.value.capitalize()

    def _base_query(self) -> Query:
        return (
            self.db.query(ContentItem)
            .filter(ContentItem.content_type == self.content_type)
            .options(
                selectinload(ContentItem.category),
                selectinload(ContentItem.tags),
            )
        )

    @staticmethod
    def _ordered(query: Query) -> Query:
        return query.order_by(
            ContentItem.published_at.desc().nulls_last(),
            ContentItem.created_at.desc(),
        )

    def list(
        self,
        filters: ContentFilters,
        params: PageParams,
        is_admin: bool = False,
    ) -> dict[str, Any]:
        """Return one page of items matching ``filters``.

        Callers who are not admins only ever see published items, whatever
        status they asked for.
        """
        query = self._base_query()

        if not is_admin:
            query = query.filter(ContentItem.status == ContentStatus.PUBLISHED)
        elif filters.status in {status.value for status in ContentStatus}:
            query = query.filter(ContentItem.status == ContentStatus(filters.status))

        if filters.query:
            query = query.filter(
                or_(
                    ContentItem.title.icontains(filters.query, autoescape=True),
                    ContentItem.excerpt.icontains(filters.query, autoescape=True),
                )
            )

        if filters.category:
            query = query.filter(
                ContentItem.category.has(_match_id_or_slug(Category, filters.category))
            )

        if filters.tag:
            query = query.filter(
                ContentItem.tags.any(_match_id_or_slug(Tag, filters.tag))
            )

        return paginate(self._ordered(query), params)

    def get_by_id_or_slug(self, identifier: str) -> ContentItem:
        """Fetch one item by UUID or slug, with category and tags loaded.

        No status filter is applied here; drafts are reachable by direct link.
        """
        item = self._base_query().filter(_match_id_or_slug(ContentItem, identifier)).first()
        if item is None:
            raise NotFoundError(f"{self.label} not found")
        return item

    def existing_slugs(
        self,
        candidate: str | None = None,
        excluding_id: str | None = None,
    ) -> set[str]:
        """Slugs already used by this content type.

        With ``candidate`` only the slugs that could collide with it are read.
        """
        query = self.db.query(ContentItem.slug).filter(
            ContentItem.content_type == self.content_type
        )
        if candidate:
            query = query.filter(
                or_(
                    ContentItem.slug == candidate,
                    ContentItem.slug.startswith(f"{candidate}-", autoescape=True),
                )
            )
        if excluding_id:
            query = query.filter(ContentItem.id != excluding_id)
        return {slug for (slug,) in query.all()}

    def resolve_slug(self, text: str | None, excluding_id: str | None = None) -> str:
        """Normalize ``text`` and pick a slug no other item of this type uses."""
        candidate = normalize(text, settings.slug_max_length) or fallback_slug()
        existing = self.existing_slugs(candidate, excluding_id)
        return resolve(candidate, existing, excluding_id)

    def _validated_category_id(self, category_id: str | None) -> str | None:
        if not category_id:
            return None
        if self.db.get(Category, category_id) is None:
            raise ValidationError(f"Unknown category: {category_id}")
        return category_id

    def _load_tags(self, tag_ids: list[str]) -> list[Tag]:
        unique_ids = list(dict.fromkeys(tag_id for tag_id in tag_ids if tag_id))
        if not unique_ids:
            return []
        tags = self.db.query(Tag).filter(Tag.id.in_(unique_ids)).all()
        found = {tag.id for tag in tags}
        missing = [tag_id for tag_id in unique_ids if tag_id not in found]
        if missing:
            raise ValidationError(f"Unknown tags: {', '.join(missing)}")
        by_id = {tag.id: tag for tag in tags}
        return [by_id[tag_id] for tag_id in unique_ids]

    def _commit(self, action: str) -> None:
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Failed to %s %s", action, self.content_type.value)
            raise InfrastructureError(f"Failed to {action} {self.content_type.value}") from exc

    def create(self, payload: ContentItemCreate, author_id: str) -> ContentItem:
        """Create an item and its tag links in a single transaction.

        If another writer takes the resolved slug first, the slug is resolved
        again against the fresh set of slugs.
        """
        if not (payload.title or "").strip() or not (payload.content or "").strip():
            raise ValidationError("title and content are required")

        category_id = self._validated_category_id(payload.category_id)
        tags = self._load_tags(payload.tag_ids)
        slug_source = payload.slug or payload.title
        published_at = _utcnow() if payload.status == ContentStatus.PUBLISHED else None

        attempts = max(settings.slug_conflict_retries, 0) + 1
        for attempt in range(1, attempts + 1):
            slug = self.resolve_slug(slug_source)
            item = ContentItem(
                content_type=self.content_type,
                title=payload.title,
                slug=slug,
                content=payload.content,
                excerpt=payload.excerpt,
                category_id=category_id,
                featured_image_url=payload.featured_image_url,
                status=payload.status,
                published_at=published_at,
                seo_title=payload.seo_title,
                meta_description=payload.meta_description,
                keywords=payload.keywords,
                author_id=author_id,
                tags=list(tags),
            )
            self.db.add(item)
            try:
                self._commit("create")
            except IntegrityError as exc:
                if attempt == attempts:
                    raise ConflictError(
                        f"{self.label} slug '{slug}' is already in use"
                    ) from exc
                logger.warning(
                    "Slug conflict on %s create (slug=%s, attempt=%s), retrying",
                    self.content_type.value,
                    slug,
                    attempt,
                )
                continue

            self.db.refresh(item)
            logger.info(
                "Created %s %s (slug=%s, status=%s)",
                self.content_type.value,
                item.id,
                item.slug,
                item.status.value,
            )
            return item

        raise ConflictError(f"{self.label} slug could not be resolved")

    def update(self, identifier: str, payload: ContentItemUpdate) -> ContentItem:
        """Apply the fields present in ``payload``.

        A new slug is normalized but not checked against other items. Sending
        ``status`` always recomputes ``published_at``, even when the item is
        already published. Sending ``tag_ids`` replaces the whole tag set.
        """
        item = self.get_by_id_or_slug(identifier)
        updates = payload.model_dump(exclude_unset=True)
        tag_ids = updates.pop("tag_ids", None)

        for field in ("title", "content"):
            if field in updates and not (updates[field] or "").strip():
                raise ValidationError(f"{field} cannot be empty")

        if "slug" in updates:
            slug = normalize(updates["slug"], settings.slug_max_length)
            if not slug:
                raise ValidationError("slug cannot be empty")
            updates["slug"] = slug

        if "category_id" in updates:
            updates["category_id"] = self._validated_category_id(updates["category_id"])

        if "status" in updates:
            status = updates["status"]
            if status is None:
                updates.pop("status")
            else:
                updates["published_at"] = (
                    _utcnow() if status == ContentStatus.PUBLISHED else None
                )

        tags = self._load_tags(tag_ids) if tag_ids is not None else None

        for field, value in updates.items():
            setattr(item, field, value)
        if tags is not None:
            item.tags = tags
        item.updated_at = _utcnow()
        # The rollback on failure expires `item`.
        slug = item.slug

        try:
            self._commit("update")
        except IntegrityError as exc:
            raise ConflictError(f"{self.label} slug '{slug}' is already in use") from exc

        self.db.refresh(item)
        logger.info(
            "Updated %s %s (fields=%s)",
            self.content_type.value,
            item.id,
            ",".join(sorted(updates)) + (",tag_ids" if tags is not None else ""),
        )
        return item

    def remove(self, identifier: str) -> None:
        """Hard delete an item. Tag links and comments cascade."""
        item = self.get_by_id_or_slug(identifier)
        item_id = item.id
        self.db.delete(item)
        self._commit("delete")
        logger.info("Deleted %s %s", self.content_type.value, item_id)

    def related(self, identifier: str, limit: int | None = None) -> list[ContentItem]:
        """Published items sharing the item's category, most recent first.

        Uncategorized items get the most recent published items instead.
        Storage failures degrade to an empty list.
        """
        item = self.get_by_id_or_slug(identifier)
        limit = limit if limit and limit > 0 else settings.related_limit
        try:
            query = self._base_query().filter(
                ContentItem.status == ContentStatus.PUBLISHED,
                ContentItem.id != item.id,
            )
            if item.category_id:
                query = query.filter(ContentItem.category_id == item.category_id)
            return self._ordered(query).limit(limit).all()
        except SQLAlchemyError:
            logger.exception(
                "Failed to load related %s items for %s", self.content_type.value, item.id
            )
            return []
