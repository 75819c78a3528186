"""Shared page/pageSize coercion and query windowing."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from sqlalchemy.orm import Query

from quillpress.config import settings


def _coerce_positive_int(value: Any, fallback: int, maximum: int | None = None) -> int:
    try:
        resolved = int(float(value))
    except (TypeError, ValueError, OverflowError):
        return fallback
    if resolved <= 0:
        return fallback
    if maximum is not None:
        return min(resolved, maximum)
    return resolved


@dataclass(frozen=True)
class PageParams:
    """Validated 1-based page number and page size."""

    page: int = 1
    page_size: int = 10

    @classmethod
    def coerce(cls, page: Any = None, page_size: Any = None) -> "PageParams":
        """Build params from raw query values, falling back to defaults."""
        return cls(
            page=_coerce_positive_int(page, 1),
            page_size=_coerce_positive_int(
                page_size, settings.default_page_size, settings.max_page_size
            ),
        )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


def paginate(
    query: Query,
    params: PageParams,
    transform: Callable[[Any], Any] | None = None,
) -> dict[str, Any]:
    """Apply the page window to ``query`` and build the response envelope.

    ``total`` counts every matching row, so a page past the end returns an
    empty ``data`` list with the real total.
    """
    total = query.order_by(None).count()
    rows = query.offset(params.offset).limit(params.page_size).all()
    data = [transform(row) for row in rows] if transform else rows
    return {
        "data": data,
        "page": params.page,
        "page_size": params.page_size,
        "total": total,
    }
