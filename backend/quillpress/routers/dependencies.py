"""Shared query-parameter dependencies."""
from fastapi import Query

from quillpress.services.pagination import PageParams


def get_page_params(
    page: str | None = Query(default=None),
    page_size: str | None = Query(default=None, alias="pageSize"),
) -> PageParams:
    """Lenient page/pageSize parsing: bad values fall back to defaults."""
    return PageParams.coerce(page, page_size)
