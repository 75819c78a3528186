"""Paginated response envelope."""
from typing import Generic, TypeVar

from quillpress.schemas.base import CamelModel

T = TypeVar("T")


class Page(CamelModel, Generic[T]):
    """One window of an ordered, filtered result set."""

    data: list[T]
    page: int
    page_size: int
    total: int
