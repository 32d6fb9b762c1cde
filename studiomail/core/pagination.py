"""Offset pagination for list endpoints."""

from typing import Generic, TypeVar

from pydantic import BaseModel, computed_field

T = TypeVar("T")

DEFAULT_LIMIT = 50
MAX_LIMIT = 100


class Page(BaseModel, Generic[T]):
    items: list[T]
    limit: int
    offset: int
    total: int

    @computed_field
    @property
    def has_more(self) -> bool:
        return self.offset + len(self.items) < self.total


def paginate(limit: int | None, offset: int | None) -> tuple[int, int]:
    """Clamp query params to ``1 <= limit <= MAX_LIMIT`` and ``offset >= 0``."""
    limit = DEFAULT_LIMIT if limit is None else max(1, min(limit, MAX_LIMIT))
    return limit, max(0, offset or 0)
