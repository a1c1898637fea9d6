"""Offset/limit pagination for filtered collections."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PageResult(Generic[T]):
    """One page of a collection.

    Attributes:
        data: Items on this page.
        total: Size of the collection before slicing.
        returned: Number of items on this page.
        skip: Effective offset of the page.
        limit: Requested page size, ``None`` when no limit was requested.
    """

    data: list[T]
    total: int
    returned: int
    skip: int
    limit: int | None

    def to_dict(
        self, serialize: Callable[[T], Any] | None = None
    ) -> dict[str, Any]:
        """Return the JSON envelope, serializing each item with ``serialize``."""
        data = [serialize(item) for item in self.data] if serialize else list(self.data)
        return {
            "data": data,
            "total": self.total,
            "returned": self.returned,
            "skip": self.skip,
            "limit": self.limit,
        }


def paginate(
    items: Sequence[T], limit: int | None = None, skip: int | None = None
) -> PageResult[T]:
    """Slice ``items`` into a page.

    ``skip`` defaults to 0 and is clamped at 0. Without ``limit`` the page
    holds everything after ``skip``.
    """
    start = max(skip or 0, 0)
    if limit is None:
        page = list(items[start:])
    else:
        page = list(items[start : start + max(limit, 0)])
    return PageResult(
        data=page, total=len(items), returned=len(page), skip=start, limit=limit
    )
