"""Composable predicates over media collections.

Every predicate takes the collection and an optional constraint and returns
the matching items in their original order. An absent constraint returns the
input unchanged.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

from media_mcp_server.entities import Genred, Tagged, Titled, Yeared

T = TypeVar("T")
TitledT = TypeVar("TitledT", bound=Titled)
YearedT = TypeVar("YearedT", bound=Yeared)
GenredT = TypeVar("GenredT", bound=Genred)
TaggedT = TypeVar("TaggedT", bound=Tagged)


def _matches_members(
    values: Sequence[Any] | None, wanted: Sequence[Any], match_all: bool
) -> bool:
    if not values:
        return False
    if match_all:
        return all(item in values for item in wanted)
    return any(item in values for item in wanted)


def filter_by_title(
    items: Sequence[TitledT], title: str | None
) -> Sequence[TitledT]:
    """Keep items whose title contains ``title``, ignoring case."""
    if not title:
        return items
    needle = title.lower()
    return [item for item in items if needle in item.title.lower()]


def filter_by_year_range(
    items: Sequence[YearedT], year_from: int | None, year_to: int | None
) -> Sequence[YearedT]:
    """Keep items released within the inclusive ``[year_from, year_to]`` range."""
    if year_from is None and year_to is None:
        return items
    return [
        item
        for item in items
        if (year_from is None or item.year >= year_from)
        and (year_to is None or item.year <= year_to)
    ]


def filter_by_genres(
    items: Sequence[GenredT],
    genres: Sequence[str] | None,
    match_all: bool = False,
) -> Sequence[GenredT]:
    """Keep items sharing at least one genre (or all of them with ``match_all``)."""
    if not genres:
        return items
    return [item for item in items if _matches_members(item.genres, genres, match_all)]


def filter_by_tags(
    items: Sequence[TaggedT],
    tags: Sequence[int] | None,
    match_all: bool = False,
) -> Sequence[TaggedT]:
    """Keep items sharing at least one tag id (or all of them with ``match_all``)."""
    if not tags:
        return items
    return [item for item in items if _matches_members(item.tags, tags, match_all)]


def filter_by_exact(items: Sequence[T], attribute: str, value: Any) -> Sequence[T]:
    """Keep items whose ``attribute`` equals ``value``."""
    if value is None:
        return items
    return [item for item in items if getattr(item, attribute, None) == value]


def filter_by_substring(
    items: Sequence[T], attribute: str, value: str | None
) -> Sequence[T]:
    """Keep items whose text ``attribute`` contains ``value``, ignoring case.

    Items without the attribute never match.
    """
    if not value:
        return items
    needle = value.lower()
    matched = []
    for item in items:
        text = getattr(item, attribute, None)
        if isinstance(text, str) and needle in text.lower():
            matched.append(item)
    return matched
