"""Collection filter engine for movies and series.

Upstream collection managers return their whole library with no server-side
filtering, so narrowing happens here. Each criteria model owns a fixed plan of
steps; absent fields are skipped and present ones are AND-combined.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from media_mcp_server.predicates import (
    filter_by_exact,
    filter_by_genres,
    filter_by_substring,
    filter_by_tags,
    filter_by_title,
    filter_by_year_range,
)

T = TypeVar("T")

FilterStep = Callable[[Sequence[Any], Any], Sequence[Any]]


def _title_step(items: Sequence[Any], criteria: Any) -> Sequence[Any]:
    return filter_by_title(items, criteria.title)


def _genres_step(items: Sequence[Any], criteria: Any) -> Sequence[Any]:
    return filter_by_genres(items, criteria.genres)


def _year_step(items: Sequence[Any], criteria: Any) -> Sequence[Any]:
    return filter_by_year_range(items, criteria.year_from, criteria.year_to)


def _tags_step(items: Sequence[Any], criteria: Any) -> Sequence[Any]:
    return filter_by_tags(items, criteria.tags)


def _exact_step(attribute: str) -> FilterStep:
    def step(items: Sequence[Any], criteria: Any) -> Sequence[Any]:
        return filter_by_exact(items, attribute, getattr(criteria, attribute))

    return step


def _substring_step(attribute: str) -> FilterStep:
    def step(items: Sequence[Any], criteria: Any) -> Sequence[Any]:
        return filter_by_substring(items, attribute, getattr(criteria, attribute))

    return step


class FilterCriteria(BaseModel):
    """Fields shared by every media criteria model."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )

    plan: ClassVar[tuple[FilterStep, ...]] = ()

    title: str | None = None
    genres: list[str] | None = None
    year_from: int | None = None
    year_to: int | None = None
    monitored: bool | None = None
    quality_profile_id: int | None = None
    tags: list[int] | None = None
    imdb_id: str | None = None
    tmdb_id: int | None = None


class MovieFilters(FilterCriteria):
    """Filter options for the movie collection."""

    plan: ClassVar[tuple[FilterStep, ...]] = (
        _title_step,
        _genres_step,
        _year_step,
        _exact_step("monitored"),
        _exact_step("has_file"),
        _exact_step("quality_profile_id"),
        _exact_step("minimum_availability"),
        _tags_step,
        _exact_step("imdb_id"),
        _exact_step("tmdb_id"),
    )

    has_file: bool | None = None
    minimum_availability: str | None = None


class SeriesFilters(FilterCriteria):
    """Filter options for the series collection."""

    plan: ClassVar[tuple[FilterStep, ...]] = (
        _title_step,
        _genres_step,
        _year_step,
        _exact_step("monitored"),
        _substring_step("network"),
        _exact_step("series_type"),
        _exact_step("quality_profile_id"),
        _exact_step("status"),
        _tags_step,
        _exact_step("imdb_id"),
        _exact_step("tmdb_id"),
        _exact_step("tvdb_id"),
    )

    network: str | None = None
    series_type: str | None = None
    status: str | None = None
    tvdb_id: int | None = None


def apply_filters(items: Sequence[T], criteria: FilterCriteria | None) -> Sequence[T]:
    """Apply every present constraint of ``criteria`` to ``items``.

    Returns ``items`` itself when ``criteria`` is ``None``.
    """
    if criteria is None:
        return items
    filtered: Sequence[Any] = items
    for step in criteria.plan:
        filtered = step(filtered, criteria)
    return filtered
