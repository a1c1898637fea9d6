"""Media entities and the capabilities the collection engines rely on.

Entities are immutable snapshots of upstream records. They accept the
upstream camelCase JSON, keep fields this package does not model so that
payloads pass through untouched, and expose snake_case attributes to Python
code.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Titled(Protocol):
    """Entity with a display title."""

    @property
    def title(self) -> str: ...


class Yeared(Protocol):
    """Entity with a release year."""

    @property
    def year(self) -> int: ...


class Genred(Protocol):
    """Entity that may carry genre names."""

    @property
    def genres(self) -> Sequence[str] | None: ...


class Tagged(Protocol):
    """Entity that may carry tag ids."""

    @property
    def tags(self) -> Sequence[int] | None: ...


class MediaEntity(BaseModel):
    """Base model for upstream media records."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="allow",
    )

    id: int | None = None
    title: str
    year: int = 0
    genres: tuple[str, ...] | None = None
    tags: tuple[int, ...] | None = None
    monitored: bool | None = None
    quality_profile_id: int | None = None
    status: str | None = None
    added: str | None = None
    runtime: int | None = None
    imdb_id: str | None = None
    tmdb_id: int | None = None

    def to_payload(self) -> dict[str, Any]:
        """Return the record as upstream-shaped JSON data."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Movie(MediaEntity):
    """A movie tracked by the movie collection manager."""

    has_file: bool | None = None
    minimum_availability: str | None = None
    size_on_disk: int | None = None


class SeriesStatistics(BaseModel):
    """Aggregate counters reported for a series."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="allow",
    )

    season_count: int | None = None
    episode_file_count: int | None = None
    episode_count: int | None = None
    total_episode_count: int | None = None
    size_on_disk: int | None = None
    percent_of_episodes: float | None = None


class Series(MediaEntity):
    """A series tracked by the TV collection manager."""

    network: str | None = None
    series_type: str | None = None
    tvdb_id: int | None = None
    statistics: SeriesStatistics | None = None
