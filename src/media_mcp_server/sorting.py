"""Sort engine for media collections.

A sort request names one logical field. The field is resolved once into a
:class:`SortExtractor`: either a direct attribute of the entity, or an
aggregate counter nested in a sub-record (series ``statistics``). The sort is
stable, and items missing a direct field always come after items that have
it, whatever the direction.
"""

from __future__ import annotations

import functools
import locale
import unicodedata
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Literal, TypeVar, Union

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")

SortDirection = Literal["asc", "desc"]

MovieSortField = Literal[
    "title", "year", "added", "sizeOnDisk", "qualityProfileId", "runtime"
]
SeriesSortField = Literal[
    "title",
    "year",
    "added",
    "sizeOnDisk",
    "qualityProfileId",
    "runtime",
    "episodeCount",
]


class SortSpec(BaseModel):
    """Single-field sort request."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    field: str
    direction: SortDirection


class MovieSort(SortSpec):
    """Sort request for the movie collection."""

    field: MovieSortField


class SeriesSort(SortSpec):
    """Sort request for the series collection."""

    field: SeriesSortField


@dataclass(frozen=True)
class DirectField:
    """Read the sort key straight from an entity attribute."""

    attribute: str

    def extract(self, item: Any) -> Any:
        return getattr(item, self.attribute, None)


@dataclass(frozen=True)
class NestedAggregate:
    """Read the sort key from a counter inside a nested sub-record."""

    container: str
    attribute: str
    default: int | float = 0

    def extract(self, item: Any) -> int | float:
        record = getattr(item, self.container, None)
        value = getattr(record, self.attribute, None) if record is not None else None
        return self.default if value is None else value


SortExtractor = Union[DirectField, NestedAggregate]

MOVIE_SORT_FIELDS: dict[str, SortExtractor] = {
    "title": DirectField("title"),
    "year": DirectField("year"),
    "added": DirectField("added"),
    "sizeOnDisk": DirectField("size_on_disk"),
    "qualityProfileId": DirectField("quality_profile_id"),
    "runtime": DirectField("runtime"),
}

SERIES_SORT_FIELDS: dict[str, SortExtractor] = {
    "title": DirectField("title"),
    "year": DirectField("year"),
    "added": DirectField("added"),
    "sizeOnDisk": NestedAggregate("statistics", "size_on_disk"),
    "qualityProfileId": DirectField("quality_profile_id"),
    "runtime": DirectField("runtime"),
    "episodeCount": NestedAggregate("statistics", "episode_count"),
}


def resolve_extractor(
    field: str, extractors: Mapping[str, SortExtractor]
) -> SortExtractor:
    """Return the extractor registered for ``field``.

    Unregistered fields are read as a direct attribute of the same name.
    """
    return extractors.get(field, DirectField(field))


def _base_letters(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


def _compare_text(left: str, right: str) -> int:
    # Accents and case only break ties, so "Élite" sorts with the E titles.
    result = locale.strcoll(_base_letters(left), _base_letters(right))
    if result == 0:
        result = locale.strcoll(left.casefold(), right.casefold())
    if result == 0:
        result = locale.strcoll(left, right)
    return (result > 0) - (result < 0)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _compare_numbers(left: int | float, right: int | float) -> int:
    return (left > right) - (left < right)


def compare_values(left: Any, right: Any) -> int:
    """Three-way comparison of two present sort keys.

    Strings use locale collation, numbers compare numerically, and any other
    pairing falls back to comparing the string forms.
    """
    if isinstance(left, str) and isinstance(right, str):
        return _compare_text(left, right)
    if _is_number(left) and _is_number(right):
        return _compare_numbers(left, right)
    return _compare_text(str(left), str(right))


def sort_items(
    items: Sequence[T],
    spec: SortSpec | None,
    extractors: Mapping[str, SortExtractor],
) -> Sequence[T]:
    """Return ``items`` ordered by ``spec``.

    Returns ``items`` itself when ``spec`` is ``None``.
    """
    if spec is None:
        return items

    multiplier = 1 if spec.direction == "asc" else -1
    extractor = resolve_extractor(spec.field, extractors)

    if isinstance(extractor, NestedAggregate):
        return sorted(
            items,
            key=functools.cmp_to_key(
                lambda a, b: _compare_numbers(
                    extractor.extract(a), extractor.extract(b)
                )
                * multiplier
            ),
        )

    keyed = [(extractor.extract(item), item) for item in items]
    present = [pair for pair in keyed if pair[0] is not None]
    missing = [item for value, item in keyed if value is None]
    present.sort(
        key=functools.cmp_to_key(
            lambda a, b: compare_values(a[0], b[0]) * multiplier
        )
    )
    return [item for _, item in present] + missing

