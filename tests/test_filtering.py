"""Tests for the collection filter engine."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from media_mcp_server.entities import Movie, Series
from media_mcp_server.filtering import MovieFilters, SeriesFilters, apply_filters


def test_absent_criteria_returns_input(movies: list[Movie]) -> None:
    """No criteria means the very same collection comes back."""
    assert apply_filters(movies, None) is movies


def test_empty_criteria_keeps_everything(movies: list[Movie]) -> None:
    """Criteria with no present field keep all items in order."""
    result = apply_filters(movies, MovieFilters())

    assert [movie.id for movie in result] == [1, 2, 3, 4]


def test_constraints_are_and_combined(movies: list[Movie]) -> None:
    """Every present constraint must hold."""
    criteria = MovieFilters.model_validate(
        {"title": "matrix", "hasFile": True, "yearFrom": 2000}
    )

    assert [movie.id for movie in apply_filters(movies, criteria)] == [3]


@pytest.mark.parametrize(
    ("title", "year_from"),
    [("matrix", 2000), ("the", 1990), ("a", 2017), ("zzz", None)],
)
def test_combined_filter_equals_sequential_filters(
    movies: list[Movie], title: str, year_from: int | None
) -> None:
    """Filtering on two fields at once matches filtering on each in turn."""
    combined = apply_filters(
        movies, MovieFilters(title=title, year_from=year_from)
    )
    sequential = apply_filters(
        apply_filters(movies, MovieFilters(title=title)),
        MovieFilters(year_from=year_from),
    )

    assert list(combined) == list(sequential)


def test_movie_specific_fields(movies: list[Movie]) -> None:
    """Movie criteria cover availability, tags and external ids."""
    assert [
        movie.id
        for movie in apply_filters(
            movies, MovieFilters.model_validate({"minimumAvailability": "announced"})
        )
    ] == [2]
    assert [
        movie.id
        for movie in apply_filters(
            movies, MovieFilters.model_validate({"tags": [1], "qualityProfileId": 6})
        )
    ] == [4]
    assert [
        movie.id
        for movie in apply_filters(
            movies, MovieFilters.model_validate({"imdbId": "tt0133093", "tmdbId": 603})
        )
    ] == [1]


def test_series_specific_fields(series: list[Series]) -> None:
    """Series criteria cover network, status, type and tvdb id."""
    criteria = SeriesFilters.model_validate(
        {"network": "amc", "status": "ended", "seriesType": "standard"}
    )
    assert [item.id for item in apply_filters(series, criteria)] == [10, 13]

    by_tvdb = SeriesFilters.model_validate({"tvdbId": 353546})
    assert [item.id for item in apply_filters(series, by_tvdb)] == [12]


def test_series_genre_and_monitored(series: list[Series]) -> None:
    """Genre any-of combines with the monitored flag."""
    criteria = SeriesFilters.model_validate(
        {"genres": ["Crime", "Mystery"], "monitored": True, "yearTo": 2015}
    )

    assert [item.id for item in apply_filters(series, criteria)] == [10, 13]


def test_unknown_criteria_field_is_rejected() -> None:
    """Criteria models reject fields they do not define."""
    with pytest.raises(ValidationError):
        MovieFilters.model_validate({"network": "AMC"})
