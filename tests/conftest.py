"""Shared test fixtures."""

from __future__ import annotations

import pytest

from media_mcp_server.entities import Movie, Series
from media_mcp_server.library import MediaLibrary

_ENV_VARS = (
    "TOOL_PROFILE",
    "TOOL_BRANCHES",
    "TOOL_EXCLUDE",
    "TOOL_INCLUDE",
    "TOOL_CONFIG_PATH",
    "MEDIA_LIBRARY_PATH",
    "LOG_LEVEL",
    "LOG_FORMAT",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the host environment from leaking into settings."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def anyio_backend() -> str:
    """Run anyio-marked tests on asyncio, the backend FastMCP's client uses."""
    return "asyncio"


@pytest.fixture()
def movies() -> list[Movie]:
    """Provide a small movie collection in upstream order."""
    return [
        Movie.model_validate(item)
        for item in [
            {
                "id": 1,
                "title": "The Matrix",
                "year": 1999,
                "genres": ["Action", "Science Fiction"],
                "tags": [1],
                "monitored": True,
                "hasFile": True,
                "qualityProfileId": 4,
                "minimumAvailability": "released",
                "status": "released",
                "imdbId": "tt0133093",
                "tmdbId": 603,
                "sizeOnDisk": 8_000,
                "runtime": 136,
                "added": "2021-03-01T10:00:00Z",
                "path": "/movies/The Matrix (1999)",
            },
            {
                "id": 2,
                "title": "Arrival",
                "year": 2016,
                "genres": ["Drama", "Science Fiction"],
                "tags": [2],
                "monitored": True,
                "hasFile": False,
                "qualityProfileId": 6,
                "minimumAvailability": "announced",
                "status": "released",
                "imdbId": "tt2543164",
                "tmdbId": 329865,
                "runtime": 116,
                "added": "2022-06-10T10:00:00Z",
            },
            {
                "id": 3,
                "title": "The Matrix Resurrections",
                "year": 2021,
                "genres": ["Action"],
                "monitored": False,
                "hasFile": True,
                "qualityProfileId": 4,
                "minimumAvailability": "released",
                "status": "released",
                "imdbId": "tt10838180",
                "tmdbId": 624860,
                "sizeOnDisk": 12_000,
                "runtime": 148,
                "added": "2022-01-05T10:00:00Z",
            },
            {
                "id": 4,
                "title": "Paddington 2",
                "year": 2017,
                "genres": [],
                "tags": [1, 2],
                "monitored": True,
                "hasFile": True,
                "qualityProfileId": 6,
                "minimumAvailability": "released",
                "status": "released",
                "tmdbId": 346648,
                "sizeOnDisk": 5_000,
                "runtime": 103,
            },
        ]
    ]


@pytest.fixture()
def series() -> list[Series]:
    """Provide a small series collection in upstream order."""
    return [
        Series.model_validate(item)
        for item in [
            {
                "id": 10,
                "title": "Breaking Bad",
                "year": 2008,
                "genres": ["Drama", "Crime"],
                "tags": [3],
                "monitored": True,
                "network": "AMC",
                "seriesType": "standard",
                "qualityProfileId": 1,
                "status": "ended",
                "tvdbId": 81189,
                "statistics": {"episodeCount": 62, "sizeOnDisk": 300_000},
            },
            {
                "id": 11,
                "title": "Severance",
                "year": 2022,
                "genres": ["Drama", "Mystery"],
                "monitored": True,
                "network": "Apple TV+",
                "seriesType": "standard",
                "qualityProfileId": 2,
                "status": "continuing",
                "tvdbId": 371980,
                "statistics": {"episodeCount": 19, "sizeOnDisk": 90_000},
            },
            {
                "id": 12,
                "title": "Bluey",
                "year": 2018,
                "genres": ["Animation", "Children"],
                "tags": [3, 4],
                "monitored": False,
                "network": "ABC Kids",
                "seriesType": "standard",
                "qualityProfileId": 1,
                "status": "continuing",
                "tvdbId": 353546,
            },
            {
                "id": 13,
                "title": "Better Call Saul",
                "year": 2015,
                "genres": ["Drama", "Crime"],
                "monitored": True,
                "network": "AMC",
                "seriesType": "standard",
                "qualityProfileId": 2,
                "status": "ended",
                "tvdbId": 273181,
                "statistics": {"episodeCount": 63, "sizeOnDisk": 300_000},
            },
        ]
    ]


@pytest.fixture()
def library(movies: list[Movie], series: list[Series]) -> MediaLibrary:
    """Provide a library populated with the sample collections."""
    return MediaLibrary(movies, series)
