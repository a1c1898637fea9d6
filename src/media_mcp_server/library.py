"""In-memory media library holding movie and series snapshots."""

from __future__ import annotations

import json
import threading
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from media_mcp_server.entities import Movie, Series
from media_mcp_server.errors import raise_mcp_error


class MediaLibrary:
    """Thread-safe holder of the movie and series collections.

    Collections are replaced wholesale; readers always get an immutable
    snapshot.
    """

    def __init__(
        self,
        movies: Iterable[Movie] = (),
        series: Iterable[Series] = (),
    ) -> None:
        """Initialize the library with optional starting collections."""
        self._movies: tuple[Movie, ...] = tuple(movies)
        self._series: tuple[Series, ...] = tuple(series)
        self._lock = threading.Lock()

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> MediaLibrary:
        """Build a library from upstream-shaped JSON data.

        Raises:
            MCPError: If the payload does not describe valid records.
        """
        for key in ("movies", "series"):
            if not isinstance(payload.get(key, []), list):
                raise_mcp_error(
                    "LibraryError",
                    "Invalid media library payload",
                    f"'{key}' must be a list",
                )
        try:
            movies = [Movie.model_validate(item) for item in payload.get("movies", [])]
            series = [Series.model_validate(item) for item in payload.get("series", [])]
        except ValidationError as exc:
            raise_mcp_error("LibraryError", "Invalid media library payload", str(exc))
        return cls(movies, series)

    @classmethod
    def from_file(cls, path: Path) -> MediaLibrary:
        """Load a library snapshot from a JSON file.

        Raises:
            MCPError: If the file cannot be read or parsed.
        """
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise_mcp_error(
                "LibraryError", f"Failed to load media library from {path}", str(exc)
            )
        if not isinstance(payload, dict):
            raise_mcp_error(
                "LibraryError", f"Media library file {path} must hold a JSON object"
            )
        return cls.from_payload(payload)

    def replace_movies(self, movies: Iterable[Movie]) -> None:
        snapshot = tuple(movies)
        with self._lock:
            self._movies = snapshot

    def replace_series(self, series: Iterable[Series]) -> None:
        snapshot = tuple(series)
        with self._lock:
            self._series = snapshot

    def movies(self) -> tuple[Movie, ...]:
        with self._lock:
            return self._movies

    def series(self) -> tuple[Series, ...]:
        with self._lock:
            return self._series

    def get_movie(self, movie_id: int) -> Movie:
        """Return the movie with ``movie_id`` or raise a ``NotFound`` error."""
        for movie in self.movies():
            if movie.id == movie_id:
                return movie
        raise_mcp_error("NotFound", f"Movie with id {movie_id} not found")

    def get_series(self, series_id: int) -> Series:
        """Return the series with ``series_id`` or raise a ``NotFound`` error."""
        for item in self.series():
            if item.id == series_id:
                return item
        raise_mcp_error("NotFound", f"Series with id {series_id} not found")
