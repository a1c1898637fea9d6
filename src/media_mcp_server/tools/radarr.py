"""Movie collection tools."""

from __future__ import annotations

from pydantic import Field

from media_mcp.tools import ToolDefinition
from media_mcp_server.errors import MCPError, raise_mcp_error
from media_mcp_server.filtering import MovieFilters
from media_mcp_server.library import MediaLibrary
from media_mcp_server.sorting import MOVIE_SORT_FIELDS, MovieSort
from media_mcp_server.tools.common import EntityIdParams, PageParams, collection_page


class GetMoviesParams(PageParams):
    """Parameters for radarr_get_movies."""

    filters: MovieFilters | None = Field(
        default=None, description="Filter options for movies"
    )
    sort: MovieSort | None = Field(default=None, description="Sort options")


def get_movies_tool(library: MediaLibrary) -> ToolDefinition:
    """Create the radarr_get_movies tool."""

    def handler(raw_params: dict[str, object]) -> dict[str, object]:
        try:
            params = GetMoviesParams.model_validate(raw_params)
            return collection_page(
                library.movies(),
                params.filters,
                params.sort,
                MOVIE_SORT_FIELDS,
                params.limit,
                params.skip,
            )
        except MCPError as error:
            raise error
        except Exception as exc:  # pragma: no cover - defensive path
            raise_mcp_error("ListError", "Failed to list movies", str(exc))

    return ToolDefinition(
        name="radarr_get_movies",
        description=(
            "Get movies in the Radarr library with optional filtering, sorting "
            "and pagination."
        ),
        parameters_model=GetMoviesParams,
        handler=handler,
    )


def get_movie_tool(library: MediaLibrary) -> ToolDefinition:
    """Create the radarr_get_movie tool."""

    def handler(raw_params: dict[str, object]) -> dict[str, object]:
        try:
            params = EntityIdParams.model_validate(raw_params)
            return library.get_movie(params.id).to_payload()
        except MCPError as error:
            raise error
        except Exception as exc:  # pragma: no cover - defensive path
            raise_mcp_error("LookupError", "Failed to read movie", str(exc))

    return ToolDefinition(
        name="radarr_get_movie",
        description="Get details of a specific movie.",
        parameters_model=EntityIdParams,
        handler=handler,
    )
