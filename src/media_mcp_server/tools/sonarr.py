"""Series collection tools."""

from __future__ import annotations

from pydantic import Field

from media_mcp.tools import ToolDefinition
from media_mcp_server.errors import MCPError, raise_mcp_error
from media_mcp_server.filtering import SeriesFilters
from media_mcp_server.library import MediaLibrary
from media_mcp_server.sorting import SERIES_SORT_FIELDS, SeriesSort
from media_mcp_server.tools.common import EntityIdParams, PageParams, collection_page


class GetSeriesParams(PageParams):
    """Parameters for sonarr_get_series."""

    filters: SeriesFilters | None = Field(
        default=None, description="Filter options for series"
    )
    sort: SeriesSort | None = Field(default=None, description="Sort options")


def get_series_tool(library: MediaLibrary) -> ToolDefinition:
    """Create the sonarr_get_series tool."""

    def handler(raw_params: dict[str, object]) -> dict[str, object]:
        try:
            params = GetSeriesParams.model_validate(raw_params)
            return collection_page(
                library.series(),
                params.filters,
                params.sort,
                SERIES_SORT_FIELDS,
                params.limit,
                params.skip,
            )
        except MCPError as error:
            raise error
        except Exception as exc:  # pragma: no cover - defensive path
            raise_mcp_error("ListError", "Failed to list series", str(exc))

    return ToolDefinition(
        name="sonarr_get_series",
        description=(
            "Get series in the Sonarr library with optional filtering, sorting "
            "and pagination. Sorting by sizeOnDisk or episodeCount uses the "
            "series statistics."
        ),
        parameters_model=GetSeriesParams,
        handler=handler,
    )


def get_series_by_id_tool(library: MediaLibrary) -> ToolDefinition:
    """Create the sonarr_get_series_by_id tool."""

    def handler(raw_params: dict[str, object]) -> dict[str, object]:
        try:
            params = EntityIdParams.model_validate(raw_params)
            return library.get_series(params.id).to_payload()
        except MCPError as error:
            raise error
        except Exception as exc:  # pragma: no cover - defensive path
            raise_mcp_error("LookupError", "Failed to read series", str(exc))

    return ToolDefinition(
        name="sonarr_get_series_by_id",
        description="Get details of a specific series.",
        parameters_model=EntityIdParams,
        handler=handler,
    )
