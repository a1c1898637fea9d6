"""Shared helpers for media library tools."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import Field

from media_mcp.tools import ToolParameters
from media_mcp_server.entities import MediaEntity
from media_mcp_server.filtering import FilterCriteria, apply_filters
from media_mcp_server.pagination import paginate
from media_mcp_server.sorting import SortExtractor, SortSpec, sort_items


class PageParams(ToolParameters):
    """Pagination parameters shared by collection tools."""

    limit: int | None = Field(
        default=None, ge=0, description="Maximum number of results to return"
    )
    skip: int | None = Field(
        default=None, description="Number of results to skip (for pagination)"
    )


class EntityIdParams(ToolParameters):
    """Parameters for tools addressing a single record by id."""

    id: int = Field(description="Upstream record id")


def collection_page(
    items: Sequence[MediaEntity],
    criteria: FilterCriteria | None,
    sort: SortSpec | None,
    extractors: Mapping[str, SortExtractor],
    limit: int | None,
    skip: int | None,
) -> dict[str, Any]:
    """Filter, sort and paginate ``items`` into a JSON page envelope."""
    filtered = apply_filters(items, criteria)
    ordered = sort_items(filtered, sort, extractors)
    page = paginate(ordered, limit=limit, skip=skip)
    return page.to_dict(lambda entity: entity.to_payload())
