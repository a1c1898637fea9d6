"""Tool catalog: named branches of tools and the profiles built from them.

A branch groups tool names by theme. A profile is a curated union of branches
offered to operators as one capability level. Resolving an unknown profile is
an error; unknown branch names are skipped, since a branch list may mention
branches a given deployment does not ship.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from media_mcp_server.errors import UnknownProfileError


@dataclass(frozen=True)
class ToolBranch:
    """A named group of tool names sharing a functional theme."""

    name: str
    description: str
    tools: frozenset[str]


@dataclass(frozen=True)
class ToolProfile:
    """A named union of branches."""

    name: str
    description: str
    branches: tuple[str, ...]


class ToolCatalog:
    """Registry of branches and profiles with set-based resolution."""

    def __init__(
        self, branches: Iterable[ToolBranch], profiles: Iterable[ToolProfile]
    ) -> None:
        """Index ``branches`` and ``profiles``.

        Raises:
            ValueError: On duplicate names, a name shared by a branch and a
                profile, or a profile referencing an unregistered branch.
        """
        self._branches: dict[str, ToolBranch] = {}
        for branch in branches:
            if branch.name in self._branches:
                raise ValueError(f"Duplicate tool branch '{branch.name}'")
            self._branches[branch.name] = branch

        self._profiles: dict[str, ToolProfile] = {}
        for profile in profiles:
            if profile.name in self._profiles:
                raise ValueError(f"Duplicate tool profile '{profile.name}'")
            if profile.name in self._branches:
                raise ValueError(
                    f"'{profile.name}' is registered as both a branch and a profile"
                )
            missing = [name for name in profile.branches if name not in self._branches]
            if missing:
                raise ValueError(
                    f"Profile '{profile.name}' references unknown branches: "
                    + ", ".join(missing)
                )
            self._profiles[profile.name] = profile

    @property
    def branches(self) -> list[ToolBranch]:
        return list(self._branches.values())

    @property
    def profiles(self) -> list[ToolProfile]:
        return list(self._profiles.values())

    def has_profile(self, name: str) -> bool:
        return name in self._profiles

    def profile_names(self) -> list[str]:
        return list(self._profiles)

    def resolve_profile(self, name: str) -> frozenset[str]:
        """Return the union of the tool sets of every branch in profile ``name``.

        Raises:
            UnknownProfileError: If ``name`` is not a registered profile.
        """
        profile = self._profiles.get(name)
        if profile is None:
            raise UnknownProfileError(name, self.profile_names())
        return self.resolve_branches(profile.branches)

    def resolve_branches(self, names: Iterable[str]) -> frozenset[str]:
        """Return the union of the tool sets of the named branches.

        Names that are not registered branches contribute nothing.
        """
        tools: set[str] = set()
        for name in names:
            branch = self._branches.get(name)
            if branch is not None:
                tools.update(branch.tools)
        return frozenset(tools)

    def branches_for_tool(self, tool_name: str) -> list[str]:
        """Names of the branches that contain ``tool_name``."""
        return [
            branch.name
            for branch in self._branches.values()
            if tool_name in branch.tools
        ]

    def all_tools(self) -> frozenset[str]:
        return self.resolve_branches(self._branches)


DEFAULT_BRANCHES: tuple[ToolBranch, ...] = (
    ToolBranch(
        name="discovery-add",
        description="Core functionality for discovering and adding new content",
        tools=frozenset(
            {
                # Metadata database discovery
                "tmdb_search_movies",
                "tmdb_search_tv",
                "tmdb_search_multi",
                "tmdb_get_trending",
                "tmdb_get_popular_movies",
                "tmdb_get_popular_tv",
                "tmdb_discover_movies",
                "tmdb_discover_tv",
                "tmdb_get_now_playing_movies",
                "tmdb_get_upcoming_movies",
                "tmdb_get_movie_recommendations",
                "tmdb_get_tv_recommendations",
                # Collection manager lookups and adds
                "radarr_search_movie",
                "radarr_add_movie",
                "sonarr_search_series",
                "sonarr_add_series",
                "plex_search",
                # Configuration needed for add operations
                "radarr_get_configuration",
                "sonarr_get_configuration",
            }
        ),
    ),
    ToolBranch(
        name="library-management",
        description="Managing existing content in your library",
        tools=frozenset(
            {
                "radarr_get_movies",
                "radarr_get_movie",
                "radarr_delete_movie",
                "radarr_update_movie",
                "sonarr_get_series",
                "sonarr_get_series_by_id",
                "sonarr_delete_series",
                "sonarr_update_series",
                "sonarr_get_episodes",
                "sonarr_get_episode",
                "sonarr_update_episode_monitoring",
                "plex_get_libraries",
                "plex_get_metadata",
            }
        ),
    ),
    ToolBranch(
        name="system-maintenance",
        description="System health checks and maintenance operations",
        tools=frozenset(
            {
                "radarr_get_system_status",
                "radarr_get_health",
                "radarr_refresh_movie",
                "radarr_refresh_all_movies",
                "radarr_disk_scan",
                "sonarr_get_system_status",
                "sonarr_get_health",
                "sonarr_refresh_series",
                "sonarr_refresh_all_series",
                "sonarr_disk_scan",
                "plex_get_capabilities",
                "plex_refresh_library",
            }
        ),
    ),
    ToolBranch(
        name="download-management",
        description="Queue and download operations",
        tools=frozenset(
            {
                "radarr_get_queue",
                "radarr_search_movie_releases",
                "sonarr_get_queue",
                "sonarr_search_series_episodes",
                "sonarr_search_season",
                "sonarr_search_episodes",
                "sonarr_get_calendar",
            }
        ),
    ),
    ToolBranch(
        name="metadata-enrichment",
        description="Advanced metadata features for deep content research",
        tools=frozenset(
            {
                "tmdb_get_movie_details",
                "tmdb_get_tv_details",
                "tmdb_get_similar_movies",
                "tmdb_get_similar_tv",
                "tmdb_search_people",
                "tmdb_get_popular_people",
                "tmdb_get_person_details",
                "tmdb_get_person_movie_credits",
                "tmdb_get_person_tv_credits",
                "tmdb_search_collections",
                "tmdb_get_collection_details",
                "tmdb_get_genres",
                "tmdb_get_certifications",
                "tmdb_get_watch_providers",
                "tmdb_get_configuration",
                "tmdb_get_countries",
                "tmdb_get_languages",
            }
        ),
    ),
    ToolBranch(
        name="advanced-search",
        description="External ID lookups and specialized search operations",
        tools=frozenset(
            {
                "tmdb_find_by_external_id",
                "tmdb_search_keywords",
                "tmdb_get_movies_by_keyword",
                "tmdb_get_top_rated_movies",
                "tmdb_get_top_rated_tv",
                "tmdb_get_on_the_air_tv",
                "tmdb_get_airing_today_tv",
            }
        ),
    ),
)

DEFAULT_PROFILES: tuple[ToolProfile, ...] = (
    ToolProfile(
        name="default",
        description="Essential discovery and add functionality (default)",
        branches=("discovery-add",),
    ),
    ToolProfile(
        name="minimal",
        description="Same as default - essential discovery and add functionality",
        branches=("discovery-add",),
    ),
    ToolProfile(
        name="curator",
        description="Discovery, add, and basic library management",
        branches=("discovery-add", "library-management"),
    ),
    ToolProfile(
        name="maintainer",
        description="Curator tools plus system maintenance",
        branches=("discovery-add", "library-management", "system-maintenance"),
    ),
    ToolProfile(
        name="power-user",
        description="All functionality except advanced search",
        branches=(
            "discovery-add",
            "library-management",
            "system-maintenance",
            "download-management",
            "metadata-enrichment",
        ),
    ),
    ToolProfile(
        name="full",
        description="All available tools",
        branches=(
            "discovery-add",
            "library-management",
            "system-maintenance",
            "download-management",
            "metadata-enrichment",
            "advanced-search",
        ),
    ),
)

DEFAULT_PROFILE = "default"

DEFAULT_CATALOG = ToolCatalog(DEFAULT_BRANCHES, DEFAULT_PROFILES)
