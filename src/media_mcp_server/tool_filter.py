"""Tool filter configuration and the enabled-tool predicate.

Configuration is layered, lowest precedence first:

1. built-in defaults (``profile="default"`` and empty lists),
2. the optional JSON file named by ``TOOL_CONFIG_PATH``,
3. the ``TOOL_PROFILE``, ``TOOL_BRANCHES``, ``TOOL_EXCLUDE`` and
   ``TOOL_INCLUDE`` environment variables, field by field.

Problems in any layer are logged and the previous layer's value is kept, so a
bad configuration never prevents tool registration. The enabled tool set is
``(profile ∪ branches) − exclude ∪ include``; include is applied last.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from media_mcp_server.catalog import DEFAULT_CATALOG, DEFAULT_PROFILE, ToolCatalog
from media_mcp_server.settings import ServerSettings

logger = structlog.get_logger(__name__)


class ToolFilterConfig(BaseModel):
    """Resolved tool filter configuration."""

    model_config = ConfigDict(frozen=True)

    profile: str = DEFAULT_PROFILE
    additional_branches: tuple[str, ...] = ()
    exclude_tools: tuple[str, ...] = ()
    include_tools: tuple[str, ...] = ()


class CustomOverrides(BaseModel):
    """``customOverrides`` section of the tool configuration file."""

    model_config = ConfigDict(extra="ignore")

    exclude: list[str] | None = None
    include: list[str] | None = None


class ToolConfigFile(BaseModel):
    """Shape of the JSON tool configuration file."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    tool_profile: str | None = Field(default=None, alias="toolProfile")
    enabled_branches: list[str] | None = Field(default=None, alias="enabledBranches")
    custom_overrides: CustomOverrides | None = Field(
        default=None, alias="customOverrides"
    )


def _parse_file_layer(content: str) -> dict[str, Any]:
    try:
        parsed = ToolConfigFile.model_validate(json.loads(content))
    except (json.JSONDecodeError, ValidationError) as exc:
        logger.warning("tool_config_file_invalid", error=str(exc))
        return {}

    layer: dict[str, Any] = {}
    if parsed.tool_profile:
        layer["profile"] = parsed.tool_profile
    if parsed.enabled_branches is not None:
        layer["additional_branches"] = tuple(parsed.enabled_branches)
    overrides = parsed.custom_overrides
    if overrides is not None and overrides.exclude is not None:
        layer["exclude_tools"] = tuple(overrides.exclude)
    if overrides is not None and overrides.include is not None:
        layer["include_tools"] = tuple(overrides.include)
    return layer


def _split_list(variable: str, raw: str | None) -> tuple[str, ...] | None:
    """Split a comma-separated environment value.

    Returns ``None`` when the variable is unset or holds no usable entry.
    """
    if not raw:
        return None
    entries = [entry.strip() for entry in raw.split(",")]
    names = tuple(entry for entry in entries if entry)
    if len(names) != len(entries):
        logger.warning("tool_env_list_malformed", variable=variable, value=raw)
    return names or None


def _parse_env_layer(settings: ServerSettings) -> dict[str, Any]:
    layer: dict[str, Any] = {}
    if settings.tool_profile and settings.tool_profile.strip():
        layer["profile"] = settings.tool_profile.strip()
    for variable, field_name, raw in (
        ("TOOL_BRANCHES", "additional_branches", settings.tool_branches),
        ("TOOL_EXCLUDE", "exclude_tools", settings.tool_exclude),
        ("TOOL_INCLUDE", "include_tools", settings.tool_include),
    ):
        names = _split_list(variable, raw)
        if names is not None:
            layer[field_name] = names
    return layer


def parse_tool_filter_config(
    file_content: str | None,
    settings: ServerSettings,
    catalog: ToolCatalog = DEFAULT_CATALOG,
) -> ToolFilterConfig:
    """Layer defaults, file content and environment into a configuration.

    An unknown profile name is replaced by ``"default"`` with a warning.
    """
    values: dict[str, Any] = ToolFilterConfig().model_dump()
    if file_content:
        values.update(_parse_file_layer(file_content))
    values.update(_parse_env_layer(settings))

    if not catalog.has_profile(values["profile"]):
        logger.warning(
            "tool_profile_unknown",
            profile=values["profile"],
            fallback=DEFAULT_PROFILE,
            known=catalog.profile_names(),
        )
        values["profile"] = DEFAULT_PROFILE

    return ToolFilterConfig(**values)


def read_tool_config_file(path: Path | None) -> str | None:
    """Read the tool configuration file, returning ``None`` if unavailable."""
    if path is None:
        return None
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        logger.warning("tool_config_file_unreadable", path=str(path), error=str(exc))
        return None


def load_tool_filter_config(
    settings: ServerSettings, catalog: ToolCatalog = DEFAULT_CATALOG
) -> ToolFilterConfig:
    """Build the configuration from ``settings`` and its optional config file."""
    content = read_tool_config_file(settings.tool_config_path)
    return parse_tool_filter_config(content, settings, catalog)


def resolve_enabled_tools(
    config: ToolFilterConfig, catalog: ToolCatalog = DEFAULT_CATALOG
) -> frozenset[str]:
    """Compute the enabled tool names for ``config``.

    Raises:
        UnknownProfileError: If ``config.profile`` is not in ``catalog``.
    """
    enabled = set(catalog.resolve_profile(config.profile))
    enabled |= catalog.resolve_branches(config.additional_branches)
    enabled -= set(config.exclude_tools)
    enabled |= set(config.include_tools)
    return frozenset(enabled)


class ToolFilter:
    """Predicate over tool names, fixed at construction."""

    def __init__(self, config: ToolFilterConfig, enabled_tools: frozenset[str]) -> None:
        self.config = config
        self._enabled = enabled_tools

    @property
    def enabled_tools(self) -> frozenset[str]:
        return self._enabled

    def is_enabled(self, tool_name: str) -> bool:
        return tool_name in self._enabled

    def __call__(self, tool_name: str) -> bool:
        return self.is_enabled(tool_name)


def create_tool_filter(
    config: ToolFilterConfig, catalog: ToolCatalog = DEFAULT_CATALOG
) -> ToolFilter:
    """Resolve ``config`` once and return the resulting :class:`ToolFilter`."""
    return ToolFilter(config, resolve_enabled_tools(config, catalog))


def log_tool_configuration(tool_filter: ToolFilter) -> None:
    """Log a summary of the resolved tool configuration."""
    config = tool_filter.config
    logger.info(
        "tool_configuration",
        profile=config.profile,
        additional_branches=list(config.additional_branches),
        excluded_tools=list(config.exclude_tools),
        included_tools=list(config.include_tools),
        enabled_tool_count=len(tool_filter.enabled_tools),
    )
