"""Process configuration loaded from environment variables.

Settings are built once by the entry points and handed to the code that needs
them; nothing in the package reads the environment on import.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseSettings):
    """Environment-backed settings for the media MCP server."""

    model_config = SettingsConfigDict(case_sensitive=False, extra="ignore")

    # Tool filtering. Lists are comma-separated and parsed by the tool filter
    # loader so that malformed entries can be reported instead of rejected.
    tool_profile: str | None = Field(
        default=None, description="Name of the tool profile to enable"
    )
    tool_branches: str | None = Field(
        default=None, description="Comma-separated branches added to the profile"
    )
    tool_exclude: str | None = Field(
        default=None, description="Comma-separated tool names to disable"
    )
    tool_include: str | None = Field(
        default=None, description="Comma-separated tool names to force-enable"
    )
    tool_config_path: Path | None = Field(
        default=None, description="Optional JSON tool configuration file"
    )

    media_library_path: Path | None = Field(
        default=None,
        description="Optional JSON snapshot with 'movies' and 'series' lists",
    )

    log_level: str = Field(default="INFO", description="Logging level")
    log_format: Literal["console", "json"] = Field(
        default="console", description="Log renderer"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalize and validate the logging level name."""
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {value}")
        return level
