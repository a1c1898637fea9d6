"""CLI behavior smoke tests."""

from __future__ import annotations

import json

import pytest
from pytest import CaptureFixture, MonkeyPatch

from media_mcp import cli


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch: MonkeyPatch) -> None:
    """Leave the global logging configuration untouched."""
    monkeypatch.setattr(cli, "configure_logging", lambda *_args: None)


def test_cli_outputs_enabled_tools(
    monkeypatch: MonkeyPatch, capsys: CaptureFixture[str]
) -> None:
    """Running the CLI without flags prints the resolved tool names."""
    # Arrange
    monkeypatch.setenv("TOOL_PROFILE", "default")
    monkeypatch.setenv("TOOL_INCLUDE", "radarr_get_movies")

    # Act
    exit_code = cli.main([])

    # Assert
    assert exit_code == 0
    parsed = json.loads(capsys.readouterr().out)
    assert parsed["profile"] == "default"
    assert "radarr_get_movies" in parsed["tools"]
    assert "tmdb_search_movies" in parsed["tools"]
    assert parsed["tools"] == sorted(parsed["tools"])


def test_cli_catalog_flag(
    monkeypatch: MonkeyPatch, capsys: CaptureFixture[str]
) -> None:
    """Catalog flag prints discovery metadata for enabled tools only."""
    # Arrange
    monkeypatch.setenv("TOOL_PROFILE", "curator")
    monkeypatch.setenv("TOOL_EXCLUDE", "sonarr_get_series_by_id")

    # Act
    exit_code = cli.main(["--catalog"])

    # Assert
    assert exit_code == 0
    catalog = json.loads(capsys.readouterr().out)
    assert set(catalog) == {
        "radarr_get_movies",
        "radarr_get_movie",
        "sonarr_get_series",
    }
    assert catalog["radarr_get_movies"]["description"]


def test_cli_profiles_flag(capsys: CaptureFixture[str]) -> None:
    """Profiles flag lists every profile with its branches."""
    # Act
    exit_code = cli.main(["--profiles"])

    # Assert
    assert exit_code == 0
    profiles = json.loads(capsys.readouterr().out)
    assert profiles["curator"]["branches"] == ["discovery-add", "library-management"]
    assert profiles["minimal"]["tool_count"] == profiles["default"]["tool_count"]
    assert profiles["full"]["tool_count"] > profiles["power-user"]["tool_count"]
