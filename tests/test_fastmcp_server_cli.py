"""CLI-level coverage for the FastMCP server wrapper."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from media_mcp_server import main as server_main
from media_mcp_server.library import MediaLibrary
from media_mcp_server.tool_filter import ToolFilter


class _DummyApp:
    """Shim FastMCP app to capture run invocations without network I/O."""

    def __init__(self) -> None:
        self.run_calls: list[dict[str, object]] = []

    def run(self, *, transport: str, **kwargs: object) -> None:
        self.run_calls.append({"transport": transport, **kwargs})


@pytest.fixture()
def captured(monkeypatch: pytest.MonkeyPatch) -> dict[str, object]:
    """Replace app construction and logging setup, recording their inputs."""
    record: dict[str, object] = {"app": _DummyApp()}

    def fake_build(library: MediaLibrary, tool_filter: ToolFilter) -> tuple[object, list]:
        record["library"] = library
        record["tool_filter"] = tool_filter
        return record["app"], []

    monkeypatch.setattr(server_main, "build_fastmcp_app", fake_build)
    monkeypatch.setattr(server_main, "configure_logging", lambda *_args: None)
    return record


def test_main_runs_fastmcp_with_transport(captured: dict[str, object]) -> None:
    """main() delegates to FastMCP.run with the provided transport settings."""
    exit_code = server_main.main(
        [
            "--transport",
            "http",
            "--host",
            "127.0.0.1",
            "--port",
            "8080",
            "--path",
            "/mcp",
        ]
    )

    app = captured["app"]
    assert isinstance(app, _DummyApp)
    assert exit_code == 0
    assert app.run_calls == [
        {"transport": "http", "host": "127.0.0.1", "port": 8080, "path": "/mcp"}
    ]


def test_main_defaults_to_stdio(captured: dict[str, object]) -> None:
    """Without arguments the stdio transport is used with no bind options."""
    server_main.main([])

    app = captured["app"]
    assert isinstance(app, _DummyApp)
    assert app.run_calls == [{"transport": "stdio"}]


def test_main_resolves_configuration_from_environment(
    captured: dict[str, object],
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    """The tool profile and library snapshot come from the environment."""
    library_path = tmp_path / "library.json"
    library_path.write_text(
        json.dumps({"movies": [{"id": 7, "title": "Heat", "year": 1995}]}),
        encoding="utf-8",
    )
    monkeypatch.setenv("TOOL_PROFILE", "curator")
    monkeypatch.setenv("MEDIA_LIBRARY_PATH", str(library_path))

    server_main.main([])

    tool_filter = captured["tool_filter"]
    library = captured["library"]
    assert isinstance(tool_filter, ToolFilter)
    assert isinstance(library, MediaLibrary)
    assert tool_filter.config.profile == "curator"
    assert tool_filter.is_enabled("radarr_get_movies")
    assert library.get_movie(7).title == "Heat"
