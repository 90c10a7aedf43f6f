"""Shared pytest configuration and fixtures for all tests."""

import os
import tempfile
from pathlib import Path
from typing import Any

import pytest

# Keep the log file written during collection out of the real home directory
os.environ.setdefault("MCPREG_HOME", tempfile.mkdtemp(prefix="mcpreg-tests-"))

import requests  # noqa: E402

from mcpreg.api.config.McpregConfig import McpregConfig  # noqa: E402
from mcpreg.api.config.ServersConfig import ServersConfig  # noqa: E402
from mcpreg.api.config.SourceConfig import SourceConfig  # noqa: E402


def pytest_configure(config):
    for marker in ("unit", "integration", "smoke", "registry", "servers", "config", "mcp", "cli"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/smoke/" in path_str:
            item.add_marker(pytest.mark.smoke)
        elif "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Registry README
# =============================================================================

README_URL = "https://raw.example.test/modelcontextprotocol/servers/main/README.md"
API_URL = "https://api.example.test"
RAW_URL = "https://raw.example.test"

SAMPLE_README = """# Model Context Protocol servers

Intro text with a [link](https://modelcontextprotocol.io).

## 🌟 Reference Servers

- **[Everything](src/everything)** - Reference / test server

## 🤝 Third-Party Servers

### 🎖️ Official Integrations

Official integrations are maintained by companies building production ready MCP servers.

- <img height="12" width="12" src="https://example.com/acme.png" alt="Acme Logo" /> **[Acme](https://github.com/acme/acme-mcp)** - Acme platform access
- **[Playwright](https://github.com/microsoft/playwright-mcp)** – Browser automation with Playwright
- [Bare](https://example.com/bare)

### 🌎 Community Servers

A growing set of community-developed servers.

- **[Postgres Helper](https://github.com/someone/postgres-helper)** - Query a PostgreSQL database
• [Legacy Tool](https://github.com/old/legacy-tool.git) — Older bullet style
- **[<img height="12" src="https://example.com/kube.png" /> Kube](https://github.com/kube/kube-mcp)** - Kubernetes clusters
- not a server line
- [Docs Link](https://gitlab.com/x/y) - Hosted elsewhere

## 📚 Frameworks

- [Framework](https://github.com/fw/fw) - Not a server
"""


def official_readme(lines: list[str]) -> str:
    """README with only an official section holding ``lines``."""
    return "### 🎖️ Official Integrations\n\n" + "\n".join(lines) + "\n"


def numbered_readme(count: int) -> str:
    """Official section with ``count`` servers named server-0, server-1, ..."""
    return official_readme(
        [f"- **[server-{i}](https://github.com/acme/server-{i})** - Server number {i}" for i in range(count)]
    )


# =============================================================================
# HTTP
# =============================================================================


class FakeResponse:
    """Stand-in for requests.Response."""

    def __init__(self, text: str = "", status_code: int = 200, json_data: Any = None, reason: str = "OK"):
        self.text = text
        self.status_code = status_code
        self.reason = reason
        self._json_data = json_data

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self) -> Any:
        if self._json_data is None:
            raise ValueError("No JSON object could be decoded")
        return self._json_data


class FakeHTTP:
    """URL -> response table installed in place of requests.get.

    A route may be a FakeResponse or an exception instance to raise.
    Unknown URLs answer 404.
    """

    def __init__(self):
        self.routes: dict[str, FakeResponse | Exception] = {}
        self.calls: list[dict[str, Any]] = []

    def add(self, url: str, response: FakeResponse | Exception) -> None:
        self.routes[url] = response

    def get(self, url: str, **kwargs) -> FakeResponse:
        self.calls.append({"url": url, **kwargs})
        response = self.routes.get(url)
        if response is None:
            return FakeResponse(status_code=404, reason="Not Found")
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def fake_http(monkeypatch) -> FakeHTTP:
    """Replace requests.get with a routing table."""
    http = FakeHTTP()
    monkeypatch.setattr(requests, "get", http.get)
    return http


@pytest.fixture
def sample_readme(fake_http: FakeHTTP) -> str:
    """Serve SAMPLE_README at README_URL."""
    fake_http.add(README_URL, FakeResponse(SAMPLE_README))
    return SAMPLE_README


# =============================================================================
# Configuration
# =============================================================================


def make_config(settings_path: Path) -> McpregConfig:
    """Configuration pointing at the fake endpoints and ``settings_path``."""
    return McpregConfig(
        source=SourceConfig(readme_url=README_URL, api_url=API_URL, raw_url=RAW_URL, timeout=5),
        servers=ServersConfig(settings_path=str(settings_path)),
    )


@pytest.fixture
def settings_path(tmp_path: Path) -> Path:
    """Location of the mcp-config.json under test (not created)."""
    return tmp_path / ".copilot" / "mcp-config.json"


@pytest.fixture
def mcpreg_config(settings_path: Path) -> McpregConfig:
    return make_config(settings_path)


@pytest.fixture
def mcpreg_home(tmp_path: Path, monkeypatch, settings_path: Path) -> Path:
    """Set up MCPREG_HOME with a config file pointing at the fake endpoints.

    Returns:
        Path to the mcpreg home directory
    """
    home = tmp_path / ".mcpreg"
    home.mkdir()
    monkeypatch.setenv("MCPREG_HOME", str(home))
    monkeypatch.delenv("MCPREG_SETTINGS_PATH", raising=False)
    (home / "config.json").write_text(make_config(settings_path).model_dump_json(indent=2), encoding="utf-8")
    return home


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result
