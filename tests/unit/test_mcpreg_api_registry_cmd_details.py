"""Unit tests for mcpreg.api.registry.cmd_details."""

import pytest
import requests

from mcpreg.api.registry.cmd_details import cmd_details
from mcpreg.constants import README_PREVIEW_LIMIT, README_TRUNCATION_MARKER, README_UNAVAILABLE
from tests.unit.conftest import API_URL, RAW_URL, FakeResponse, run_cmd

pytestmark = pytest.mark.registry

REPO_URL = f"{API_URL}/repos/microsoft/playwright-mcp"
README = f"{RAW_URL}/microsoft/playwright-mcp/main/README.md"

REPO_DATA = {
    "name": "playwright-mcp",
    "full_name": "microsoft/playwright-mcp",
    "description": "Playwright MCP server",
    "html_url": "https://github.com/microsoft/playwright-mcp",
    "stargazers_count": 1200,
    "forks_count": 80,
    "open_issues_count": 12,
    "language": "TypeScript",
    "created_at": "2025-03-01T00:00:00Z",
    "updated_at": "2025-06-01T00:00:00Z",
    "pushed_at": "2025-06-02T00:00:00Z",
    "license": {"key": "apache-2.0", "name": "Apache License 2.0"},
    "topics": ["mcp", "playwright"],
    "clone_url": "https://github.com/microsoft/playwright-mcp.git",
}


def test_cmd_details_success(fake_http, mcpreg_config):
    fake_http.add(REPO_URL, FakeResponse(json_data=REPO_DATA))
    fake_http.add(README, FakeResponse("# Playwright MCP\n"))

    result = run_cmd(cmd_details, "https://github.com/microsoft/playwright-mcp", config=mcpreg_config)

    assert result.success is True
    out = result.output
    assert out["full_name"] == "microsoft/playwright-mcp"
    assert out["stars"] == 1200
    assert out["forks"] == 80
    assert out["open_issues"] == 12
    assert out["license"] == "Apache License 2.0"
    assert out["topics"] == ["mcp", "playwright"]
    assert out["readme_preview"] == "# Playwright MCP\n"
    assert out["warnings"] == []


def test_cmd_details_truncates_readme(fake_http, mcpreg_config):
    fake_http.add(REPO_URL, FakeResponse(json_data=REPO_DATA))
    fake_http.add(README, FakeResponse("x" * (README_PREVIEW_LIMIT + 10)))

    result = run_cmd(cmd_details, "https://github.com/microsoft/playwright-mcp", config=mcpreg_config)

    preview = result.output["readme_preview"]
    assert preview.endswith(README_TRUNCATION_MARKER)
    assert len(preview) == README_PREVIEW_LIMIT + len(README_TRUNCATION_MARKER)


def test_cmd_details_missing_readme(fake_http, mcpreg_config):
    fake_http.add(REPO_URL, FakeResponse(json_data=REPO_DATA))

    result = run_cmd(cmd_details, "https://github.com/microsoft/playwright-mcp", config=mcpreg_config)

    assert result.success is True
    assert result.output["readme_preview"] == README_UNAVAILABLE
    assert result.output["warnings"] == [README_UNAVAILABLE]


def test_cmd_details_no_license(fake_http, mcpreg_config):
    fake_http.add(REPO_URL, FakeResponse(json_data={**REPO_DATA, "license": None, "topics": None}))
    fake_http.add(README, FakeResponse("readme"))

    result = run_cmd(cmd_details, "https://github.com/microsoft/playwright-mcp", config=mcpreg_config)

    assert result.output["license"] == "No license"
    assert result.output["topics"] == []


def test_cmd_details_invalid_url(fake_http, mcpreg_config):
    result = run_cmd(cmd_details, "https://gitlab.com/a/b", config=mcpreg_config)

    assert result.success is False
    assert result.output["errors"] == ["Invalid GitHub URL format"]
    assert result.output["stars"] is None
    assert fake_http.calls == []


def test_cmd_details_api_failure(fake_http, mcpreg_config):
    fake_http.add(REPO_URL, FakeResponse(status_code=404, reason="Not Found"))

    result = run_cmd(cmd_details, "https://github.com/microsoft/playwright-mcp", config=mcpreg_config)

    assert result.success is False
    assert "404" in result.output["errors"][0]
    assert result.output["name"] is None


def test_cmd_details_network_error(fake_http, mcpreg_config):
    fake_http.add(REPO_URL, requests.ConnectionError("offline"))

    result = run_cmd(cmd_details, "https://github.com/microsoft/playwright-mcp", config=mcpreg_config)

    assert result.success is False
    assert "offline" in result.result


def test_cmd_details_license_as_string(fake_http, mcpreg_config):
    fake_http.add(REPO_URL, FakeResponse(json_data={**REPO_DATA, "license": "MIT"}))
    fake_http.add(README, FakeResponse("# Playwright MCP\n"))

    result = run_cmd(cmd_details, "https://github.com/microsoft/playwright-mcp", config=mcpreg_config)

    assert result.success is True
    assert result.output["license"] == "MIT"


def test_cmd_details_unexpected_field_type(fake_http, mcpreg_config):
    fake_http.add(REPO_URL, FakeResponse(json_data={**REPO_DATA, "stargazers_count": "lots"}))
    fake_http.add(README, FakeResponse("# Playwright MCP\n"))

    result = run_cmd(cmd_details, "https://github.com/microsoft/playwright-mcp", config=mcpreg_config)

    assert result.success is False
    assert "stars" in result.output["errors"][0]
    assert result.output["stars"] is None
