"""Unit test fixtures.

Most configuration helpers are in tests/conftest.py.
This file contains unit-test-specific helpers for seeding mcp-config.json.
"""

import json
from pathlib import Path
from typing import Any

import pytest

# Re-export commonly used helpers from root conftest
from tests.conftest import (
    API_URL,
    RAW_URL,
    README_URL,
    SAMPLE_README,
    FakeResponse,
    make_config,
    numbered_readme,
    official_readme,
    run_cmd,
)

__all__ = [
    "API_URL",
    "RAW_URL",
    "README_URL",
    "SAMPLE_README",
    "FakeResponse",
    "make_config",
    "numbered_readme",
    "official_readme",
    "read_settings",
    "run_cmd",
    "write_settings",
]


def write_settings(path: Path, data: dict[str, Any]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


def read_settings(path: Path) -> dict[str, Any]:
    return json.loads(path.read_text(encoding="utf-8"))


@pytest.fixture
def installed_settings(settings_path: Path) -> dict[str, Any]:
    """mcp-config.json with two servers, alwaysAllow rules and an unknown top-level key."""
    data = {
        "mcpServers": {
            "playwright": {
                "type": "local",
                "command": "npx",
                "args": ["@playwright/mcp@latest"],
                "tools": ["browser_navigate"],
            },
            "github": {
                "type": "local",
                "command": "npx",
                "args": ["-y", "github-mcp-server@latest"],
                "tools": [],
                "env": {"GITHUB_TOKEN": "secret"},
                "timeout": 30,
            },
        },
        "alwaysAllow": [
            {"server": "playwright", "tool": "browser_navigate"},
            {"server": "github", "tool": "list_issues"},
            {"server": "playwright", "tool": "browser_click"},
        ],
        "theme": "dark",
    }
    write_settings(settings_path, data)
    return data
