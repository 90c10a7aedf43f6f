"""Unit tests for mcpreg.api.servers.cmd_list."""

import pytest

from mcpreg.api.servers.cmd_list import cmd_list
from tests.unit.conftest import run_cmd, write_settings

pytestmark = pytest.mark.servers


def test_cmd_list_servers(mcpreg_config, settings_path, installed_settings):
    result = run_cmd(cmd_list, config=mcpreg_config)

    assert result.success is True
    assert result.output["total_installed"] == 2
    assert result.output["config_path"] == str(settings_path)
    playwright, github = result.output["servers"]
    assert playwright == {
        "name": "playwright",
        "type": "local",
        "command": "npx",
        "args": ["@playwright/mcp@latest"],
        "tools": ["browser_navigate"],
        "env": {},
    }
    assert github["env"] == {"GITHUB_TOKEN": "secret"}
    assert result.output["alwaysAllow"] == installed_settings["alwaysAllow"]


def test_cmd_list_empty(mcpreg_config, settings_path):
    write_settings(settings_path, {"mcpServers": {}})
    result = run_cmd(cmd_list, config=mcpreg_config)
    assert result.success is True
    assert result.output["total_installed"] == 0
    assert result.output["servers"] == []


def test_cmd_list_missing_file(mcpreg_config):
    result = run_cmd(cmd_list, config=mcpreg_config)
    assert result.success is False
    assert "Configuration error" in result.result
    assert "Config file not found" in result.output["errors"][0]


def test_cmd_list_numeric_values(mcpreg_config, settings_path):
    write_settings(settings_path, {"mcpServers": {"api": {"command": "node", "args": ["--port", 8080], "env": {"PORT": 8080}}}})
    result = run_cmd(cmd_list, config=mcpreg_config)
    assert result.success is True
    (server,) = result.output["servers"]
    assert server["args"] == ["--port", 8080]
    assert server["env"] == {"PORT": 8080}
