"""Output schemas for servers commands (local mcp-config.json)."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ServersInstallOutput(BaseOutputSchema):
    """Output schema for servers install command."""

    message: str = Field(..., description="Human readable summary")
    name: str = Field(..., description="Name the server was stored under")
    config_path: str = Field(..., description="Path to mcp-config.json")
    server_config: dict[str, Any] = Field(..., description="Stored server entry, empty on error")
    github: str = Field(..., description="owner/repo, empty on error")
    note: str = Field(..., description="Follow-up hint for the user")


class ServersUninstallOutput(BaseOutputSchema):
    """Output schema for servers uninstall command.

    available_servers is filled when the name was not found.
    """

    message: str = Field(..., description="Human readable summary")
    name: str = Field(..., description="Server name that was requested")
    config_path: str = Field(..., description="Path to mcp-config.json")
    removed_config: dict[str, Any] = Field(..., description="Removed server entry, empty if nothing was removed")
    pruned_rules: int = Field(..., description="Number of alwaysAllow rules removed")
    available_servers: list[str] = Field(..., description="Installed server names")
    note: str = Field(..., description="Follow-up hint for the user")


class ServersListOutput(BaseOutputSchema):
    """Output schema for servers list command."""

    config_path: str = Field(..., description="Path to mcp-config.json")
    total_installed: int = Field(..., description="Number of installed servers")
    servers: list[dict[str, Any]] = Field(..., description="{name, type, command, args, tools, env} per server")
    alwaysAllow: list[dict[str, Any]] = Field(..., description="Persisted permission rules")  # noqa: N815


class ServersUpdateOutput(BaseOutputSchema):
    """Output schema for servers update command."""

    message: str = Field(..., description="Human readable summary")
    name: str = Field(..., description="Server name that was requested")
    config_path: str = Field(..., description="Path to mcp-config.json")
    old_config: dict[str, Any] = Field(..., description="Server entry before the update")
    new_config: dict[str, Any] = Field(..., description="Server entry after the update")
    available_servers: list[str] = Field(..., description="Installed server names")
    note: str = Field(..., description="Follow-up hint for the user")


class ServersBackupOutput(BaseOutputSchema):
    """Output schema for servers backup command."""

    message: str = Field(..., description="Human readable summary")
    original_path: str = Field(..., description="Path to mcp-config.json")
    backup_path: str = Field(..., description="Path of the backup copy, empty on error")
    timestamp: str = Field(..., description="Timestamp embedded in the backup name")
    note: str = Field(..., description="How to restore")


register_output_schema("servers", "install", ServersInstallOutput)
register_output_schema("servers", "uninstall", ServersUninstallOutput)
register_output_schema("servers", "list", ServersListOutput)
register_output_schema("servers", "update", ServersUpdateOutput)
register_output_schema("servers", "backup", ServersBackupOutput)
