"""Tool definitions: MCP name -> command function, description and input schema."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ..api.registry.cmd_details import cmd_details
from ..api.registry.cmd_list import cmd_list as cmd_registry_list
from ..api.registry.cmd_search import cmd_search
from ..api.servers.cmd_backup import cmd_backup
from ..api.servers.cmd_install import cmd_install
from ..api.servers.cmd_list import cmd_list as cmd_servers_list
from ..api.servers.cmd_uninstall import cmd_uninstall
from ..api.servers.cmd_update import cmd_update
from ..api.StageResult import StageResult
from ..constants import LIST_DEFAULT_LIMIT, LIST_MAX_LIMIT, SEARCH_DEFAULT_LIMIT, SEARCH_MAX_LIMIT

_CATEGORY = {
    "type": "string",
    "description": 'Filter by category: "official", "community", or "all" (default)',
    "enum": ["official", "community", "all"],
    "default": "all",
}


@dataclass(frozen=True)
class ToolSpec:
    """One MCP tool backed by a command function."""

    func: Callable[..., StageResult]
    description: str
    input_schema: dict[str, Any]


TOOLS: dict[str, ToolSpec] = {
    "search_github_mcp_servers": ToolSpec(
        func=cmd_search,
        description=(
            "Search the official GitHub modelcontextprotocol/servers repository README for MCP servers. "
            "Searches official and community server names and descriptions."
        ),
        input_schema={
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": 'Search query (e.g., "playwright", "database", "kubernetes").',
                },
                "limit": {
                    "type": "number",
                    "description": f"Maximum number of results (default: {SEARCH_DEFAULT_LIMIT}, max: {SEARCH_MAX_LIMIT})",
                    "default": SEARCH_DEFAULT_LIMIT,
                },
                "category": _CATEGORY,
            },
            "required": ["query"],
        },
    ),
    "list_all_github_mcp_servers": ToolSpec(
        func=cmd_registry_list,
        description="List all available MCP servers from the GitHub repository with pagination support.",
        input_schema={
            "type": "object",
            "properties": {
                "limit": {
                    "type": "number",
                    "description": f"Number of servers to return (default: {LIST_DEFAULT_LIMIT}, max: {LIST_MAX_LIMIT})",
                    "default": LIST_DEFAULT_LIMIT,
                },
                "offset": {
                    "type": "number",
                    "description": "Number of servers to skip for pagination (default: 0)",
                    "default": 0,
                },
                "category": _CATEGORY,
            },
        },
    ),
    "install_mcp_server": ToolSpec(
        func=cmd_install,
        description="Install an MCP server by adding it to the mcp-config.json file.",
        input_schema={
            "type": "object",
            "properties": {
                "server_name": {
                    "type": "string",
                    "description": 'The name of the server to install (e.g., "playwright", "github", "postgres")',
                },
                "github_url": {
                    "type": "string",
                    "description": 'The GitHub URL of the server (e.g., "https://github.com/microsoft/playwright-mcp")',
                },
                "config_name": {
                    "type": "string",
                    "description": "What to name this server in the config (default: uses server_name)",
                },
            },
            "required": ["server_name", "github_url"],
        },
    ),
    "uninstall_mcp_server": ToolSpec(
        func=cmd_uninstall,
        description="Remove an MCP server from the mcp-config.json file.",
        input_schema={
            "type": "object",
            "properties": {
                "server_name": {
                    "type": "string",
                    "description": "The name of the server to uninstall (as it appears in the config)",
                },
            },
            "required": ["server_name"],
        },
    ),
    "list_installed_servers": ToolSpec(
        func=cmd_servers_list,
        description="List all currently installed MCP servers from your mcp-config.json file.",
        input_schema={"type": "object", "properties": {}},
    ),
    "update_server_config": ToolSpec(
        func=cmd_update,
        description="Update the configuration of an existing MCP server (args, tools).",
        input_schema={
            "type": "object",
            "properties": {
                "server_name": {"type": "string", "description": "The name of the server to update"},
                "new_args": {
                    "type": "array",
                    "description": "New command arguments (optional)",
                    "items": {"type": "string"},
                },
                "new_tools": {
                    "type": "array",
                    "description": "New tools array (optional)",
                    "items": {"type": "string"},
                },
            },
            "required": ["server_name"],
        },
    ),
    "get_server_details": ToolSpec(
        func=cmd_details,
        description="Get detailed information about an MCP server from GitHub (stars, last updated, README, etc.).",
        input_schema={
            "type": "object",
            "properties": {
                "github_url": {"type": "string", "description": "The GitHub URL of the server"},
            },
            "required": ["github_url"],
        },
    ),
    "backup_config": ToolSpec(
        func=cmd_backup,
        description="Create a timestamped backup of your mcp-config.json file.",
        input_schema={"type": "object", "properties": {}},
    ),
}
