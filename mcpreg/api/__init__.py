"""API module for mcpreg.

Command functions defined here serve as the single source of truth for both
CLI commands and MCP tools.
"""

__all__: list[str] = []
