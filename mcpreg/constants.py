"""Shared constants for mcpreg dot-directories and remote locations."""

MCPREG_HOME_EXT = ".mcpreg"  # user-level state/config directory suffix

MCPREG_HOME_DISPLAY = f"~/{MCPREG_HOME_EXT}"  # user-readable path hint

# Registry source document
DEFAULT_README_URL = "https://raw.githubusercontent.com/modelcontextprotocol/servers/main/README.md"
DEFAULT_API_URL = "https://api.github.com"
DEFAULT_RAW_URL = "https://raw.githubusercontent.com"

# mcp-config.json read by the CLI client
DEFAULT_SETTINGS_PATH = "~/.copilot/mcp-config.json"

# Seconds before a remote fetch is abandoned
DEFAULT_FETCH_TIMEOUT = 30.0

RESTART_NOTE = "You may need to restart your CLI client for changes to take effect"

# Query limits: (default, maximum)
SEARCH_DEFAULT_LIMIT = 10
SEARCH_MAX_LIMIT = 50
LIST_DEFAULT_LIMIT = 20
LIST_MAX_LIMIT = 100

# Repository README preview
README_PREVIEW_LIMIT = 5000
README_TRUNCATION_MARKER = "\n\n... (truncated)"
README_UNAVAILABLE = "README not available"

NO_DESCRIPTION = "No description available"
