"""Guess how a registry entry is installed."""

from typing import Any

from .Entry import Entry
from .parse_github_url import parse_github_url


def installation_hint(entry: Entry) -> dict[str, Any]:
    """Build an install hint for an entry from its GitHub URL.

    Most servers publish an npm package named after the repository, so that is
    the default guess. Entries that do not link to GitHub get a pointer to
    their URL instead.
    """
    try:
        ref = parse_github_url(entry.url)
    except ValueError:
        return {
            "type": "unknown",
            "message": "Check the GitHub repository for installation instructions",
            "url": entry.url,
        }

    if ref.owner == "microsoft" and "playwright" in entry.name.lower():
        return {
            "type": "npm",
            "command": "npx @playwright/mcp@latest",
            "config_example": {"command": "npx", "args": ["@playwright/mcp@latest"]},
        }

    return {
        "type": "npm",
        "command": f"npx -y {ref.repo}@latest",
        "github": ref.full_name,
        "config_example": {"command": "npx", "args": ["-y", f"{ref.repo}@latest"]},
    }
