"""Registry search: fetch the MCP servers README, parse it and query the entries."""

from .Entry import Entry
from .FetchError import FetchError
from .Page import Page
from .RepoRef import RepoRef

__all__ = ["Entry", "FetchError", "Page", "RepoRef"]
