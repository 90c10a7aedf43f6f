"""mcpreg configuration."""

from .McpregConfig import McpregConfig
from .ServersConfig import ServersConfig
from .SourceConfig import SourceConfig

__all__ = ["McpregConfig", "ServersConfig", "SourceConfig"]
