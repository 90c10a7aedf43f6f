"""Installed servers: read and edit the local mcp-config.json."""

from .AlwaysAllowRule import AlwaysAllowRule
from .InstalledServerConfig import InstalledServerConfig
from .RegistryConfig import RegistryConfig

__all__ = ["AlwaysAllowRule", "InstalledServerConfig", "RegistryConfig"]
