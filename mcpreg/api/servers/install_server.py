"""Add a server to the config."""

from ..registry.parse_github_url import parse_github_url
from .derive_server_config import derive_server_config
from .InstalledServerConfig import InstalledServerConfig
from .RegistryConfig import RegistryConfig


def install_server(config: RegistryConfig, name: str, github_url: str) -> InstalledServerConfig:
    """Store a launch configuration for ``github_url`` under ``name``.

    An existing entry with the same name is replaced.

    Raises:
        ValueError: If ``github_url`` has no owner/repo segments
    """
    server = derive_server_config(parse_github_url(github_url))
    config.servers[name] = server
    return server
