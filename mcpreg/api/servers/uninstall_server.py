"""Remove a server from the config."""

from .InstalledServerConfig import InstalledServerConfig
from .RegistryConfig import RegistryConfig


def uninstall_server(config: RegistryConfig, name: str) -> InstalledServerConfig | None:
    """Remove ``name`` and every alwaysAllow rule that refers to it.

    Returns:
        The removed entry, or None if ``name`` is not installed (config unchanged)
    """
    removed = config.servers.pop(name, None)
    if removed is None:
        return None
    config.always_allow = [rule for rule in config.always_allow if rule.server != name]
    return removed
