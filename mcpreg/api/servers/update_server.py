"""Change an installed server's arguments or tools."""

from .InstalledServerConfig import InstalledServerConfig
from .RegistryConfig import RegistryConfig


def update_server(
    config: RegistryConfig,
    name: str,
    new_args: list[str] | None = None,
    new_tools: list[str] | None = None,
) -> tuple[InstalledServerConfig, InstalledServerConfig] | None:
    """Replace args and/or tools of ``name``; None leaves a field alone.

    Returns:
        (old, new) entries, or None if ``name`` is not installed

    Raises:
        ValueError: If new_args or new_tools is given but is not a list
    """
    for label, value in (("new_args", new_args), ("new_tools", new_tools)):
        if value is not None and not isinstance(value, list):
            raise ValueError(f"{label} must be a list of strings")
    current = config.servers.get(name)
    if current is None:
        return None
    old = current.model_copy(deep=True)
    if new_args is not None:
        current.args = list(new_args)
    if new_tools is not None:
        current.tools = list(new_tools)
    return old, current
