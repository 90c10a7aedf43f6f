"""Build the launch configuration for a GitHub-hosted server."""

from ..registry.RepoRef import RepoRef
from .InstalledServerConfig import InstalledServerConfig

# Repositories whose npm package is not named after the repository
KNOWN_PACKAGES: dict[tuple[str, str], list[str]] = {
    ("microsoft", "playwright-mcp"): ["@playwright/mcp@latest"],
}

RUN_PACKAGE_COMMAND = "npx"


def derive_server_config(ref: RepoRef) -> InstalledServerConfig:
    """Guess how to launch the server in ``ref``.

    Known repositories map to their published package; anything else is
    assumed to publish an npm package named after the repository.
    """
    args = KNOWN_PACKAGES.get((ref.owner, ref.repo))
    if args is None:
        args = ["-y", f"{ref.repo}@latest"]
    return InstalledServerConfig(type="local", command=RUN_PACKAGE_COMMAND, args=list(args), tools=[])
