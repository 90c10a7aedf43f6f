"""Get mcpreg home directory path or path under it."""

import os
from pathlib import Path

from ...constants import MCPREG_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get mcpreg home directory path or path under it.

    Checks MCPREG_HOME environment variable first, defaults to ~/.mcpreg if not set.

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.mcpreg")
        >>> get_home_dir("config.json")
        Path("/Users/user/.mcpreg/config.json")
    """
    home_env = os.environ.get("MCPREG_HOME")
    if home_env:
        mcpreg_home = Path(home_env).expanduser().resolve()
    else:
        mcpreg_home = Path.home() / MCPREG_HOME_EXT

    return mcpreg_home / Path(*parts) if parts else mcpreg_home
