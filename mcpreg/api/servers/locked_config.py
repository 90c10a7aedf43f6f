"""Serialize read-modify-write cycles on mcp-config.json."""

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from .RegistryConfig import RegistryConfig

# One writer at a time within this process
WRITE_LOCK = threading.RLock()


@contextmanager
def locked_config(path: Path, strict: bool = False) -> Iterator[RegistryConfig]:
    """Hold the writer lock while the config is loaded, edited and saved.

    Args:
        path: mcp-config.json location
        strict: Require the file to exist and parse (``RegistryConfig.read``)
            instead of falling back to an empty config when it is missing or
            not a JSON object (``RegistryConfig.load``)
    """
    with WRITE_LOCK:
        yield RegistryConfig.read(path) if strict else RegistryConfig.load(path)
