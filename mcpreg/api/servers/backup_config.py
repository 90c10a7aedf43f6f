"""Timestamped copy of mcp-config.json."""

import shutil
from datetime import datetime, timezone
from pathlib import Path

from ...utils.get_logger import get_logger

logger = get_logger("servers.backup")


def backup_timestamp(now: datetime | None = None) -> str:
    """UTC timestamp that sorts lexically and is safe in file names (no colons)."""
    moment = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S").replace(":", "-")


def backup_config(path: Path, now: datetime | None = None) -> tuple[Path, str]:
    """Copy ``path`` byte for byte to ``<stem>.backup.<timestamp><suffix>`` beside it.

    An existing backup is never overwritten: a second backup within the same
    second gets ``-1``, ``-2`` ... appended to its timestamp.

    Returns:
        (backup path, timestamp)

    Raises:
        FileNotFoundError: If ``path`` does not exist
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found at {path}")
    base = backup_timestamp(now)
    timestamp = base
    backup_path = path.with_name(f"{path.stem}.backup.{timestamp}{path.suffix}")
    counter = 0
    while backup_path.exists():
        counter += 1
        timestamp = f"{base}-{counter}"
        backup_path = path.with_name(f"{path.stem}.backup.{timestamp}{path.suffix}")
    shutil.copyfile(path, backup_path)
    logger.info("Backed up %s to %s", path, backup_path)
    return backup_path, timestamp
