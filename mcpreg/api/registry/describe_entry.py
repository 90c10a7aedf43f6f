"""Serialize an entry for command output."""

from typing import Any

from .Entry import Entry
from .installation_hint import installation_hint


def describe_entry(entry: Entry) -> dict[str, Any]:
    """Entry fields plus its installation hint."""
    return {**entry.model_dump(mode="python"), "installation": installation_hint(entry)}
