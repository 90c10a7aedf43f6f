"""Substring search over registry entries."""

from .Entry import Entry


def search_entries(entries: list[Entry], query: str, limit: int) -> list[Entry]:
    """Return entries whose name or description contains ``query``.

    Matching is case-insensitive, order is preserved and at most ``limit``
    entries are returned.
    """
    needle = query.lower()
    matches = [
        entry for entry in entries if needle in entry.name.lower() or needle in entry.description.lower()
    ]
    return matches[:limit]
