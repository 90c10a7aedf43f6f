"""Category filter for registry entries."""

from .Entry import Entry


def filter_by_category(entries: list[Entry], category: str | None) -> list[Entry]:
    """Keep entries of one category; "all" or None keeps everything."""
    if not category or category == "all":
        return list(entries)
    return [entry for entry in entries if entry.category == category]
