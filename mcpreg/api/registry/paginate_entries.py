"""Offset/limit pagination over registry entries."""

from .Entry import Entry
from .Page import Page


def paginate_entries(entries: list[Entry], offset: int, limit: int) -> Page:
    """Slice ``entries[offset:offset + limit]``.

    Offsets follow Python slicing, so a negative or out-of-range offset gives
    a partial or empty page instead of an error.
    """
    window = entries[offset : offset + limit]
    return Page(
        entries=window,
        total=len(entries),
        offset=offset,
        limit=limit,
        has_more=offset + limit < len(entries),
    )
