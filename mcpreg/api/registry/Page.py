"""A window of entries produced by pagination."""

from dataclasses import dataclass

from .Entry import Entry


@dataclass(frozen=True)
class Page:
    """Entries in [offset, offset + limit) and whether more follow."""

    entries: list[Entry]
    total: int
    offset: int
    limit: int
    has_more: bool
