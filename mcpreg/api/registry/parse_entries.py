"""Extract registry entries from the MCP servers README."""

import re

from ...constants import NO_DESCRIPTION
from ._patterns import COMMUNITY_SECTION_PATTERN, OFFICIAL_SECTION_PATTERN, SERVER_LINE_PATTERN
from .Entry import Category, Entry

# Output order: official entries first, then community
SECTIONS: tuple[tuple[Category, re.Pattern[str]], ...] = (
    ("official", OFFICIAL_SECTION_PATTERN),
    ("community", COMMUNITY_SECTION_PATTERN),
)


def parse_entries(document: str) -> list[Entry]:
    """Parse all server entries from a registry README.

    A section whose heading is missing contributes no entries. Lines that do
    not look like a server bullet are skipped, never reported. Duplicates are
    kept in document order.
    """
    text = document.replace("\r\n", "\n")
    entries: list[Entry] = []
    for category, section_pattern in SECTIONS:
        section = section_pattern.search(text)
        if section is None:
            continue
        for match in SERVER_LINE_PATTERN.finditer(section.group(1)):
            description = (match.group(3) or "").strip()
            entries.append(
                Entry(
                    name=match.group(1).strip(),
                    url=match.group(2).strip(),
                    description=description or NO_DESCRIPTION,
                    category=category,
                )
            )
    return entries
