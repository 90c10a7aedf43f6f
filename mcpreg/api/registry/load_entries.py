"""Fetch and parse the registry README."""

from ...utils.get_logger import get_logger
from ..config.McpregConfig import McpregConfig
from .Entry import Entry
from .fetch_document import fetch_document
from .parse_entries import parse_entries

logger = get_logger("registry")


def load_entries(config: McpregConfig) -> list[Entry]:
    """Fetch the configured registry README and parse its entries.

    Raises:
        FetchError: If the README cannot be fetched
    """
    document = fetch_document(config.source.readme_url, config.source.timeout, "registry README")
    entries = parse_entries(document)
    if not entries:
        logger.warning("No entries parsed from %s; the README format may have changed", config.source.readme_url)
    else:
        logger.info("Parsed %d entries from %s", len(entries), config.source.readme_url)
    return entries
