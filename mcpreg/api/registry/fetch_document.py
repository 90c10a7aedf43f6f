"""Fetch a remote text document."""

import requests

from ...utils.get_logger import get_logger
from .FetchError import FetchError

logger = get_logger("registry.fetch")


def fetch_document(url: str, timeout: float, what: str = "document") -> str:
    """GET ``url`` and return the body as text.

    Args:
        url: Document URL
        timeout: Seconds before the request is abandoned
        what: Short label used in error messages (e.g. "registry README")

    Raises:
        FetchError: On network failure, timeout or a non-success status
    """
    logger.info("Fetching %s from %s", what, url)
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        logger.warning("Error fetching %s from %s: %s", what, url, e)
        raise FetchError(f"Error fetching {what}: {e}") from e

    if not response.ok:
        logger.warning("Fetching %s from %s returned %s", what, url, response.status_code)
        raise FetchError(f"Failed to fetch {what}: {response.status_code} {response.reason}")
    return response.text
