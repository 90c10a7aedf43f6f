"""Fetch a remote JSON document."""

from typing import Any

import requests

from ...utils.get_logger import get_logger
from .FetchError import FetchError

logger = get_logger("registry.fetch")

GITHUB_ACCEPT = "application/vnd.github+json"


def fetch_json(url: str, timeout: float, what: str = "document") -> Any:
    """GET ``url`` and decode the JSON body.

    Raises:
        FetchError: On network failure, timeout, a non-success status or an undecodable body
    """
    logger.info("Fetching %s from %s", what, url)
    try:
        response = requests.get(url, headers={"Accept": GITHUB_ACCEPT}, timeout=timeout)
    except requests.RequestException as e:
        logger.warning("Error fetching %s from %s: %s", what, url, e)
        raise FetchError(f"Error fetching {what}: {e}") from e

    if not response.ok:
        logger.warning("Fetching %s from %s returned %s", what, url, response.status_code)
        raise FetchError(f"Failed to fetch {what}: {response.status_code} {response.reason}")

    try:
        return response.json()
    except ValueError as e:
        raise FetchError(f"Invalid JSON in {what}: {e}") from e
