"""Error raised when a remote document cannot be retrieved."""


class FetchError(RuntimeError):
    """A remote fetch failed (network error, timeout or non-success status)."""
