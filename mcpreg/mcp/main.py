"""Entry point for the mcpreg MCP stdio server."""

import sys

from ..utils.configure_logging import configure_logging
from .server import MCPServer


def main() -> int:
    """Serve MCP over stdin/stdout until EOF or Ctrl-C."""
    configure_logging()
    try:
        MCPServer().run()
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
