"""Allow ``python -m mcpreg``."""

import sys

from mcpreg.cli import main

if __name__ == "__main__":
    sys.exit(main())
