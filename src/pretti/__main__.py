"""Entry point for ``python -m pretti``."""

import sys

from pretti.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
