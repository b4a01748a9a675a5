"""Main entry point for ``python -m credstore``."""

import sys

from credstore.cli import main

if __name__ == "__main__":
    sys.exit(main())
