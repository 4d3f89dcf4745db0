"""Allow ``python -m genome``."""

import sys

from genome.cli import main

if __name__ == "__main__":
    sys.exit(main())
