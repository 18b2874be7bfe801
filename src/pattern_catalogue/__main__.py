"""Allow running the catalogue with ``python -m pattern_catalogue``."""
import sys

from pattern_catalogue.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
