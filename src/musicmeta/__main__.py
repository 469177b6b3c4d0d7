"""Allow ``python -m musicmeta``."""

import sys

from musicmeta.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
