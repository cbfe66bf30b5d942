"""Allow ``python -m gnudb``."""

import sys

from gnudb.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
