"""Allow ``python -m marsdate`` to run the command line tool."""

from __future__ import annotations

# Standard Library Imports
import sys

# Local Imports
from . import main

if __name__ == "__main__":
    sys.exit(main())
