"""Support ``python -m tinyver``."""

from __future__ import annotations

import sys

from tinyver.cli import main

if __name__ == "__main__":
    sys.exit(main())
