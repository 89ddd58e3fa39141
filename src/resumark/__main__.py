#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Allow ``python -m resumark``."""

import sys

from resumark.cli import main

if __name__ == "__main__":
    sys.exit(main())
