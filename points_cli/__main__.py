"""
Module execution entry point.

Allows running with: python -m points_cli
"""

import sys
from points_cli.main import main

if __name__ == "__main__":
    sys.exit(main())
