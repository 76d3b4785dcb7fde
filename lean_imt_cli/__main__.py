"""
Module execution entry point.

Allows running with: python -m lean_imt_cli
"""

import sys
from lean_imt_cli.main import main

if __name__ == "__main__":
    sys.exit(main())
