"""
Lean IMT CLI

Command-line interface for building Lean IMT roots.

Usage:
    python -m lean_imt_cli root leaf1 leaf2 leaf3
    python -m lean_imt_cli root --file leaves.txt --batch --json
    python -m lean_imt_cli config --show
"""

__version__ = "0.1.0"
