"""
Lean IMT

Incremental append-only Merkle tree without zero padding, with batch
insertion and sibling-path authenticated updates.
"""

__version__ = "0.1.0"

from lean_imt.imt import LeanIMT, ZERO, Node, HashFunction, is_zero
from lean_imt.schemas import (
    IMTException,
    ZeroLeafException,
    DuplicateLeafException,
    LeafNotFoundException,
    InsufficientSiblingPathException,
    InvalidSiblingPathException,
)

__all__ = [
    "LeanIMT",
    "ZERO",
    "Node",
    "HashFunction",
    "is_zero",
    "IMTException",
    "ZeroLeafException",
    "DuplicateLeafException",
    "LeafNotFoundException",
    "InsufficientSiblingPathException",
    "InvalidSiblingPathException",
]
