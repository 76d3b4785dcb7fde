"""
Lean IMT - Incremental Merkle Tree
Append-only Merkle tree with dynamic depth and proof-gated updates.

This package provides:
- LeanIMT: the tree
- ZERO: sentinel for removed leaves
- Node / HashFunction: type aliases for node values and the injected
  2-ary hash function

Tree Shape Rules:
1. Depth grows with size: smallest d with 2^d >= size
2. No zero padding: a lone node is promoted unchanged
3. Parent = hash(left, right)
4. Removed leaves hold ZERO at their original position

Usage:
    from lean_imt.imt import LeanIMT
    from lean_imt.crypto import hash_pair, sha256

    tree = LeanIMT(hash_pair)
    tree.insert_many([sha256(b"alice"), sha256(b"bob"), sha256(b"carol")])

    # Authenticated update: siblings of alice's position, bottom-up
    tree.update(sha256(b"alice"), sha256(b"dave"), [sha256(b"bob"), sha256(b"carol")])
"""
from .nodes import (
    Node,
    HashFunction,
    ZERO,
    is_zero,
)

from .lean_imt import LeanIMT


__all__ = [
    "LeanIMT",
    "Node",
    "HashFunction",
    "ZERO",
    "is_zero",
]
