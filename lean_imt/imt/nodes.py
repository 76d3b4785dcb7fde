"""
Lean IMT - Node Types
Node values, the ZERO sentinel, and the hash function signature.

A node is any hashable, equality-comparable value. Leaves are supplied by
the caller; internal nodes are whatever the injected hash function returns.

ZERO is a dedicated singleton rather than a reserved domain value, so no
caller-chosen leaf (the string "0", 32 zero bytes, the integer 0) can ever
collide with it. str(ZERO) is "0" so text-based hash functions render
removed slots readably.
"""
from __future__ import annotations

from typing import Callable, Hashable


Node = Hashable

# Combines an ordered (left, right) pair of nodes into their parent.
HashFunction = Callable[[Node, Node], Node]


class _ZeroNode:
    """Type of the ZERO sentinel. Only one instance ever exists."""

    _instance: "_ZeroNode | None" = None

    def __new__(cls) -> "_ZeroNode":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ZERO"

    def __str__(self) -> str:
        return "0"

    def __copy__(self) -> "_ZeroNode":
        return self

    def __deepcopy__(self, memo: dict) -> "_ZeroNode":
        return self

    def __reduce__(self) -> str:
        return "ZERO"


ZERO = _ZeroNode()


def is_zero(node: object) -> bool:
    """Return True if node is the ZERO sentinel."""
    return node is ZERO


__all__ = [
    "Node",
    "HashFunction",
    "ZERO",
    "is_zero",
]
