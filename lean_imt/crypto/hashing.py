"""
Lean IMT - Hashing Utilities
Ready-made 2-ary hash functions for LeanIMT and hex helpers.

The tree itself never hashes: it calls whatever combiner it was built
with. This module provides the combiners the project ships with:
- hash_pair: SHA-256 over the tagged encodings of left and right, for byte-string nodes
- join_hash: "left,right" string concatenation, for debugging and tests

Security/Determinism Notes:
- All functions are pure and deterministic
- hash_pair tags every node before hashing: ZERO is the single byte 0x00,
  any other node is 0x01, a 4-byte big-endian length, then its bytes.
  The encoding is prefix-free, so no leaf (32 zero bytes included) can
  hash like a removed slot
- join_hash is NOT collision resistant and must not guard real data
"""
from __future__ import annotations

import hashlib

from lean_imt.imt.nodes import HashFunction, Node, ZERO
from lean_imt.schemas.errors import ConfigurationException


# Encoding of the ZERO sentinel for byte-oriented hash functions
ZERO_BYTES: bytes = b"\x00"

# Prefix of every non-ZERO node encoding
NODE_TAG: bytes = b"\x01"


def sha256(data: bytes) -> bytes:
    """
    Compute SHA-256 hash of raw bytes.

    Args:
        data: Raw bytes to hash

    Returns:
        32-byte SHA-256 digest

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return hashlib.sha256(data).digest()


def node_bytes(node: Node) -> bytes:
    """
    Encode a node as tagged bytes for byte-oriented hashing.

    ZERO encodes as ZERO_BYTES. A bytes node encodes as
    NODE_TAG + len(node) as 4 bytes big-endian + node.

    Raises:
        TypeError: If node is neither ZERO nor bytes-like
    """
    if node is ZERO:
        return ZERO_BYTES
    if isinstance(node, (bytes, bytearray)):
        return NODE_TAG + len(node).to_bytes(4, "big") + bytes(node)
    raise TypeError(f"hash_pair expects bytes nodes, got {type(node).__name__}")


def hash_pair(left: Node, right: Node) -> bytes:
    """
    Compute the parent of two byte-string nodes.

    Parent hash is deterministic: sha256(node_bytes(left) + node_bytes(right))

    Args:
        left: Left child (bytes or ZERO)
        right: Right child (bytes or ZERO)

    Returns:
        Parent hash (32 bytes)
    """
    return sha256(node_bytes(left) + node_bytes(right))


def join_hash(left: Node, right: Node) -> str:
    """
    Join two nodes as "left,right".

    Readable stand-in for a real hash: the root spells out the tree shape.
    ZERO renders as "0".
    """
    return f"{left},{right}"


def to_hex(data: bytes) -> str:
    """
    Convert bytes to hexadecimal string with 0x prefix.

    Example:
        >>> to_hex(bytes.fromhex("deadbeef"))
        '0xdeadbeef'
    """
    return "0x" + data.hex()


def from_hex(hex_string: str) -> bytes:
    """
    Convert hexadecimal string (with 0x prefix) to bytes.

    Raises:
        ValueError: If string doesn't start with 0x, has odd length,
                   or contains invalid hex characters
    """
    if not hex_string.startswith("0x"):
        raise ValueError(
            f"Hex string must start with '0x' prefix, got: {hex_string[:10]}..."
        )

    hex_content = hex_string[2:]

    if len(hex_content) % 2 != 0:
        raise ValueError(
            f"Hex string must have even length after 0x prefix, "
            f"got length {len(hex_content)}"
        )

    try:
        return bytes.fromhex(hex_content)
    except ValueError as e:
        raise ValueError(f"Invalid hex characters in string: {e}") from e


# Hash functions selectable by name from configuration
HASH_FUNCTIONS: dict[str, HashFunction] = {
    "sha256": hash_pair,
    "join": join_hash,
}


def get_hash_function(name: str) -> HashFunction:
    """
    Look up a hash function by its configured name.

    Raises:
        ConfigurationException: If no hash function has that name
    """
    try:
        return HASH_FUNCTIONS[name]
    except KeyError:
        raise ConfigurationException(
            f"Unknown hash function: {name!r}",
            details={"available": sorted(HASH_FUNCTIONS)},
        ) from None


__all__ = [
    "NODE_TAG",
    "ZERO_BYTES",
    "HASH_FUNCTIONS",
    "sha256",
    "node_bytes",
    "hash_pair",
    "join_hash",
    "to_hex",
    "from_hex",
    "get_hash_function",
]
