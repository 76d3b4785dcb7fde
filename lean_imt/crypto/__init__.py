"""
Hash functions for LeanIMT and hex helpers.
"""
from .hashing import (
    ZERO_BYTES,
    NODE_TAG,
    HASH_FUNCTIONS,
    sha256,
    node_bytes,
    hash_pair,
    join_hash,
    to_hex,
    from_hex,
    get_hash_function,
)

__all__ = [
    "ZERO_BYTES",
    "NODE_TAG",
    "HASH_FUNCTIONS",
    "sha256",
    "node_bytes",
    "hash_pair",
    "join_hash",
    "to_hex",
    "from_hex",
    "get_hash_function",
]
