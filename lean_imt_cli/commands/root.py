"""
CLI Root Command

Build a tree from a list of leaves and print its root.

Usage:
    lean-imt root leaf1 leaf2 leaf3 [--hash sha256|join] [--batch] [--json]
    lean-imt root --file leaves.txt
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any

from lean_imt.crypto.hashing import from_hex, get_hash_function, sha256, to_hex
from lean_imt.imt import LeanIMT, Node, ZERO, is_zero
from lean_imt.schemas.errors import IMTException


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_TREE_ERROR = 2


@dataclass
class RootSummary:
    """Summary of a built tree for CLI output."""
    hash_function: str = ""
    size: int = 0
    depth: int = 0
    root: str | None = None
    batch: bool = False

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def parse_leaf(value: str, hash_name: str) -> Node:
    """
    Turn a command-line leaf into a node for the chosen hash function.

    For sha256, 0x-prefixed values are decoded as hex and anything else is
    hashed from its UTF-8 text. Other hash functions take the text as is.
    """
    if hash_name != "sha256":
        return value
    if value.startswith("0x"):
        return from_hex(value)
    return sha256(value.encode("utf-8"))


def format_node(node: Node | None) -> str | None:
    """Render a node for output (hex for bytes)."""
    if node is None:
        return None
    if is_zero(node):
        return str(ZERO)
    if isinstance(node, (bytes, bytearray)):
        return to_hex(bytes(node))
    return str(node)


def read_leaves(args: Namespace) -> list[str]:
    """Collect leaves from positional arguments and --file (one per line)."""
    values = list(args.leaves)
    if args.file:
        text = Path(args.file).read_text(encoding="utf-8")
        values.extend(line.strip() for line in text.splitlines() if line.strip())
    return values


def root_cmd(args: Namespace) -> int:
    """Handle root command."""
    config = args.cli_config
    hash_name = args.hash or config.tree.hash_function

    hash_function = get_hash_function(hash_name)
    leaves = [parse_leaf(value, hash_name) for value in read_leaves(args)]

    tree = LeanIMT(hash_function)
    try:
        if args.batch:
            tree.insert_many(leaves)
        else:
            for leaf in leaves:
                tree.insert(leaf)
    except IMTException as e:
        logger.info(f"Tree rejected input: {e.message}")
        if args.json:
            print(json.dumps(e.to_error_model().model_dump(), indent=2))
        else:
            print(f"Error: {e.message} {e.details}", file=sys.stderr)
        return EXIT_TREE_ERROR

    summary = RootSummary(
        hash_function=hash_name,
        size=tree.size,
        depth=tree.depth,
        root=format_node(tree.root),
        batch=args.batch,
    )

    if args.json:
        print(json.dumps(summary.to_dict(), indent=2))
    else:
        print(f"root:  {summary.root if summary.root is not None else '(empty tree)'}")
        print(f"size:  {summary.size}")
        print(f"depth: {summary.depth}")

    return EXIT_SUCCESS
