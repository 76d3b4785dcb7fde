"""
Lean IMT - Incremental Merkle Tree
Append-only binary Merkle tree with dynamic depth and proof-gated updates.

This module provides:
- LeanIMT: the tree, with insert / insert_many / update / remove
- Membership and position queries over the current leaves

Tree Shape Rules:
1. Depth is the smallest d with 2^d >= size (0 for an empty tree)
2. No zero padding: a node without a right sibling is promoted to the
   next level unchanged instead of being hashed with a zero
3. Parent = hash(left, right), with the injected hash function
4. Removed leaves keep their position and hold ZERO
5. Single leaf: root = leaf

Side Nodes:
For every level L < depth, side_nodes[L] holds the current value of the
node at level L, position ((size - 1) >> L) & ~1, i.e. the left node of
the last pair. side_nodes[depth] is the root. This is all the state an
insertion needs, so insert is O(depth) and insert_many is
O(batch + depth).
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Optional, Sequence

from lean_imt.imt.nodes import HashFunction, Node, ZERO, is_zero
from lean_imt.schemas.errors import (
    DuplicateLeafException,
    InsufficientSiblingPathException,
    InvalidSiblingPathException,
    LeafNotFoundException,
    ZeroLeafException,
)

if TYPE_CHECKING:
    from lean_imt.config import RuntimeConfig


logger = logging.getLogger(__name__)


class LeanIMT:
    """
    Lean incremental Merkle tree.

    Leaves are kept densely by position, with a reverse index from leaf
    value to 1-based position for membership queries. ZERO never appears
    in the reverse index, so any number of removed slots may coexist.

    Not thread-safe: callers must serialize mutating calls.

    Example:
        >>> from lean_imt.crypto import join_hash
        >>> tree = LeanIMT(join_hash)
        >>> tree.insert_many(["a", "b", "c"])
        'a,b,c'
        >>> tree.remove("a", ["b", "c"])
        '0,b,c'
    """

    def __init__(
        self,
        hash_function: HashFunction,
        leaves: Optional[Iterable[Node]] = None,
    ) -> None:
        self._hash = hash_function
        self._size = 0
        self._depth = 0
        self._side_nodes: dict[int, Node] = {}
        self._leaves: list[Node] = []
        self._positions: dict[Node, int] = {}

        if leaves is not None:
            self.insert_many(list(leaves))

    @classmethod
    def from_config(cls, config: Optional["RuntimeConfig"] = None) -> "LeanIMT":
        """Create an empty tree using the configured hash function."""
        from lean_imt.config import get_default_config
        from lean_imt.crypto.hashing import get_hash_function

        config = config or get_default_config()
        return cls(get_hash_function(config.tree.hash_function))

    # -------------------------------------------------------------------------
    # Introspection
    # -------------------------------------------------------------------------

    @property
    def size(self) -> int:
        """Number of leaf positions ever filled (removed slots included)."""
        return self._size

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def root(self) -> Optional[Node]:
        """Current root, or None for an empty tree. May be ZERO."""
        if self._size == 0:
            return None
        return self._side_nodes[self._depth]

    @property
    def side_nodes(self) -> dict[int, Node]:
        return dict(self._side_nodes)

    @property
    def leaves(self) -> list[Node]:
        """Leaf values in position order, ZERO at removed positions."""
        return list(self._leaves)

    def has(self, leaf: Node) -> bool:
        return leaf in self._positions

    def index_of(self, leaf: Node) -> int:
        """
        Return the 0-based position of a leaf.

        Raises:
            LeafNotFoundException: If the leaf is not in the tree
        """
        try:
            return self._positions[leaf] - 1
        except KeyError:
            raise LeafNotFoundException(leaf) from None

    def __len__(self) -> int:
        return self._size

    def __contains__(self, leaf: object) -> bool:
        # Unhashable values can never be leaves
        try:
            return self.has(leaf)
        except TypeError:
            return False

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={self._size}, depth={self._depth}, root={self.root!r})"

    # -------------------------------------------------------------------------
    # Insertion
    # -------------------------------------------------------------------------

    def _check_new_leaf(self, leaf: Node) -> None:
        if is_zero(leaf):
            raise ZeroLeafException()
        if leaf in self._positions:
            raise DuplicateLeafException(leaf)

    def insert(self, leaf: Node) -> Node:
        """
        Append a leaf and return the new root.

        Algorithm:
        1. Grow depth by one if the new leaf does not fit
        2. Walk up from the leaf: at levels where the index bit is 1 the
           node is a right child and is hashed with side_nodes[level];
           where it is 0 the node is a left child, is stored as the side
           node for that level and carried up unchanged
        3. The value reaching the top is the new root

        Raises:
            ZeroLeafException: If leaf is ZERO
            DuplicateLeafException: If leaf is already in the tree
        """
        self._check_new_leaf(leaf)

        index = self._size
        depth = self._depth
        if (1 << depth) < index + 1:
            depth += 1

        node = leaf
        for level in range(depth):
            if (index >> level) & 1:
                node = self._hash(self._side_nodes[level], node)
            else:
                self._side_nodes[level] = node

        self._depth = depth
        self._size = index + 1
        self._side_nodes[depth] = node
        self._leaves.append(leaf)
        self._positions[leaf] = index + 1

        logger.debug(f"Inserted leaf at index {index}, size={self._size}, depth={self._depth}")
        return node

    def insert_many(self, leaves: Sequence[Node]) -> Optional[Node]:
        """
        Append a batch of leaves and return the new root.

        Produces the same tree as inserting each leaf in order, but builds
        it level by level: only the nodes on the new right edge of each
        level are computed, and each is computed once.

        An empty batch changes nothing and returns the current root.

        Raises:
            ZeroLeafException: If any leaf is ZERO
            DuplicateLeafException: If any leaf is already in the tree or
                appears twice in the batch
        """
        seen: set = set()
        for leaf in leaves:
            self._check_new_leaf(leaf)
            if leaf in seen:
                raise DuplicateLeafException(leaf, details={"within_batch": True})
            seen.add(leaf)

        if not leaves:
            return self.root

        start_size = self._size
        new_size = start_size + len(leaves)

        depth = self._depth
        while (1 << depth) < new_size:
            depth += 1

        # Nodes of the current level from position current_start onwards
        current_nodes: list[Node] = list(leaves)
        current_start = start_size
        current_size = new_size

        for level in range(depth):
            next_start = current_start >> 1
            next_size = ((current_size - 1) >> 1) + 1

            next_nodes: list[Node] = []
            for position in range(next_start, next_size):
                left_offset = position * 2 - current_start
                right_offset = left_offset + 1

                # A left child before the batch is the cached left node
                if left_offset >= 0:
                    left = current_nodes[left_offset]
                else:
                    left = self._side_nodes[level]

                if right_offset < len(current_nodes):
                    next_nodes.append(self._hash(left, current_nodes[right_offset]))
                else:
                    next_nodes.append(left)

            if current_size & 1:
                self._side_nodes[level] = current_nodes[-1]
            elif len(current_nodes) > 1:
                self._side_nodes[level] = current_nodes[-2]

            current_nodes = next_nodes
            current_start = next_start
            current_size = next_size

        root = current_nodes[0]

        self._depth = depth
        self._size = new_size
        self._side_nodes[depth] = root
        self._leaves.extend(leaves)
        for offset, leaf in enumerate(leaves):
            self._positions[leaf] = start_size + offset + 1

        logger.debug(
            f"Inserted {len(leaves)} leaves from index {start_size}, "
            f"size={self._size}, depth={self._depth}"
        )
        return root

    # -------------------------------------------------------------------------
    # Proof-gated mutation
    # -------------------------------------------------------------------------

    def update(
        self,
        old_leaf: Node,
        new_leaf: Node,
        sibling_nodes: Sequence[Node],
    ) -> Node:
        """
        Replace a leaf, authenticated by its Merkle sibling path.

        The old root is recomputed from old_leaf and sibling_nodes and must
        equal the current root before anything is written.

        Sibling path layout (bottom-up), per level:
        - index bit 1: the left sibling, always required
        - index bit 0 with an existing right sibling: that sibling
        - index bit 0 on the right edge of the tree: nothing (the node is
          promoted unchanged)

        new_leaf may be ZERO, which removes old_leaf but keeps its position.

        Raises:
            LeafNotFoundException: If old_leaf is not in the tree
            DuplicateLeafException: If new_leaf is already in the tree
            InsufficientSiblingPathException: If the path is too short
            InvalidSiblingPathException: If the recomputed old root differs
        """
        if old_leaf not in self._positions:
            raise LeafNotFoundException(old_leaf)
        if not is_zero(new_leaf) and new_leaf in self._positions:
            raise DuplicateLeafException(new_leaf)

        index = self.index_of(old_leaf)
        last_index = self._size - 1

        node = new_leaf
        old_root = old_leaf
        staged_side_nodes: dict[int, Node] = {}
        i = 0

        for level in range(self._depth):
            if (index >> level) & 1:
                if i >= len(sibling_nodes):
                    raise InsufficientSiblingPathException(level, len(sibling_nodes))
                sibling = sibling_nodes[i]
                i += 1
                node = self._hash(sibling, node)
                old_root = self._hash(sibling, old_root)
            else:
                # The cached left node of the last pair lies on this path
                if index >> level == (last_index >> level) & ~1:
                    staged_side_nodes[level] = node

                if index >> level != last_index >> level:
                    if i >= len(sibling_nodes):
                        raise InsufficientSiblingPathException(level, len(sibling_nodes))
                    sibling = sibling_nodes[i]
                    i += 1
                    node = self._hash(node, sibling)
                    old_root = self._hash(old_root, sibling)

        if old_root != self.root:
            logger.debug(f"Rejected update at index {index}: sibling path does not match root")
            raise InvalidSiblingPathException(leaf_index=index)

        self._side_nodes.update(staged_side_nodes)
        self._side_nodes[self._depth] = node

        del self._positions[old_leaf]
        self._leaves[index] = new_leaf
        if not is_zero(new_leaf):
            self._positions[new_leaf] = index + 1

        logger.debug(f"Updated leaf at index {index}, removed={is_zero(new_leaf)}")
        return node

    def remove(self, old_leaf: Node, sibling_nodes: Sequence[Node]) -> Node:
        """
        Remove a leaf by updating it to ZERO.

        The position is kept; size and depth do not change.

        Raises:
            Same as update().
        """
        return self.update(old_leaf, ZERO, sibling_nodes)


__all__ = [
    "LeanIMT",
]
