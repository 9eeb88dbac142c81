"""Sorted-pair Merkle tree over 32-byte leaves.

The tree is stored as a tuple of levels, ``levels[0]`` being the leaves and
``levels[-1]`` the single root. Children of node ``i`` on level ``k`` are
nodes ``2i`` and ``2i + 1`` on level ``k - 1``.

Rules:

1. Level 0 holds the leaves in ascending byte order, so the root does not
   depend on the order the caller supplied them in.
2. Adjacent nodes are combined with :func:`hash_pair`.
3. An odd node at the end of a level is promoted unchanged to the next
   level. It is neither hashed with itself nor given a proof entry.
4. A single leaf is its own root.
"""
import logging
from typing import List, Sequence, Tuple

from eth_utils import decode_hex, encode_hex

from .config import HASH_SIZE
from .errors import EmptyInput, LeafNotFound
from .hashing import hash_pair
from .proof import verify as verify_proof

logger = logging.getLogger(__name__)


def _as_bytes(value) -> bytes:
    if isinstance(value, str):
        return decode_hex(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"Expected a 32-byte hash, got {type(value).__name__}")


def _build_levels(leaves: List[bytes]) -> Tuple[Tuple[bytes, ...], ...]:
    levels = [tuple(leaves)]
    current = leaves
    while len(current) > 1:
        next_level = [
            hash_pair(current[i], current[i + 1])
            for i in range(0, len(current) - 1, 2)
        ]
        if len(current) % 2 == 1:
            next_level.append(current[-1])
        levels.append(tuple(next_level))
        current = next_level
    return tuple(levels)


class MerkleTree:
    """Immutable Merkle tree. Build it once per allow-list version."""

    def __init__(self, leaves: Sequence[bytes]):
        leaves = [_as_bytes(leaf) for leaf in leaves]
        if not leaves:
            raise EmptyInput()
        for leaf in leaves:
            if len(leaf) != HASH_SIZE:
                raise ValueError(
                    f"Leaf 0x{leaf.hex()} is {len(leaf)} bytes, expected {HASH_SIZE}"
                )
        self._leaves = tuple(leaves)
        self._levels = _build_levels(sorted(leaves))
        logger.debug(
            "Built Merkle tree: %d leaves, depth %d, root %s",
            len(leaves), self.depth, self.root_hex,
        )

    @property
    def leaves(self) -> Tuple[bytes, ...]:
        """Leaves in the order they were supplied."""
        return self._leaves

    @property
    def levels(self) -> Tuple[Tuple[bytes, ...], ...]:
        return self._levels

    @property
    def leaf_count(self) -> int:
        return len(self._leaves)

    @property
    def depth(self) -> int:
        return len(self._levels) - 1

    @property
    def root(self) -> bytes:
        return self._levels[-1][0]

    @property
    def root_hex(self) -> str:
        return encode_hex(self.root)

    def index_of(self, leaf) -> int:
        """Position of the first occurrence of ``leaf`` on level 0."""
        leaf = _as_bytes(leaf)
        try:
            return self._levels[0].index(leaf)
        except ValueError:
            raise LeafNotFound(leaf) from None

    def proof_at(self, index: int) -> List[bytes]:
        if not 0 <= index < len(self._levels[0]):
            raise IndexError(
                f"Leaf index {index} out of range for {len(self._levels[0])} leaves"
            )
        proof = []
        for level in self._levels[:-1]:
            sibling = index ^ 1
            # the promoted odd node has no sibling on this level
            if sibling < len(level):
                proof.append(level[sibling])
            index //= 2
        return proof

    def extract_proof(self, leaf) -> List[bytes]:
        """Sibling hashes from ``leaf`` up to the root.

        Duplicate leaves resolve to their first occurrence, so every copy gets
        the same proof.
        """
        return self.proof_at(self.index_of(leaf))

    def get_hex_proof(self, leaf) -> List[str]:
        return [encode_hex(node) for node in self.extract_proof(leaf)]

    def verify(self, proof: Sequence[bytes], leaf) -> bool:
        try:
            leaf = _as_bytes(leaf)
        except (TypeError, ValueError):
            return False
        return verify_proof(leaf, proof, self.root)

    def render(self) -> str:
        """Printable tree, root first, one node per line."""
        lines = []
        top = len(self._levels) - 1

        def walk(level, index, prefix, last):
            branch = "└─ " if last else "├─ "
            lines.append(prefix + branch + self._levels[level][index].hex())
            if level == 0:
                return
            below = self._levels[level - 1]
            children = [i for i in (2 * index, 2 * index + 1) if i < len(below)]
            child_prefix = prefix + ("   " if last else "│  ")
            for n, child in enumerate(children):
                walk(level - 1, child, child_prefix, n == len(children) - 1)

        walk(top, 0, "", True)
        return "\n".join(lines)

    def __len__(self):
        return self.leaf_count

    def __repr__(self):
        return f"MerkleTree(leaves={self.leaf_count}, root={self.root_hex})"


def build_tree(leaves: Sequence[bytes]) -> MerkleTree:
    return MerkleTree(leaves)
