"""Leaf and node hashing.

Both rules use a single round of Keccak-256:

- leaf:   keccak(address_bytes)               (20 raw bytes, no prefix)
- node:   keccak(min(a, b) + max(a, b))       (sorted pair)

Leaves carry no domain-separation tag, so a leaf and an internal node are
indistinguishable at the hash level. Existing on-chain verifiers expect
exactly this encoding.
"""
from eth_utils import keccak

from .address import normalize


def leaf_hash(address) -> bytes:
    """Hash an address (``Address`` or any accepted text form). Returns bytes."""
    return keccak(normalize(address).raw)


def hash_pair(a: bytes, b: bytes) -> bytes:
    if a <= b:
        return keccak(a + b)
    return keccak(b + a)
