"""Proof verification and the hex encoding used to submit proofs."""
from typing import List, Sequence

from eth_utils import decode_hex, encode_hex

from .config import HASH_SIZE
from .hashing import hash_pair


def _is_hash(value) -> bool:
    return isinstance(value, bytes) and len(value) == HASH_SIZE


def verify(leaf: bytes, proof: Sequence[bytes], root: bytes) -> bool:
    """Recalculate the root from ``leaf`` and ``proof`` and compare it to ``root``.

    Never raises: anything that is not a list of 32-byte values simply fails
    to verify.
    """
    if not (_is_hash(leaf) and _is_hash(root)):
        return False
    try:
        siblings = list(proof)
    except TypeError:
        return False
    h = leaf
    for sibling in siblings:
        if not _is_hash(sibling):
            return False
        h = hash_pair(h, sibling)
    return h == root


def proof_to_hex(proof: Sequence[bytes]) -> List[str]:
    return [encode_hex(node) for node in proof]


def proof_from_hex(values: Sequence[str]) -> List[bytes]:
    """Decode ``0x``-prefixed proof elements, rejecting anything not 32 bytes."""
    proof = []
    for value in values:
        node = decode_hex(value)
        if len(node) != HASH_SIZE:
            raise ValueError(f"Proof element {value!r} is not {HASH_SIZE} bytes")
        proof.append(node)
    return proof


def verify_hex(leaf_hex: str, proof_hex: Sequence[str], root_hex: str) -> bool:
    try:
        leaf = decode_hex(leaf_hex)
        root = decode_hex(root_hex)
        proof = proof_from_hex(proof_hex)
    except (TypeError, ValueError):
        return False
    return verify(leaf, proof, root)
