"""
Merkle whitelist engine.

Commit an address allow-list to a single Keccak-256 Merkle root, hand out
per-address proofs, and check those proofs against the published root.

    from merkle_whitelist import generate_merkle, verify

    wl = generate_merkle(addresses)
    proof = wl.proof_for(address)
    assert verify(wl.leaf_for(address), proof, wl.root)
"""
from .address import Address, normalize, to_checksum
from .errors import (
    ClaimDenied,
    ClaimLimitExceeded,
    EmptyInput,
    InvalidMerkleProof,
    LeafNotFound,
    MalformedAddress,
    NotAdmin,
    WhitelistError,
    WhitelistNotLive,
)
from .gate import MintPhase, WhitelistGate
from .hashing import hash_pair, leaf_hash
from .proof import proof_from_hex, proof_to_hex, verify, verify_hex
from .tree import MerkleTree, build_tree
from .whitelist import Whitelist, compute_root, generate_merkle

__version__ = "0.1.0"

__all__ = [
    "Address",
    "normalize",
    "to_checksum",
    "leaf_hash",
    "hash_pair",
    "MerkleTree",
    "build_tree",
    "verify",
    "verify_hex",
    "proof_to_hex",
    "proof_from_hex",
    "Whitelist",
    "generate_merkle",
    "compute_root",
    "MintPhase",
    "WhitelistGate",
    "WhitelistError",
    "MalformedAddress",
    "EmptyInput",
    "LeafNotFound",
    "ClaimDenied",
    "NotAdmin",
    "WhitelistNotLive",
    "InvalidMerkleProof",
    "ClaimLimitExceeded",
]
