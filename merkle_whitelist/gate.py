"""In-memory model of the on-chain whitelist mint gate.

The gate only stores the published root, a phase flag and per-address claim
counters. It derives the leaf from the caller's own address and never accepts
a leaf from the caller.
"""
import enum
import logging

from eth_utils import decode_hex

from .address import normalize
from .config import HASH_SIZE, WHITELIST_MAX_MINTS
from .errors import (
    ClaimLimitExceeded,
    InvalidMerkleProof,
    NotAdmin,
    WhitelistNotLive,
)
from .hashing import leaf_hash
from .proof import proof_from_hex, verify

logger = logging.getLogger(__name__)


def _as_proof(proof):
    """Accept a proof as 32-byte values or as the published 0x hex strings."""
    proof = list(proof)
    if any(isinstance(node, str) for node in proof):
        return proof_from_hex(proof)
    return proof


class MintPhase(enum.IntEnum):
    CLOSED = 0
    WHITELIST = 1
    PUBLIC = 2


class WhitelistGate:
    def __init__(self, admin, max_claims_per_address=WHITELIST_MAX_MINTS):
        self.admin = normalize(admin)
        self.max_claims_per_address = max_claims_per_address
        self.phase = MintPhase.CLOSED
        self.merkle_root = None
        self._claimed = {}

    def _require_admin(self, caller):
        if normalize(caller) != self.admin:
            raise NotAdmin(f"{caller} is not the gate admin")

    def set_root(self, caller, root):
        """Publish a new root. Proofs built for the previous root stop verifying."""
        self._require_admin(caller)
        if isinstance(root, str):
            root = decode_hex(root)
        if not isinstance(root, bytes) or len(root) != HASH_SIZE:
            raise ValueError(f"Merkle root must be {HASH_SIZE} bytes")
        self.merkle_root = root
        logger.info("Merkle root set to 0x%s", root.hex())

    def set_phase(self, caller, phase):
        self._require_admin(caller)
        self.phase = MintPhase(phase)
        logger.info("Mint phase set to %s", self.phase.name)

    def claimed(self, address):
        return self._claimed.get(normalize(address), 0)

    def claim(self, caller, proof, quantity=1):
        """Spend ``quantity`` of ``caller``'s whitelist allowance.

        Returns the caller's new claim count. Raises a ``ClaimDenied``
        subclass naming why the claim was refused.
        """
        if quantity < 1:
            raise ValueError("quantity must be at least 1")
        if self.phase != MintPhase.WHITELIST:
            raise WhitelistNotLive(f"Whitelist claims are closed (phase={self.phase.name})")

        address = normalize(caller)
        try:
            proof = _as_proof(proof)
        except (TypeError, ValueError):
            raise InvalidMerkleProof(f"Malformed Merkle proof for {address}") from None
        if self.merkle_root is None or not verify(leaf_hash(address), proof, self.merkle_root):
            logger.warning("Rejected whitelist proof for %s", address)
            raise InvalidMerkleProof(f"Invalid Merkle proof for {address}")

        used = self._claimed.get(address, 0)
        if used + quantity > self.max_claims_per_address:
            raise ClaimLimitExceeded(
                f"{address} already claimed {used} of {self.max_claims_per_address}"
            )

        self._claimed[address] = used + quantity
        return self._claimed[address]
