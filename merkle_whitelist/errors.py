"""Exceptions raised by the whitelist engine and the gate model."""


class WhitelistError(Exception):
    """Base class for every error raised by this package."""


class MalformedAddress(WhitelistError, ValueError):
    def __init__(self, value, reason="not a 20-byte hex address"):
        self.value = value
        self.reason = reason
        super().__init__(f"Malformed address {value!r}: {reason}")


class EmptyInput(WhitelistError, ValueError):
    def __init__(self, message="Cannot build a Merkle tree from zero leaves"):
        super().__init__(message)


class LeafNotFound(WhitelistError, LookupError):
    def __init__(self, leaf: bytes):
        self.leaf = leaf
        super().__init__(f"Leaf 0x{leaf.hex()} is not part of the tree")


class ClaimDenied(WhitelistError):
    """A whitelist claim was refused by the gate.

    ``reason`` is a short, stable tag so operators can tell proof failures
    apart from phase or capacity denials.
    """

    reason = "denied"


class NotAdmin(ClaimDenied):
    reason = "not_admin"


class WhitelistNotLive(ClaimDenied):
    reason = "whitelist_not_live"


class InvalidMerkleProof(ClaimDenied):
    reason = "invalid_merkle_proof"


class ClaimLimitExceeded(ClaimDenied):
    reason = "claim_limit_exceeded"
