"""Address-level facade over the Merkle tree.

Usage::

    wl = generate_merkle(["0xc0f009ba829f78ad22639615807f4ca1dda62eb6", ...])
    wl.root_hex                 # publish this
    wl.hex_proof_for(address)   # submit this with the claim
"""
import logging
from typing import Dict, List, Sequence

from eth_utils import encode_hex

from .address import normalize
from .errors import MalformedAddress
from .hashing import leaf_hash
from .proof import proof_to_hex, verify
from .tree import MerkleTree

logger = logging.getLogger(__name__)


class Whitelist:
    """An allow-list of addresses committed to a single Merkle root.

    Every address is validated before anything is hashed; a single malformed
    entry fails the whole list.
    """

    def __init__(self, addresses: Sequence[str]):
        normalized = [normalize(addr) for addr in addresses]
        self._addresses = tuple(addr.checksum for addr in normalized)
        self._tree = MerkleTree([leaf_hash(addr) for addr in normalized])
        logger.info(
            "Whitelist of %d addresses committed to root %s",
            len(self._addresses), self._tree.root_hex,
        )

    @property
    def addresses(self):
        """Checksummed addresses in input order."""
        return self._addresses

    @property
    def tree(self) -> MerkleTree:
        return self._tree

    @property
    def root(self) -> bytes:
        return self._tree.root

    @property
    def root_hex(self) -> str:
        return self._tree.root_hex

    def leaf_for(self, address) -> bytes:
        return leaf_hash(address)

    def proof_for(self, address) -> List[bytes]:
        """Proof for ``address``. Raises ``LeafNotFound`` if it is not listed."""
        return self._tree.extract_proof(self.leaf_for(address))

    def hex_proof_for(self, address) -> List[str]:
        return proof_to_hex(self.proof_for(address))

    def is_whitelisted(self, address) -> bool:
        try:
            leaf = self.leaf_for(address)
        except MalformedAddress:
            return False
        if leaf not in self._tree.levels[0]:
            return False
        return verify(leaf, self._tree.extract_proof(leaf), self.root)

    def proofs(self) -> Dict[str, List[str]]:
        return {addr: self.hex_proof_for(addr) for addr in self._addresses}

    def __contains__(self, address):
        return self.is_whitelisted(address)

    def __len__(self):
        return len(self._addresses)


def generate_merkle(addresses: Sequence[str]) -> Whitelist:
    return Whitelist(addresses)


def compute_root(addresses: Sequence[str]) -> str:
    """Merkle root of ``addresses`` as a ``0x``-prefixed hex string."""
    return encode_hex(Whitelist(addresses).root)
