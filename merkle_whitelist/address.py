"""Address normalization.

Every call site that turns an address into a leaf goes through
:func:`normalize`, so the same account always yields the same 20 bytes no
matter how the caller cased or prefixed it.
"""
from dataclasses import dataclass

from eth_utils import (
    decode_hex,
    is_checksum_address,
    is_checksum_formatted_address,
    is_hex_address,
    to_checksum_address,
)

from .config import ADDRESS_PREFIX, ADDRESS_SIZE
from .errors import MalformedAddress


@dataclass(frozen=True)
class Address:
    """A canonical 20-byte account identifier."""

    raw: bytes

    def __post_init__(self):
        if not isinstance(self.raw, bytes) or len(self.raw) != ADDRESS_SIZE:
            raise MalformedAddress(self.raw, f"expected {ADDRESS_SIZE} raw bytes")

    @property
    def checksum(self) -> str:
        return to_checksum_address(self.raw)

    def __str__(self):
        return self.checksum


def normalize(raw) -> Address:
    """Parse ``raw`` (with or without ``0x``) into an :class:`Address`.

    All-lowercase and all-uppercase hex are accepted as-is. Mixed casing must
    be the EIP-55 checksum of the address, otherwise it is rejected.
    """
    if isinstance(raw, Address):
        return raw
    if not isinstance(raw, str):
        raise MalformedAddress(raw, "address must be a string")

    body = raw[len(ADDRESS_PREFIX):] if raw.startswith(ADDRESS_PREFIX) else raw
    text = ADDRESS_PREFIX + body
    if not is_hex_address(text):
        raise MalformedAddress(raw)
    if is_checksum_formatted_address(text) and not is_checksum_address(text):
        raise MalformedAddress(raw, "bad address checksum")

    return Address(decode_hex(text))


def to_checksum(raw) -> str:
    return normalize(raw).checksum
