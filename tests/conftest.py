import pytest

from merkle_whitelist import leaf_hash

# EIP-55 reference vectors, already in checksum form
CHECKSUMMED = [
    "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed",
    "0xfB6916095ca1df60bB79Ce92cE3Ea74c37c5d359",
    "0xdbF03B407c01E7cD3CBea99509d93f8DDDC8C6FB",
    "0xD1220A0cf47c7B9Be7A2E6BA89F429762e7b9aDb",
]

SINGLE = "0xc0f009ba829f78ad22639615807f4ca1dda62eb6"


def make_addresses(n):
    """``n`` distinct lowercase addresses."""
    return ["0x" + format(i + 1, "040x") for i in range(n)]


@pytest.fixture
def addresses():
    return make_addresses(7)


@pytest.fixture
def leaves(addresses):
    return [leaf_hash(a) for a in addresses]


@pytest.fixture
def admin():
    return CHECKSUMMED[0]
