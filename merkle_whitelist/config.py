"""Package-wide constants."""
import os

ADDRESS_PREFIX = "0x"
ADDRESS_SIZE = 20
HASH_SIZE = 32

# Per-address whitelist claim cap enforced by the gate model
WHITELIST_MAX_MINTS = 1

# Remote allow-list source
WHITELIST_URL = os.getenv("WHITELIST_URL")
HTTP_TIMEOUT = float(os.getenv("WHITELIST_HTTP_TIMEOUT", "10"))
PAGE_LIMIT = 100
PAGE_DELAY = 0.1
