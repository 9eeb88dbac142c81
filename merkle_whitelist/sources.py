"""Where allow-lists come from: plain list files and paginated JSON endpoints.

Nothing here validates addresses. Entries are returned as text and
validated when a :class:`~merkle_whitelist.whitelist.Whitelist` is built.
"""
import logging
import time

import requests

from .config import HTTP_TIMEOUT, PAGE_DELAY, PAGE_LIMIT

logger = logging.getLogger(__name__)


def parse_whitelist(content):
    """Split list text: comma separated if it has a comma, else one per line."""
    if "," in content:
        entries = content.split(",")
    else:
        entries = content.splitlines()
    return [a.strip() for a in entries if a.strip()]


def read_whitelist_file(path):
    with open(path, "r") as f:
        addresses = parse_whitelist(f.read())
    logger.debug("Read %d entries from %s", len(addresses), path)
    return addresses


def write_whitelist_file(path, addresses):
    with open(path, "w") as f:
        f.write(",\n".join(addresses))
    logger.debug("Wrote %d entries to %s", len(addresses), path)


def _entry_address(entry):
    if isinstance(entry, str):
        return entry
    if isinstance(entry, dict):
        addr = entry.get("address") or entry.get("author")
        if isinstance(addr, str):
            return addr
    return None


def fetch_whitelist(url, limit=PAGE_LIMIT, session=None, timeout=HTTP_TIMEOUT):
    """Fetch every page of ``url`` and return the listed addresses.

    The endpoint answers ``{"result": [...], "continuationToken": "..."}``;
    result entries are either address strings or objects carrying an
    ``address`` (or ``author``) field. Pages are requested until no
    continuation token is returned.
    """
    http = session or requests
    params = {"limit": limit}
    headers = {"accept": "application/json"}
    addresses = []
    continuation = None
    page = 0
    while True:
        if continuation:
            params["continuationToken"] = continuation
        else:
            params.pop("continuationToken", None)
        resp = http.get(url, params=params, headers=headers, timeout=timeout)
        resp.raise_for_status()
        data = resp.json() or {}
        for entry in data.get("result") or []:
            addr = _entry_address(entry)
            if addr:
                addresses.append(addr.strip())
        page += 1
        continuation = data.get("continuationToken")
        if not continuation:
            break
        time.sleep(PAGE_DELAY)
    logger.info("Fetched %d entries from %s (%d pages)", len(addresses), url, page)
    return addresses
