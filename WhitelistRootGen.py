import json
import os

from merkle_whitelist import MalformedAddress, Whitelist, normalize
from merkle_whitelist.config import WHITELIST_URL
from merkle_whitelist.sources import (
    fetch_whitelist,
    read_whitelist_file,
    write_whitelist_file,
)

# --- CONFIG ---
ADDRESS_FILE = "allAddresses.txt"
PHASE = 1
WHITELIST_META_FILE = "whitelist_meta.json"
WHITELIST_PROOFS_FILE = "whitelist_proofs.json"


def load_addresses(address_file=ADDRESS_FILE, url=WHITELIST_URL):
    if url:
        print(f"Fetching whitelist from {url} ...")
        return fetch_whitelist(url)
    print(f"Loading whitelist from {address_file} ...")
    return read_whitelist_file(address_file)


def validate_addresses(addresses):
    """Split entries into checksummed addresses and (entry, reason) errors."""
    valid, errors, seen = [], [], set()
    total = len(addresses)
    for i, addr in enumerate(addresses):
        try:
            checksum = normalize(addr).checksum
        except MalformedAddress as e:
            errors.append((addr, e.reason))
            print(f"[{i+1}/{total}] {addr} - MALFORMED: {e.reason}")
            continue
        if checksum in seen:
            print(f"[{i+1}/{total}] {addr} - WARN: duplicate of {checksum}")
        seen.add(checksum)
        valid.append(checksum)
    return valid, errors


def write_outputs(whitelist, phase=PHASE, directory="."):
    list_file = os.path.join(directory, f"whitelist_phase{phase}.txt")
    root_file = os.path.join(directory, f"merkle_root_phase_{phase}.txt")
    meta_file = os.path.join(directory, WHITELIST_META_FILE)
    proofs_file = os.path.join(directory, WHITELIST_PROOFS_FILE)

    write_whitelist_file(list_file, list(whitelist.addresses))

    with open(root_file, "w") as f:
        f.write(whitelist.root_hex + "\n")
    print(f"Merkle root written to {root_file}")

    with open(meta_file, "w") as f:
        json.dump(
            {
                "phase": phase,
                "count": len(whitelist),
                "merkleRoot": whitelist.root_hex,
            },
            f,
            indent=2,
        )

    with open(proofs_file, "w") as f:
        json.dump(whitelist.proofs(), f, indent=2)
    print(f"Proofs written to {proofs_file}")


def main(address_file=ADDRESS_FILE, phase=PHASE, directory=".", url=WHITELIST_URL):
    addresses = load_addresses(address_file, url)
    print(f"Processing {len(addresses)} addresses")
    if not addresses:
        print("[ERROR] No addresses found in whitelist!")
        return None

    valid, errors = validate_addresses(addresses)
    if errors:
        # one bad entry rejects the whole list; never publish a partial root
        print(f"\n[ERROR] {len(errors)} malformed addresses, no root written:")
        for addr, msg in errors:
            print(f"  {addr}: {msg}")
        return None

    whitelist = Whitelist(valid)
    print("\nMERKLE_ROOT =", whitelist.root_hex)
    write_outputs(whitelist, phase, directory)

    print(f"\nDone. Whitelisted: {len(whitelist)} addresses (phase {phase}).")
    return whitelist.root_hex


if __name__ == "__main__":
    main()
