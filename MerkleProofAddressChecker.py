###############################################################
# CONFIG & FAQ - MerkleProofAddressChecker.py
#
# How do I check if an address is in the latest Merkle root?
#
# 1. Edit ADDRESSES_TO_CHECK below.
#    - Put each address in quotes, separated by commas.
#    - Upper/lowercase doesn't matter, but mixed case must be a
#      valid checksum (the way wallets display addresses).
#    - You CAN leave a comma after the last address or not.
#
#    Examples:
#      ADDRESSES_TO_CHECK = [
#          "0x7ec55a0200671f83a4aca56cddb14a5dc13db593",
#          "0xcbb98843270812eece07bfb82d26b4881a33aa91",
#      ]
#
# 2. Run the script: python MerkleProofAddressChecker.py
#    It will auto-detect the most recent phase and use the corresponding
#    Merkle root file (merkle_root_phase_<N>.txt).
#
# The printed proof is the list you submit with a whitelist claim.
###############################################################

ADDRESSES_TO_CHECK = [
    "0x7ec55a0200671f83a4aca56cddb14a5dc13db593",
    "0xcbb98843270812eece07bfb82d26b4881a33aa91",
    "0x0000000000000000000000000000000000000000",
    # Add more addresses as needed,
]

import glob
import json
import os
import re

from merkle_whitelist import MalformedAddress, Whitelist, verify_hex
from merkle_whitelist.sources import read_whitelist_file


ROOT_FILE_RE = re.compile(r"merkle_root_phase_(\d+)\.txt$")


def published_roots(directory="."):
    """Map phase number -> root file for every published phase root."""
    roots = {}
    for path in glob.glob(os.path.join(directory, "merkle_root_phase_*.txt")):
        m = ROOT_FILE_RE.search(path)
        if m:
            roots[int(m.group(1))] = path
    return roots


def get_latest_phase_root_file(directory="."):
    roots = published_roots(directory)
    if not roots:
        return None, -1
    phase = max(roots)
    return roots[phase], phase


def get_matching_whitelist_file(phase, directory="."):
    candidates = [f"whitelist_phase{phase}.txt", "whitelist.txt"]
    for name in candidates:
        path = os.path.join(directory, name)
        if os.path.exists(path):
            return path
    return os.path.join(directory, candidates[-1])


def check_address(whitelist, address, merkle_root):
    """Return (valid, hex proof) for one address, or None if it is not listed."""
    leaf = whitelist.leaf_for(address)
    if leaf not in whitelist.tree.levels[0]:
        return None
    proof = whitelist.hex_proof_for(address)
    return verify_hex("0x" + leaf.hex(), proof, merkle_root), proof


def main(addresses=None, directory="."):
    addresses = ADDRESSES_TO_CHECK if addresses is None else addresses
    root_file, latest_phase = get_latest_phase_root_file(directory)
    if root_file is None:
        print("[ERROR] No merkle_root_phase_*.txt file found.")
        return 1

    whitelist_file = get_matching_whitelist_file(latest_phase, directory)

    with open(root_file, "r") as f:
        merkle_root = f.read().strip()
    print(f"[i] Loaded Merkle root: {merkle_root} (phase {latest_phase})")
    print(f"[i] Loading whitelist from: {whitelist_file}")

    entries = read_whitelist_file(whitelist_file)
    if not entries:
        print("[ERROR] No addresses found in whitelist!")
        return 1
    try:
        whitelist = Whitelist(entries)
    except MalformedAddress as e:
        print(f"[ERROR] {whitelist_file} holds a malformed address: {e}")
        return 1
    if whitelist.root_hex != merkle_root.lower():
        print(f"[WARN] Whitelist file rebuilds to {whitelist.root_hex}, not the published root")

    for address in addresses:
        try:
            result = check_address(whitelist, address, merkle_root)
        except MalformedAddress as e:
            print(f"[MALFORMED] {address}: {e.reason}")
            continue
        if result is None:
            print(f"[NOT FOUND IN WHITELIST] {address}")
            continue
        valid, proof = result
        print(f"Address: {address}")
        print(f"  Included in Merkle root: {'YES' if valid else 'NO'}")
        print(f"  Merkle Proof: {json.dumps(proof, indent=2)}\n")

    print("Done.")
    return 0


if __name__ == "__main__":
    main()
