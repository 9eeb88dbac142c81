#!/usr/bin/env python3
import glob
import os
import re

from merkle_whitelist import MalformedAddress, Whitelist
from merkle_whitelist.sources import read_whitelist_file

SUMMARY_FILE = "whitelist_roots_per_phase.csv"


def find_phase_files(directory="."):
    found = []
    for f in glob.glob(os.path.join(directory, "whitelist_phase*.txt")):
        m = re.search(r"whitelist_phase(\d+)\.txt$", f)
        if m:
            found.append((int(m.group(1)), f))
    return sorted(found)


def process_phase(phase, list_file, directory="."):
    entries = read_whitelist_file(list_file)
    if not entries:
        print(f"Phase {phase}: {list_file} is empty, skipped")
        return None
    try:
        wl = Whitelist(entries)
    except MalformedAddress as e:
        print(f"Phase {phase}: EXCLUDED. Reason: {e}")
        return None
    root_file = os.path.join(directory, f"merkle_root_phase_{phase}.txt")
    with open(root_file, "w") as f:
        f.write(wl.root_hex + "\n")
    print(f"Phase {phase}: {len(wl)} addresses, MERKLE_ROOT = {wl.root_hex}")
    return len(wl), wl.root_hex


def main(directory="."):
    summary = []
    for phase, list_file in find_phase_files(directory):
        res = process_phase(phase, list_file, directory)
        if res:
            summary.append((phase,) + res)
    with open(os.path.join(directory, SUMMARY_FILE), "w") as f:
        f.write("Phase,AddressCount,MerkleRoot\n")
        for phase, cnt, root in summary:
            f.write(f"{phase},{cnt},{root}\n")
    print(f"{SUMMARY_FILE} written")
    return summary


if __name__ == "__main__":
    main()
