#!/usr/bin/env python3
"""
Verify a generated-program directory.

Checks performed:
- manifest.json exists and is parseable
- the program file listed in the manifest exists
- its SHA256 checksum matches manifest.checksums
- manifest.stats is present, the tree has branches, and the human never wins

Exit codes:
 0 on success, non-zero on any validation failure.
"""
from __future__ import annotations

import argparse
import hashlib
import json
from pathlib import Path
import sys
from typing import Any, Dict


def sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open('rb') as f:
        for chunk in iter(lambda: f.read(8192), b''):
            h.update(chunk)
    return h.hexdigest()


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Verify a generated tic-tac-toe program")
    ap.add_argument("out", type=Path, help="Output directory (contains manifest.json)")
    ns = ap.parse_args(argv)
    out = ns.out
    manifest_path = out / "manifest.json"
    if not manifest_path.exists():
        print(f"ERROR: manifest not found: {manifest_path}", file=sys.stderr)
        return 2
    try:
        manifest = json.loads(manifest_path.read_text())
    except json.JSONDecodeError as e:
        print(f"ERROR: failed to parse manifest: {e}", file=sys.stderr)
        return 2

    ok = True
    files: Dict[str, Any] = manifest.get("files", {}) or {}
    checksums: Dict[str, Any] = manifest.get("checksums", {}) or {}

    program = files.get("program")
    if not program:
        print("ERROR: manifest.files.program is missing", file=sys.stderr)
        ok = False
    else:
        fp = out / program
        if not fp.exists():
            print(f"ERROR: missing program listed in manifest: {fp}", file=sys.stderr)
            ok = False
        else:
            want = checksums.get("program")
            have = sha256_file(fp)
            if want != have:
                print(f"ERROR: checksum mismatch for program: manifest={want} computed={have}", file=sys.stderr)
                ok = False

    stats = manifest.get("stats", {}) or {}
    if not isinstance(stats.get("branches"), int) or stats.get("branches", 0) <= 0:
        print("ERROR: manifest.stats.branches must be a positive integer", file=sys.stderr)
        ok = False
    if (stats.get("outcomes") or {}).get("You win!", 0) != 0:
        print("ERROR: generated tree contains a line the human wins", file=sys.stderr)
        ok = False

    if not ok:
        return 1
    print("OK: generated program verified", file=sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
