"""
Write a generated program to disk together with a provenance manifest.

The manifest records what was generated (target, tree statistics), from
which code (git commit, python and numpy versions) and a sha256 checksum
of the program file, so ``scripts/verify_generated.py`` can re-check it.
"""
from __future__ import annotations

import hashlib
import json
import logging
import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List

import numpy as np

from .game_basics import Symbol
from .generator import generate_program
from .paths import default_program_path, get_git_commit, get_git_is_dirty
from .targets import TARGETS, get_target

GENERATOR_VERSION = "1.0.0"
MANIFEST_NAME = "manifest.json"


@dataclass
class GenerateArgs:
    out: Path | None = None
    target: str = "python"
    auto_symbol: Symbol = Symbol.SELF
    verbose: bool = False
    cli_argv: List[str] | None = None

    def __post_init__(self) -> None:
        if self.target.lower() not in TARGETS:
            raise ValueError(f"Unknown target: {self.target!r}")
        if not self.auto_symbol.is_player:
            raise ValueError(f"Computer must play X or O, got {self.auto_symbol!r}")


def sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open('rb') as f:
        for chunk in iter(lambda: f.read(8192), b''):
            h.update(chunk)
    return h.hexdigest()


def run_generate(args: GenerateArgs) -> Path:
    """Generate the program and its manifest; return the program path."""
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="[%(levelname)s] %(message)s")
    target = get_target(args.target)
    out = args.out if args.out is not None else default_program_path(target.suffix)
    out.parent.mkdir(parents=True, exist_ok=True)

    with out.open('w', newline='\n') as f:
        stats = generate_program(f, target, args.auto_symbol)
    logging.info("Wrote %s (%d bytes)", out, out.stat().st_size)

    manifest: Dict[str, Any] = {
        "generator_version": GENERATOR_VERSION,
        "created_at": datetime.now(timezone.utc).isoformat(),
        "target": target.name,
        "computer_plays": args.auto_symbol.name,
        "git_commit": get_git_commit(),
        "git_is_dirty": get_git_is_dirty(),
        "python": {
            "python_version": sys.version.split(" ")[0],
            "packages": {"numpy": np.__version__},
        },
        "cli_argv": args.cli_argv,
        "stats": stats.as_dict(),
        "files": {"program": out.name},
        "checksums": {"program": sha256_file(out)},
    }
    manifest_path = out.parent / MANIFEST_NAME
    manifest_path.write_text(json.dumps(manifest, indent=2))
    logging.info("Wrote %s", manifest_path)
    return out
