#!/usr/bin/env python3
"""Cave structural diagnostics for specific seeds.

Usage:
  CAVEGEN_WIDTH=96 python scripts/diagnose_caves.py troll-lair 1234

Generation parameters come from ``CAVEGEN_*`` environment variables (see
``cavegen.cave.config``). If no seeds are given a default list is used.
Exits with non-zero status if structural issues are detected.
"""

from __future__ import annotations

import json
import os
import sys
from typing import List

# Ensure project root on path if executed directly
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from cavegen.cave.debug_checks import analyze, is_healthy  # noqa: E402 import after path fix
from cavegen.cave.pipeline import CaveGenerator  # noqa: E402 import after path fix
from cavegen.logging_utils import LEVELS, configure  # noqa: E402 import after path fix

DEFAULT_SEEDS = ["troll-lair", "1", "2", "deep-delve"]


def run_for_seed(seed: str) -> dict:
    gen = CaveGenerator.from_env(seed=seed)
    cfg = gen.config
    result = gen.generate()
    expected = (cfg.width + 2 * cfg.border_size, cfg.height + 2 * cfg.border_size)
    findings = analyze(result, border=cfg.border_size, expected_size=expected)
    issues = {
        "disconnected_rooms": len(findings["disconnected_rooms"]),
        "inaccessible_rooms": len(findings["inaccessible_rooms"]),
        "border_breaches": len(findings["border_breaches"]),
        "dimension_mismatch": int(findings["dimension_mismatch"]),
    }
    return {
        "seed": seed,
        "rooms": len(result.rooms),
        "passages": len(result.passages),
        "issues": issues,
        "ok": is_healthy(findings),
    }


def main(argv: List[str]) -> int:
    # keep stdout clean for the JSON report
    level = os.getenv("CAVEGEN_LOG_LEVEL", "warn")
    configure(level=level if level in LEVELS else "warn")
    seeds = argv or DEFAULT_SEEDS
    results = [run_for_seed(s) for s in seeds]
    print(json.dumps({"results": results}, indent=2))
    if not all(r["ok"] for r in results):
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
