"""Structural checks over a finished ``CaveResult``.

Used by ``scripts/diagnose_caves.py`` and the test-suite; every finding is a
list (or flag) that is empty / False on a healthy cave.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from .tiles import WALL


def border_breaches(grid, border: int) -> List[Tuple[int, int]]:
    """Non-wall cells inside the outer ``border`` frame."""
    out = []
    for x, y in grid.coords():
        inside = border <= x < grid.width - border and border <= y < grid.height - border
        if not inside and grid.cells[x][y] != WALL:
            out.append((x, y))
    return out


def analyze(result, border: Optional[int] = None, expected_size: Optional[Tuple[int, int]] = None) -> Dict[str, Any]:
    """Return findings for ``result``.

    ``border`` / ``expected_size`` default to nothing; pass the config values
    to enable the frame and dimension checks.
    """
    graph = result.rooms
    comps = graph.components()
    disconnected: List[int] = []
    if result.passages and len(comps) > 1:
        main = next((c for c in comps if 0 in c), comps[0])
        disconnected = [i for c in comps if c is not main for i in c]
    inaccessible = graph.inaccessible_indices() if result.passages else []
    breaches = border_breaches(result.grid, border) if border else []
    mismatch = expected_size is not None and result.grid.size != tuple(expected_size)
    return {
        "disconnected_rooms": disconnected,
        "inaccessible_rooms": inaccessible,
        "border_breaches": breaches,
        "dimension_mismatch": mismatch,
    }


def is_healthy(findings: Dict[str, Any]) -> bool:
    return not any(findings.values())


__all__ = ["analyze", "border_breaches", "is_healthy"]
