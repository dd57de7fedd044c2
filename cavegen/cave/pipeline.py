"""
project: cavegen
module: pipeline.py
License: MIT

Pipeline orchestration for cave generation.

Stages, in order:
    * random fill (seeded, boundary forced to wall)
    * cellular-automaton smoothing, ``smoothing_iterations`` passes
    * small wall region removal, then small floor region removal
    * room graph construction from the surviving floor regions
    * room connection (optional)
    * wall border framing

Every ``generate()`` call starts from scratch and returns fresh objects, so a
previous ``CaveResult`` is never mutated by a later pass.
"""
from __future__ import annotations

import dataclasses
import random
import time
import warnings
from typing import Any, Callable, Dict, List, NamedTuple, Optional, Tuple

from ..logging_utils import get_logger
from .border import add_border
from .config import CaveConfig, apply_env_overrides
from .connectivity import Passage, connect_rooms
from .errors import EmptyResultWarning
from .fill import make_rng, random_fill, resolve_seed
from .grid import Grid
from .metrics import collect_tile_counts, init_metrics
from .regions import process_regions
from .rooms import RoomGraph, build_rooms
from .smoothing import smooth
from .tiles import FLOOR

log = get_logger("cavegen.pipeline")


class CaveResult(NamedTuple):
    grid: Grid
    rooms: RoomGraph
    passages: List[Passage]
    seed: str
    metrics: Dict[str, Any]

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height


class CaveGenerator:
    """Runs the generation pipeline for one configuration.

    Accepts either a ``CaveConfig`` or the short ``seed=``/``size=`` keyword
    style; keywords override the matching config fields on a private copy, so
    the caller's config is never modified. ``rng_factory`` builds the random
    source from the resolved seed and is called once per ``generate()``.
    """

    def __init__(
        self,
        config: Optional[CaveConfig] = None,
        *,
        seed: Optional[str] = None,
        size: Optional[Tuple[int, int]] = None,
        rng_factory: Optional[Callable[[str], random.Random]] = None,
    ):
        config = dataclasses.replace(config) if config is not None else CaveConfig()
        if seed is not None:
            config.seed = seed
            config.use_random_seed = False
        if size is not None:
            config.width, config.height = size[0], size[1]
        self.config = config.validate()
        self._rng_factory = rng_factory or make_rng

    @classmethod
    def from_env(cls, environ=None, **kwargs) -> "CaveGenerator":
        """Build from defaults overlaid with ``CAVEGEN_*`` environment variables."""
        return cls(apply_env_overrides(CaveConfig(), environ), **kwargs)

    def generate(self) -> CaveResult:
        cfg = self.config
        seed = resolve_seed(cfg.seed, cfg.use_random_seed)
        rng = self._rng_factory(seed)
        metrics = init_metrics() if cfg.enable_metrics else {}
        start = time.perf_counter()
        phase_times: Dict[str, int] = {}

        def _phase(label, fn, *a, **k):
            ps = time.perf_counter()
            r = fn(*a, **k)
            phase_times[label] = int((time.perf_counter() - ps) * 1000)
            log.debug(event="stage_complete", stage=label, seed=seed)
            return r

        grid = _phase("fill", random_fill, cfg.width, cfg.height, cfg.fill_percent, rng)
        grid = _phase("smooth", smooth, grid, cfg.smoothing_iterations)
        regions = _phase(
            "regions", process_regions, grid, cfg.wall_threshold, cfg.room_threshold,
            metrics if cfg.enable_metrics else None,
        )
        rooms = _phase("rooms", build_rooms, grid, regions)
        passages: List[Passage] = []
        if cfg.connect_rooms:
            passages = _phase("connect", connect_rooms, grid, rooms, cfg.passage_radius)
        grid = _phase("border", add_border, grid, cfg.border_size)

        if cfg.enable_metrics:
            metrics["rooms"] = len(rooms)
            metrics["passages"] = len(passages)
            collect_tile_counts(grid, metrics)
            metrics["phase_ms"] = phase_times
            metrics["runtime_ms"] = int((time.perf_counter() - start) * 1000)

        if grid.count(FLOOR) == 0:
            log.warn(event="empty_cave", seed=seed, fill_percent=cfg.fill_percent)
            warnings.warn(
                f"cave generation produced no floor tiles (seed={seed!r})", EmptyResultWarning, stacklevel=2
            )
        log.info(
            event="cave_generated",
            seed=seed,
            width=grid.width,
            height=grid.height,
            rooms=len(rooms),
            passages=len(passages),
            runtime_ms=metrics.get("runtime_ms"),
        )
        return CaveResult(grid, rooms, passages, seed, metrics)


def generate_cave(config: Optional[CaveConfig] = None, **overrides) -> CaveResult:
    """One-shot helper: ``generate_cave(width=40, height=30, seed="abc")``."""
    config = dataclasses.replace(config) if config is not None else CaveConfig()
    for key, value in overrides.items():
        if not hasattr(config, key):
            raise TypeError(f"unknown cave option {key!r}")
        setattr(config, key, value)
    return CaveGenerator(config).generate()


__all__ = ["CaveGenerator", "CaveResult", "generate_cave"]
