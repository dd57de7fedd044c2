from typing import Dict

from .grid import Grid
from .tiles import FLOOR, WALL


def init_metrics() -> Dict[str, int | float | dict]:
    return {
        'wall_regions_removed': 0,
        'floor_regions_removed': 0,
        'rooms': 0,
        'passages': 0,
        'tiles_floor': 0,
        'tiles_wall': 0,
        'phase_ms': {},
        'runtime_ms': 0.0,
    }


def collect_tile_counts(grid: Grid, metrics: Dict) -> None:
    metrics['tiles_floor'] = grid.count(FLOOR)
    metrics['tiles_wall'] = grid.count(WALL)
