import random

import pytest

from cavegen.cave import FLOOR, WALL, make_rng, random_fill, resolve_seed
from cavegen.cave import fill as fill_mod


class CountingRandom(random.Random):
    def __init__(self, seed):
        super().__init__(seed)
        self.calls = 0

    def randrange(self, *a, **k):
        self.calls += 1
        return super().randrange(*a, **k)


class ScriptedRandom:
    """Returns queued values from randrange in order."""

    def __init__(self, values):
        self.values = list(values)

    def randrange(self, *_a, **_k):
        return self.values.pop(0)


@pytest.mark.parametrize("seed", ["troll-lair", "0", "", "12345"])
def test_same_seed_same_grid(seed):
    a = random_fill(40, 30, 45, make_rng(seed))
    b = random_fill(40, 30, 45, make_rng(seed))
    assert a == b


def test_different_seeds_differ():
    a = random_fill(40, 30, 45, make_rng("alpha"))
    b = random_fill(40, 30, 45, make_rng("beta"))
    assert a != b


def test_boundary_always_wall():
    g = random_fill(25, 17, 0, make_rng("edge"))
    for x, y in g.coords():
        if x in (0, g.width - 1) or y in (0, g.height - 1):
            assert g[x, y] == WALL, f"boundary cell {(x, y)} not wall"
        else:
            assert g[x, y] == FLOOR


def test_full_fill_is_all_wall():
    g = random_fill(12, 9, 100, make_rng("solid"))
    assert g.count(FLOOR) == 0


def test_one_draw_per_interior_cell():
    rng = CountingRandom("count")
    random_fill(10, 7, 50, rng)
    assert rng.calls == 8 * 5


def test_draw_order_is_x_outer_y_inner():
    # 4x4 grid: interior cells (1,1),(1,2),(2,1),(2,2) in that draw order
    rng = ScriptedRandom([0, 99, 99, 0])
    g = random_fill(4, 4, 50, rng)
    assert g[1, 1] == WALL
    assert g[1, 2] == FLOOR
    assert g[2, 1] == FLOOR
    assert g[2, 2] == WALL


def test_resolve_seed_keeps_explicit_seed():
    assert resolve_seed("abc") == "abc"


def test_resolve_seed_time_derived(monkeypatch):
    monkeypatch.setattr(fill_mod.time, "time", lambda: 1234.5)
    assert resolve_seed(None) == "1234.5"
    assert resolve_seed("ignored", use_random_seed=True) == "1234.5"
