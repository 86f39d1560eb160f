"""
Pytest configuration and shared fixtures.
"""
import random
from typing import Callable, Iterable, Tuple

import matplotlib

matplotlib.use("Agg")

import pytest

from minefield import GameSession, Minefield


# Easy board (10x8) split by a wall of mines down column x=5, plus two more
# mines on the right edge: 10 mines in total, matching the easy preset.
WALL_MINES = [(5, y) for y in range(8)] + [(9, 0), (9, 7)]

# Easy board with every mine packed against the right edge; a single reveal
# at (0, 0) clears the whole board.
EDGE_MINES = [(9, y) for y in range(8)] + [(8, 0), (8, 1)]


def rig_mines(field: Minefield, mines: Iterable[Tuple[int, int]]) -> Minefield:
    """Place mines at fixed positions, as if the opening move had happened."""
    for x, y in mines:
        field.grid[x][y].is_mine = True
    field.compute_values()
    field.mines_set = True
    return field


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def easy_field(rng: random.Random) -> Minefield:
    return Minefield("easy", rng=rng)


@pytest.fixture
def rig() -> Callable[..., Minefield]:
    return rig_mines


@pytest.fixture
def wall_field(easy_field: Minefield) -> Minefield:
    return rig_mines(easy_field, WALL_MINES)


@pytest.fixture
def edge_field(easy_field: Minefield) -> Minefield:
    return rig_mines(easy_field, EDGE_MINES)


@pytest.fixture
def session(rng: random.Random) -> GameSession:
    return GameSession("easy", rng=rng)


@pytest.fixture
def wall_mines():
    return list(WALL_MINES)


@pytest.fixture
def edge_mines():
    return list(EDGE_MINES)
