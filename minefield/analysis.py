"""Monte-Carlo checks of mine placement and first-click openings."""

import logging
import random
from typing import Dict, List, Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np

from .config import DIFFICULTIES, get_preset
from .engine import Minefield

logger = logging.getLogger(__name__)


def mine_frequency_map(
    difficulty: str,
    first_click: Tuple[int, int],
    runs: int,
    *,
    seed: Optional[int] = None,
) -> np.ndarray:
    """
    Estimate how often each cell holds a mine after a given opening move.

    Args:
        difficulty: Preset name.
        first_click: (x, y) of the opening reveal.
        runs: Number of independent boards to sample. Must be positive.
        seed: Seed for the shared random source.

    Returns:
        Array of shape (width, height), indexed [x, y], with the fraction of
        runs in which each cell was a mine. Cells in the 3x3 block around the
        first click are always 0 and the array sums to the preset's mine count.

    Raises:
        ValueError: If runs is not positive or the click is off the board.
    """
    if runs <= 0:
        raise ValueError("runs must be positive.")

    preset = get_preset(difficulty)
    rng = random.Random(seed)
    counts = np.zeros((preset.width, preset.height), dtype=np.int64)

    fx, fy = first_click
    for _ in range(runs):
        field = Minefield(difficulty, rng=rng)
        field.place_mines(fx, fy)
        counts += np.array(
            [[tile.is_mine for tile in column] for column in field.grid],
            dtype=np.int64,
        )

    return counts / runs


def run_opening_single_test(
    difficulty: str,
    first_click: Optional[Tuple[int, int]] = None,
    *,
    rng: Optional[random.Random] = None,
) -> Dict[str, object]:
    """
    Play one opening move on a fresh board and report what it uncovered.

    Args:
        difficulty: Preset name.
        first_click: (x, y) of the opening reveal; defaults to the board centre.
        rng: Random source for mine placement.

    Returns:
        Dict with "first_click", "revealed_count", "opening_value" (value of
        the clicked tile) and "won".
    """
    field = Minefield(difficulty, rng=rng)
    if first_click is None:
        first_click = (field.width // 2, field.height // 2)

    x, y = first_click
    snap = field.reveal(x, y)
    opening = field.tile(x, y)

    return {
        "first_click": first_click,
        "revealed_count": field.revealed_count,
        "opening_value": opening.value,
        "won": snap.has_won,
    }


def run_opening_many_tests(
    difficulty: str,
    runs: int,
    first_click: Optional[Tuple[int, int]] = None,
    *,
    seed: Optional[int] = None,
) -> Dict[str, float]:
    """
    Run many independent openings and average the results.

    Args:
        difficulty: Preset name.
        runs: Number of boards to sample. Must be positive.
        first_click: (x, y) of the opening reveal; defaults to the board centre.
        seed: Seed for the shared random source.

    Returns:
        - avg_revealed_count: mean tiles uncovered by the opening move
        - min_revealed_count / max_revealed_count
        - zero_opening_rate: fraction of openings that hit a zero tile
        - revealed_fraction: avg_revealed_count over the number of safe tiles
        - first_click_win_rate: fraction of boards cleared by the opening alone
    """
    if runs <= 0:
        raise ValueError("runs must be positive.")

    preset = get_preset(difficulty)
    rng = random.Random(seed)

    revealed = np.empty(runs, dtype=np.int64)
    zero_openings = 0
    wins = 0

    for i in range(runs):
        result = run_opening_single_test(difficulty, first_click, rng=rng)
        revealed[i] = int(result["revealed_count"])  # type: ignore[call-overload]
        if result["opening_value"] == 0:
            zero_openings += 1
        if result["won"]:
            wins += 1

    safe_tiles = preset.width * preset.height - preset.mine_count
    out = {
        "avg_revealed_count": float(revealed.mean()),
        "min_revealed_count": float(revealed.min()),
        "max_revealed_count": float(revealed.max()),
        "zero_opening_rate": zero_openings / runs,
        "revealed_fraction": float(revealed.mean()) / safe_tiles,
        "first_click_win_rate": wins / runs,
    }
    logger.debug("Opening statistics for %s over %d runs: %s", difficulty, runs, out)
    return out


def plot_mine_frequency(freq: np.ndarray, title: Optional[str] = None) -> None:
    """
    Show a mine-frequency map as a heat map, x across and y down like the board.

    Args:
        freq: Array returned by mine_frequency_map().
        title: Optional plot title.
    """
    plt.figure()  # type: ignore[misc]
    plt.imshow(freq.T, cmap="Reds", vmin=0.0)  # type: ignore[misc]
    plt.colorbar(label="Mine frequency")  # type: ignore[misc]
    plt.xlabel("x")  # type: ignore[misc]
    plt.ylabel("y")  # type: ignore[misc]
    plt.title(title or "Mine frequency per cell")  # type: ignore[misc]
    plt.tight_layout()
    plt.show()  # type: ignore[misc]


def run_opening_difficulty_analysis(
    runs: int, *, seed: Optional[int] = None
) -> Dict[str, Dict[str, float]]:
    """
    Run opening statistics for every difficulty preset and plot a summary.

    Args:
        runs: Number of boards per preset.
        seed: Seed for the random source of each preset.

    Returns:
        Mapping from difficulty name to run_opening_many_tests() statistics.
    """
    results: Dict[str, Dict[str, float]] = {}
    for difficulty in DIFFICULTIES:
        results[difficulty] = run_opening_many_tests(difficulty, runs, seed=seed)

    names: List[str] = list(results)
    x = np.arange(len(names))
    bar_w = 0.35

    # 1) Share of safe tiles uncovered by the opening, and zero-opening rate
    revealed_fraction = [results[n]["revealed_fraction"] for n in names]
    zero_rate = [results[n]["zero_opening_rate"] for n in names]

    plt.figure()  # type: ignore[misc]
    plt.bar(x - bar_w / 2, revealed_fraction, width=bar_w, label="revealed fraction")  # type: ignore[misc]
    plt.bar(x + bar_w / 2, zero_rate, width=bar_w, label="zero opening rate")  # type: ignore[misc]
    plt.xticks(x, names)  # type: ignore[misc]
    plt.ylim(0.0, 1.0)  # type: ignore[misc]
    plt.title("Opening move by difficulty")  # type: ignore[misc]
    plt.legend()  # type: ignore[misc]
    plt.tight_layout()
    plt.show()  # type: ignore[misc]

    return results
