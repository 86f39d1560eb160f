"""
Minefield

A Minesweeper game engine for browser and terminal front ends:
- Deferred mine placement keeping the 3x3 block around the first reveal clear
- Adjacency counts and depth-first flood reveal of zero regions
- Flag toggling, win/loss detection and immutable snapshots for rendering
- A session layer mapping taps, long-presses and right-clicks to actions
"""

from .config import (
    DEFAULT_DIFFICULTY,
    DIFFICULTIES,
    DIFFICULTY_PRESETS,
    LONG_PRESS_THRESHOLD_MS,
    DifficultyPreset,
    get_preset,
)
from .engine import GameSnapshot, Minefield, Tile, TileView
from .gestures import action_for_press
from .session import GameSession, play_cli
from .analysis import (
    mine_frequency_map,
    plot_mine_frequency,
    run_opening_single_test,
    run_opening_many_tests,
    run_opening_difficulty_analysis,
)

__version__ = "1.0.0"

__all__ = [
    # Configuration
    "DEFAULT_DIFFICULTY",
    "DIFFICULTIES",
    "DIFFICULTY_PRESETS",
    "LONG_PRESS_THRESHOLD_MS",
    "DifficultyPreset",
    "get_preset",
    # Core classes
    "Minefield",
    "Tile",
    "TileView",
    "GameSnapshot",
    "GameSession",
    "action_for_press",
    # CLI
    "play_cli",
    # Analysis functions
    "mine_frequency_map",
    "plot_mine_frequency",
    "run_opening_single_test",
    "run_opening_many_tests",
    "run_opening_difficulty_analysis",
]
