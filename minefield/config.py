"""Difficulty presets and tunable constants for the Minefield game."""

from typing import Dict, NamedTuple, Tuple


class DifficultyPreset(NamedTuple):
    """Board dimensions and mine count for one difficulty level."""

    width: int
    height: int
    mine_count: int


DIFFICULTY_PRESETS: Dict[str, DifficultyPreset] = {
    "easy": DifficultyPreset(width=10, height=8, mine_count=10),
    "medium": DifficultyPreset(width=18, height=14, mine_count=40),
    "hard": DifficultyPreset(width=24, height=20, mine_count=99),
}

DIFFICULTIES: Tuple[str, ...] = tuple(DIFFICULTY_PRESETS)
DEFAULT_DIFFICULTY: str = "easy"

# Cells kept mine-free around the first reveal (the 3x3 block).
SAFE_ZONE_SIZE: int = 9

# A primary press held at least this long counts as a flag gesture.
LONG_PRESS_THRESHOLD_MS: int = 300


def validate_preset(preset: DifficultyPreset) -> None:
    """
    Check that a preset can always be played.

    Args:
        preset: The preset to check.

    Raises:
        ValueError: If dimensions are non-positive, the mine count is negative,
            or the mines cannot fit outside the 3x3 block around a first click.
    """
    if preset.width <= 0 or preset.height <= 0:
        raise ValueError("Width and height must be positive.")
    if preset.mine_count < 0:
        raise ValueError("mine_count must be non-negative.")
    if preset.mine_count > preset.width * preset.height - SAFE_ZONE_SIZE:
        raise ValueError(
            "Cannot place enough mines outside the safe zone of the first reveal."
        )


def get_preset(difficulty: str) -> DifficultyPreset:
    """
    Look up the preset for a difficulty name.

    Raises:
        ValueError: If the difficulty is not one of DIFFICULTIES.
    """
    try:
        return DIFFICULTY_PRESETS[difficulty]
    except KeyError:
        raise ValueError(
            f"difficulty must be one of {', '.join(DIFFICULTIES)}; got {difficulty!r}."
        ) from None


for _preset in DIFFICULTY_PRESETS.values():
    validate_preset(_preset)
