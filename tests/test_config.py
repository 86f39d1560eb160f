"""
Tests for difficulty presets and preset validation.
"""

import pytest

from minefield import DEFAULT_DIFFICULTY, DIFFICULTIES, DifficultyPreset, get_preset
from minefield.config import validate_preset


@pytest.mark.parametrize("difficulty,expected", [
    ("easy", (10, 8, 10)),
    ("medium", (18, 14, 40)),
    ("hard", (24, 20, 99)),
])
def test_presets(difficulty, expected):
    assert tuple(get_preset(difficulty)) == expected


def test_difficulty_names():
    assert DIFFICULTIES == ("easy", "medium", "hard")
    assert DEFAULT_DIFFICULTY == "easy"


def test_unknown_difficulty():
    with pytest.raises(ValueError, match="difficulty must be one of"):
        get_preset("expert")


@pytest.mark.parametrize("preset", [
    DifficultyPreset(0, 8, 1),
    DifficultyPreset(8, -1, 1),
    DifficultyPreset(8, 8, -1),
    DifficultyPreset(4, 4, 8),
    DifficultyPreset(3, 3, 1),
])
def test_invalid_presets(preset):
    with pytest.raises(ValueError):
        validate_preset(preset)


@pytest.mark.parametrize("preset", [
    DifficultyPreset(4, 4, 7),
    DifficultyPreset(3, 3, 0),
])
def test_tight_presets_accepted(preset):
    validate_preset(preset)
