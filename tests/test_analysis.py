"""
Tests for the mine-placement and opening statistics in minefield.analysis.
"""

import numpy as np
import pytest

from minefield import (
    DIFFICULTIES,
    mine_frequency_map,
    plot_mine_frequency,
    run_opening_difficulty_analysis,
    run_opening_many_tests,
    run_opening_single_test,
)
from minefield import analysis


@pytest.fixture
def no_show(monkeypatch):
    shown = []
    monkeypatch.setattr(analysis.plt, "show", lambda *a, **k: shown.append(True))
    yield shown
    analysis.plt.close("all")


def test_frequency_map_shape_and_total():
    freq = mine_frequency_map("easy", (4, 4), 200, seed=3)

    assert freq.shape == (10, 8)
    assert np.isclose(freq.sum(), 10.0)
    assert freq.min() >= 0.0
    assert freq.max() <= 1.0


def test_frequency_map_keeps_safe_block_clear():
    freq = mine_frequency_map("medium", (0, 0), 100, seed=5)
    assert np.all(freq[0:2, 0:2] == 0.0)
    assert freq[2:, :].sum() > 0.0


def test_frequency_map_is_roughly_uniform():
    # 80 - 9 eligible cells for 10 mines on easy
    freq = mine_frequency_map("easy", (4, 4), 2000, seed=11)
    expected = 10 / 71
    outside = np.ones_like(freq, dtype=bool)
    outside[3:6, 3:6] = False
    assert np.allclose(freq[outside], expected, atol=0.05)


@pytest.mark.parametrize("runs", [0, -3])
def test_runs_must_be_positive(runs):
    with pytest.raises(ValueError):
        mine_frequency_map("easy", (0, 0), runs)
    with pytest.raises(ValueError):
        run_opening_many_tests("easy", runs)


def test_frequency_map_rejects_off_board_click():
    with pytest.raises(ValueError):
        mine_frequency_map("easy", (10, 0), 5)


def test_single_opening():
    result = run_opening_single_test("easy", (0, 0))
    assert result["first_click"] == (0, 0)
    assert result["revealed_count"] >= 1
    assert result["opening_value"] is not None


def test_many_openings_statistics():
    stats = run_opening_many_tests("easy", 50, seed=2)

    assert 1.0 <= stats["min_revealed_count"] <= stats["avg_revealed_count"]
    assert stats["avg_revealed_count"] <= stats["max_revealed_count"] <= 70.0
    assert 0.0 <= stats["zero_opening_rate"] <= 1.0
    assert 0.0 < stats["revealed_fraction"] <= 1.0
    assert 0.0 <= stats["first_click_win_rate"] <= 1.0


def test_corner_opening_always_floods():
    # The clicked corner's whole neighborhood is mine-free, so it is a zero.
    stats = run_opening_many_tests("hard", 20, first_click=(0, 0), seed=4)
    assert stats["zero_opening_rate"] == 1.0
    assert stats["min_revealed_count"] >= 4.0


def test_plot_mine_frequency(no_show):
    plot_mine_frequency(np.zeros((10, 8)), title="blank")
    assert no_show == [True]


def test_difficulty_analysis(no_show):
    results = run_opening_difficulty_analysis(10, seed=0)
    assert list(results) == list(DIFFICULTIES)
    assert no_show == [True]
