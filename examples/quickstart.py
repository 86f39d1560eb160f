"""
Quickstart example for the Minefield engine.

This script demonstrates basic usage of the engine, the session layer and the
analysis helpers.
"""

import logging
import random

from minefield import (
    DIFFICULTIES,
    GameSession,
    Minefield,
    mine_frequency_map,
    run_opening_many_tests,
)


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 60)
    print("Minefield - Quickstart Example")
    print("=" * 60)

    # Example 1: Open a board
    print("\n1. Opening an easy board (10x8, 10 mines) at (0, 0)...")
    print("-" * 60)

    field = Minefield("easy", rng=random.Random(7))
    snap = field.reveal(0, 0)
    print(field.format_board())
    print(f"Status: {snap.status}, tiles revealed: {field.revealed_count}")

    # Example 2: Gestures through a session
    print("\n2. Long-press to flag, tap to reveal...")
    print("-" * 60)

    session = GameSession("easy", rng=random.Random(7))
    session.press(0, 0)
    hidden = [
        (x, y)
        for x in range(session.field.width)
        for y in range(session.field.height)
        if not session.field.grid[x][y].is_revealed
    ]
    x, y = hidden[0]
    snap = session.press(x, y, held_ms=450)
    print(f"Flagged ({x}, {y}); mines left: {snap.mines_remaining}")
    print(session.field.format_board())

    # Example 3: Where do mines end up?
    print("\n3. Mine frequency after opening at (0, 0), 500 boards...")
    print("-" * 60)

    freq = mine_frequency_map("easy", (0, 0), 500, seed=1)
    for row in freq.T:
        print(" ".join(f"{v:.2f}" for v in row))

    # Example 4: Compare openings across difficulty levels
    print("\n4. Opening statistics by difficulty (200 boards each)...")
    print("-" * 60)

    for difficulty in DIFFICULTIES:
        stats = run_opening_many_tests(difficulty, 200, seed=1)
        print(
            f"{difficulty:8s} avg revealed {stats['avg_revealed_count']:6.1f}  "
            f"zero openings {stats['zero_opening_rate']*100:5.1f}%"
        )

    print("\n" + "=" * 60)
    print("Done! Run `streamlit run app/demo.py` to play in the browser.")
    print("=" * 60)


if __name__ == "__main__":
    main()
