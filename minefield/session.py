"""The single live game of a play session and the terminal front end."""

import logging
import random
from typing import Optional

from .config import DEFAULT_DIFFICULTY, DIFFICULTIES
from .engine import GameSnapshot, Minefield
from .gestures import ACTION_FLAG, BUTTON_PRIMARY, action_for_press

logger = logging.getLogger(__name__)


class GameSession:
    """
    Owns the one Minefield of a play session and gates what reaches it.

    Front ends talk to the session rather than the engine: it validates
    coordinates, drops actions once the game is won or lost, and turns raw
    presses into reveal/flag actions.
    """

    def __init__(
        self,
        difficulty: str = DEFAULT_DIFFICULTY,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.field = Minefield(difficulty, rng=rng)

    @property
    def difficulty(self) -> str:
        return self.field.difficulty

    @property
    def is_over(self) -> bool:
        return self.field.is_over

    def snapshot(self) -> GameSnapshot:
        return self.field.snapshot()

    def reset(self, difficulty: Optional[str] = None) -> GameSnapshot:
        """Start a new game, keeping the current difficulty unless one is given."""
        return self.field.reset(difficulty)

    def select_difficulty(self, difficulty: str) -> GameSnapshot:
        """Switch presets; always a full reset, discarding the game in progress."""
        return self.reset(difficulty)

    def reveal(self, x: int, y: int) -> GameSnapshot:
        self.field.check_coordinates(x, y)
        if self.field.is_over:
            logger.debug("Ignoring reveal at (%d, %d): game is %s.", x, y, self.field.status)
            return self.snapshot()
        return self.field.reveal(x, y)

    def toggle_flag(self, x: int, y: int) -> GameSnapshot:
        self.field.check_coordinates(x, y)
        if self.field.is_over:
            logger.debug("Ignoring flag at (%d, %d): game is %s.", x, y, self.field.status)
            return self.snapshot()
        return self.field.toggle_flag(x, y)

    def press(
        self,
        x: int,
        y: int,
        button: str = BUTTON_PRIMARY,
        held_ms: float = 0.0,
    ) -> GameSnapshot:
        """
        Dispatch a completed press on tile (x, y).

        Args:
            x: X-coordinate of the pressed tile.
            y: Y-coordinate of the pressed tile.
            button: "primary" or "secondary".
            held_ms: Press duration in milliseconds; long presses flag.

        Returns:
            A snapshot of the state after the action.
        """
        if action_for_press(button, held_ms) == ACTION_FLAG:
            return self.toggle_flag(x, y)
        return self.reveal(x, y)


def play_cli(session: GameSession) -> None:
    """
    Run a simple terminal UI for playing Minesweeper.

    Commands: "x y" reveals, "f x y" toggles a flag, "r [difficulty]" starts
    over, "q" quits.

    Args:
        session: The GameSession to play.
    """
    print(
        "Minefield CLI. Coordinates are 0-based.\n"
        "  x y      reveal a tile\n"
        "  f x y    toggle a flag\n"
        f"  r [{'|'.join(DIFFICULTIES)}]  new game\n"
        "  q        quit\n"
    )

    def show() -> None:
        snap = session.snapshot()
        print(session.field.format_board(reveal_all=False))
        print(f"\nDifficulty: {snap.difficulty}   Mines left: {snap.mines_remaining}")

    show()

    while True:
        s = input("\nMove: ").strip()
        if s.lower() in {"q", "quit", "exit"}:
            print("Quit.")
            return

        parts = s.replace(",", " ").split()
        if not parts:
            continue

        if parts[0].lower() == "r":
            try:
                session.reset(parts[1].lower() if len(parts) > 1 else None)
            except ValueError as exc:
                print(f"Invalid input. {exc}")
                continue
            print()
            show()
            continue

        flag = parts[0].lower() == "f"
        if flag:
            parts = parts[1:]

        if len(parts) != 2:
            print("Invalid input. Examples: 3 5   f 3 5   r hard")
            continue

        was_over = session.is_over
        try:
            x = int(parts[0])
            y = int(parts[1])
            if flag:
                snap = session.toggle_flag(x, y)
            else:
                snap = session.reveal(x, y)
        except ValueError as exc:
            print(f"Invalid input. {exc}")
            continue

        print()
        show()

        if was_over:
            print("\nThe game is over. Type 'r' for a new game or 'q' to quit.")
            continue
        if snap.has_failed:
            print("\nYou hit a mine. You lost.")
        elif snap.has_won:
            print("\nYou revealed all safe cells. You won!")
        else:
            continue

        print("\nFull board:")
        print(session.field.format_board(reveal_all=True))
        print("\nType 'r' for a new game or 'q' to quit.")
