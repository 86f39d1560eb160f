"""Play in the terminal: python -m minefield [easy|medium|hard]"""

import sys

from .config import DEFAULT_DIFFICULTY
from .session import GameSession, play_cli


def main() -> None:
    difficulty = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_DIFFICULTY
    try:
        session = GameSession(difficulty.lower())
    except ValueError as exc:
        print(f"Invalid input. {exc}")
        sys.exit(2)
    play_cli(session)


if __name__ == "__main__":
    main()
