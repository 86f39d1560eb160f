"""Minefield game engine with deferred mine placement and flood reveal."""

import logging
import random
from typing import List, NamedTuple, Optional, Tuple

from .config import DEFAULT_DIFFICULTY, get_preset
from .utils import get_neighborhoods, in_bounds, safe_block

logger = logging.getLogger(__name__)

STATUS_FRESH = "fresh"
STATUS_PLAYING = "playing"
STATUS_WON = "won"
STATUS_FAILED = "failed"


def _game_status(mines_set: bool, has_failed: bool, has_won: bool) -> str:
    if has_failed:
        return STATUS_FAILED
    if has_won:
        return STATUS_WON
    return STATUS_PLAYING if mines_set else STATUS_FRESH


class TileView(NamedTuple):
    """Read-only copy of a tile handed to renderers."""

    is_mine: bool
    is_flagged: bool
    is_revealed: bool
    value: Optional[int]


class GameSnapshot(NamedTuple):
    """Read-only copy of the whole game state, indexed grid[x][y]."""

    grid: Tuple[Tuple[TileView, ...], ...]
    width: int
    height: int
    mine_count: int
    flag_count: int
    difficulty: str
    mines_set: bool
    has_failed: bool
    has_won: bool

    @property
    def mines_remaining(self) -> int:
        # Not clamped: over-flagging shows a negative counter.
        return self.mine_count - self.flag_count

    @property
    def status(self) -> str:
        return _game_status(self.mines_set, self.has_failed, self.has_won)

    def tile(self, x: int, y: int) -> TileView:
        return self.grid[x][y]


class Tile:
    """A single grid cell; value stays None for mines and until mines are placed."""

    def __init__(self, is_mine: bool = False) -> None:
        self.is_mine: bool = is_mine
        self.is_flagged: bool = False
        self.is_revealed: bool = False
        self.value: Optional[int] = None

    def view(self) -> TileView:
        return TileView(self.is_mine, self.is_flagged, self.is_revealed, self.value)

    def __repr__(self) -> str:
        return (
            f"Tile(is_mine={self.is_mine}, is_flagged={self.is_flagged}, "
            f"is_revealed={self.is_revealed}, value={self.value})"
        )


class Minefield:
    """
    Grid state for one game of Minesweeper.

    Mines are placed lazily on the first reveal so the 3x3 block around the
    first click is always clear. Once has_failed or has_won is set the game is
    over; the engine does not re-check those flags, so callers must stop
    dispatching actions at that point (GameSession does this).
    """

    def __init__(
        self,
        difficulty: str = DEFAULT_DIFFICULTY,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Initialize a fresh game.

        Args:
            difficulty: One of the preset names in config.DIFFICULTIES.
            rng: Random source for mine placement; pass a seeded instance
                for reproducible boards.

        Raises:
            ValueError: If the difficulty is unknown.
        """
        self._rng: random.Random = rng if rng is not None else random.Random()
        self.difficulty: str = difficulty
        self.reset(difficulty)

    def reset(self, difficulty: Optional[str] = None) -> GameSnapshot:
        """
        Discard the current game and start a fresh one without mines.

        Args:
            difficulty: Preset to switch to; defaults to the current one.

        Returns:
            A snapshot of the new game.

        Raises:
            ValueError: If the difficulty is unknown.
        """
        difficulty = difficulty or self.difficulty
        preset = get_preset(difficulty)

        self.difficulty = difficulty
        self.width: int = preset.width
        self.height: int = preset.height
        self.mine_count: int = preset.mine_count
        self.flag_count: int = 0
        self.mines_set: bool = False
        self.has_failed: bool = False
        self.has_won: bool = False

        self.grid: List[List[Tile]] = [
            [Tile() for _ in range(self.height)] for _ in range(self.width)
        ]
        self._neighborhoods = get_neighborhoods(self.width, self.height)

        logger.debug(
            "New %s game: %dx%d with %d mines.",
            difficulty,
            self.width,
            self.height,
            self.mine_count,
        )
        return self.snapshot()

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def status(self) -> str:
        """One of "fresh", "playing", "won", "failed"."""
        return _game_status(self.mines_set, self.has_failed, self.has_won)

    @property
    def is_over(self) -> bool:
        return self.has_failed or self.has_won

    @property
    def mines_remaining(self) -> int:
        return self.mine_count - self.flag_count

    @property
    def revealed_count(self) -> int:
        return sum(tile.is_revealed for column in self.grid for tile in column)

    def tile(self, x: int, y: int) -> Tile:
        self.check_coordinates(x, y)
        return self.grid[x][y]

    def neighbors(self, x: int, y: int) -> Tuple[Tuple[int, int], ...]:
        """Return the in-bounds cells of the 8-neighborhood of (x, y)."""
        return self._neighborhoods[(x, y)]

    def snapshot(self) -> GameSnapshot:
        """Return an immutable copy of the current state for rendering."""
        return GameSnapshot(
            grid=tuple(tuple(tile.view() for tile in column) for column in self.grid),
            width=self.width,
            height=self.height,
            mine_count=self.mine_count,
            flag_count=self.flag_count,
            difficulty=self.difficulty,
            mines_set=self.mines_set,
            has_failed=self.has_failed,
            has_won=self.has_won,
        )

    def check_coordinates(self, x: int, y: int) -> None:
        if not in_bounds(self.width, self.height, x, y):
            raise ValueError(
                f"Cell coordinates ({x}, {y}) are outside the "
                f"{self.width}x{self.height} board."
            )

    # -------------------------------------------------------------------------
    # Mine placement
    # -------------------------------------------------------------------------

    def place_mines(self, first_x: int, first_y: int) -> None:
        """
        Place mine_count mines, keeping the 3x3 block around the first reveal clear.

        Cells are drawn uniformly without replacement from the cells that are
        neither mines already nor inside the safe block. Tile values are
        recomputed afterwards.

        Args:
            first_x: X-coordinate of the first revealed cell.
            first_y: Y-coordinate of the first revealed cell.

        Raises:
            ValueError: If the coordinates are outside the board, mines were
                already placed, or they do not fit.
        """
        self.check_coordinates(first_x, first_y)
        if self.mines_set:
            raise ValueError("Mines have already been placed.")

        safe = safe_block(self.width, self.height, first_x, first_y)
        eligible: List[Tuple[int, int]] = [
            (x, y)
            for x in range(self.width)
            for y in range(self.height)
            if (x, y) not in safe and not self.grid[x][y].is_mine
        ]
        if len(eligible) < self.mine_count:
            raise ValueError(
                f"Cannot place {self.mine_count} mines in {len(eligible)} eligible cells."
            )

        for mx, my in self._rng.sample(eligible, self.mine_count):
            self.grid[mx][my].is_mine = True

        self.compute_values()
        self.mines_set = True
        logger.debug(
            "Placed %d mines around first reveal at (%d, %d).",
            self.mine_count,
            first_x,
            first_y,
        )

    def compute_values(self) -> None:
        """Set every tile's value to its adjacent mine count (None for mines)."""
        for x in range(self.width):
            for y in range(self.height):
                tile = self.grid[x][y]
                if tile.is_mine:
                    tile.value = None
                    continue

                tile.value = sum(
                    1 for nx, ny in self.neighbors(x, y) if self.grid[nx][ny].is_mine
                )

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def reveal(self, x: int, y: int) -> GameSnapshot:
        """
        Reveal a tile, placing mines first if this is the opening move.

        A flagged tile is left alone. Hitting a mine ends the game; revealing
        a zero tile floods its region; revealing the last safe tile wins.

        Args:
            x: X-coordinate (column) of the tile.
            y: Y-coordinate (row) of the tile.

        Returns:
            A snapshot of the state after the action.

        Raises:
            ValueError: If the coordinates are outside the board.
        """
        self.check_coordinates(x, y)
        tile = self.grid[x][y]

        if tile.is_flagged:
            return self.snapshot()

        if not self.mines_set:
            self.place_mines(x, y)

        tile.is_revealed = True

        if tile.is_mine:
            self.has_failed = True
            logger.info("Mine hit at (%d, %d); game lost.", x, y)
            return self.snapshot()

        if tile.value == 0:
            self.flood_reveal(x, y)

        self.has_won = self.revealed_count == self.width * self.height - self.mine_count
        if self.has_won:
            logger.info("All safe tiles revealed; game won.")

        return self.snapshot()

    def flood_reveal(self, x: int, y: int) -> List[Tuple[int, int]]:
        """
        Reveal outward from a zero-valued tile, depth first.

        Every non-mine neighbor of a zero tile is revealed, flagged or not, and
        zero neighbors are expanded in turn. Already revealed tiles stop the
        walk, so no tile is visited twice.

        Args:
            x: X-coordinate of the zero-valued origin.
            y: Y-coordinate of the zero-valued origin.

        Returns:
            The newly revealed cells as (x, y), in reveal order.
        """
        revealed: List[Tuple[int, int]] = []
        stack: List[Tuple[int, int]] = [(x, y)]

        while stack:
            cx, cy = stack.pop()
            for nx, ny in self.neighbors(cx, cy):
                neighbor = self.grid[nx][ny]
                if neighbor.is_revealed or neighbor.is_mine:
                    continue

                neighbor.is_revealed = True
                revealed.append((nx, ny))

                if neighbor.value == 0:
                    stack.append((nx, ny))

        return revealed

    def toggle_flag(self, x: int, y: int) -> GameSnapshot:
        """
        Flag or unflag an unrevealed tile; revealed tiles are left alone.

        Raises:
            ValueError: If the coordinates are outside the board.
        """
        self.check_coordinates(x, y)
        tile = self.grid[x][y]

        if tile.is_revealed:
            return self.snapshot()

        tile.is_flagged = not tile.is_flagged
        self.flag_count += 1 if tile.is_flagged else -1
        return self.snapshot()

    # -------------------------------------------------------------------------
    # Display methods
    # -------------------------------------------------------------------------

    _ANSI_RESET = "\033[0m"
    _ANSI_COORD = "\033[96m"
    _ANSI_MINE = "\033[91m"

    def _c(self, s: str) -> str:
        """Wrap string in coordinate color."""
        return f"{self._ANSI_COORD}{s}{self._ANSI_RESET}"

    def _m(self, s: str) -> str:
        """Wrap string in mine color (red)."""
        return f"{self._ANSI_MINE}{s}{self._ANSI_RESET}"

    def format_board(self, reveal_all: bool = False) -> str:
        """
        Render the board as a multi-line string for terminal display.

        Unrevealed tiles show as '.', flags as 'F', mines as 'M'.

        Args:
            reveal_all: If True, show mines and all underlying values.

        Returns:
            A formatted multi-line string with coordinate labels and the board grid.
        """
        w, h = self.width, self.height

        def cell_str(x: int, y: int) -> str:
            tile = self.grid[x][y]
            if reveal_all or tile.is_revealed:
                if tile.is_mine:
                    return self._m("M")
                if tile.value is not None:
                    return str(tile.value)
            if tile.is_flagged and not tile.is_revealed:
                return "F"
            return "."

        header_cells = " ".join(f"{x:2d}" for x in range(w))
        out = [self._c("   ") + self._c(header_cells)]
        out.append(self._c("   " + "-" * (3 * w - 1)))

        for y in range(h):
            row_cells = " ".join(f" {cell_str(x, y)}" for x in range(w))
            out.append(self._c(f"{y:2d} ") + self._c("|") + row_cells)

        return "\n".join(out)
