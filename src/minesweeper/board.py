"""
Minesweeper Board Engine
Owns the cell grid, mine placement, reveal propagation and win/loss detection
"""

from collections import deque
from enum import Enum
import logging
import random
from typing import Iterator, List, Optional, Tuple

import numpy as np


logger = logging.getLogger(__name__)


class GameState(Enum):
    """Lifecycle of a single board"""
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


class CellState(Enum):
    """Visible state of a cell"""
    HIDDEN = "hidden"
    REVEALED = "revealed"
    FLAGGED = "flagged"


# Codes used by Board.get_board_array()
HIDDEN_CODE = -3
FLAG_CODE = -2
MINE_CODE = -1


class Cell:
    """Represents a single cell on the minesweeper board"""

    def __init__(self, row: int, col: int):
        self.row = row
        self.col = col
        self.is_mine = False
        self.state = CellState.HIDDEN
        self.adjacent_mines = 0
        self.wrong_flag = False

    def __repr__(self):
        return (f"Cell({self.row}, {self.col}, mine={self.is_mine}, "
                f"state={self.state.value}, adjacent={self.adjacent_mines})")

    def place_mine(self):
        """Place a mine in this cell"""
        self.is_mine = True

    def reveal(self) -> bool:
        """Reveal this cell. Flagged and revealed cells are left alone."""
        if self.state == CellState.HIDDEN:
            self.state = CellState.REVEALED
            return True
        return False

    def toggle_flag(self) -> bool:
        """Toggle flag state on this cell"""
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        elif self.state == CellState.FLAGGED:
            self.state = CellState.HIDDEN
        else:
            return False
        return True

    def flag(self) -> bool:
        """Flag a hidden cell, leaving flagged and revealed cells unchanged"""
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
            return True
        return False

    def mark_wrong_flag(self):
        """Mark a flag that sits on a safe cell"""
        if self.state == CellState.FLAGGED and not self.is_mine:
            self.wrong_flag = True

    def is_revealed(self) -> bool:
        """Check if cell is revealed"""
        return self.state == CellState.REVEALED

    def is_flagged(self) -> bool:
        """Check if cell is flagged"""
        return self.state == CellState.FLAGGED


class GameListener:
    """
    Receives board notifications.

    Subclasses override the hooks they care about; the defaults do nothing.
    """

    def on_game_start(self):
        """Called once, on the first accepted reveal"""

    def on_game_over(self, won: bool):
        """Called once, when the board reaches WON or LOST"""

    def on_mine_count_changed(self, remaining: int):
        """Called with the new remaining-mine counter"""


class Board:
    """Manages the minesweeper board and game logic"""

    def __init__(self, rows: int, cols: int, total_mines: int,
                 rng: Optional[random.Random] = None):
        if rows < 1 or cols < 1:
            raise ValueError(f"Board dimensions must be positive, got {rows}x{cols}")
        if total_mines < 0:
            raise ValueError(f"Number of mines cannot be negative, got {total_mines}")

        self.rows = rows
        self.cols = cols
        self.total_mines = total_mines
        self.remaining_mines = total_mines
        self.game_state = GameState.NOT_STARTED
        self.mines_placed = False
        self.detonated_pos: Optional[Tuple[int, int]] = None

        self._rng = rng or random.Random()
        self._listeners: List[GameListener] = []
        self.board: List[List[Cell]] = [
            [Cell(row, col) for col in range(cols)] for row in range(rows)
        ]

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def add_listener(self, listener: GameListener):
        """Register a listener for board notifications"""
        self._listeners.append(listener)

    def remove_listener(self, listener: GameListener):
        """Unregister a listener; unknown listeners are ignored"""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, hook: str, *args):
        for listener in list(self._listeners):
            getattr(listener, hook)(*args)

    # ------------------------------------------------------------------
    # Grid helpers
    # ------------------------------------------------------------------

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if position is within board bounds"""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def _check_bounds(self, row: int, col: int):
        if not self.in_bounds(row, col):
            raise IndexError(
                f"Cell ({row}, {col}) is outside the {self.rows}x{self.cols} board")

    def neighbors(self, row: int, col: int) -> Iterator[Tuple[int, int]]:
        """Yield the in-bounds positions around (row, col)"""
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                if dr == 0 and dc == 0:
                    continue
                nr, nc = row + dr, col + dc
                if self.in_bounds(nr, nc):
                    yield nr, nc

    def get_cell(self, row: int, col: int) -> Cell:
        """Get cell at specified position"""
        self._check_bounds(row, col)
        return self.board[row][col]

    def cells(self) -> Iterator[Cell]:
        """Iterate over all cells in row-major order"""
        for board_row in self.board:
            yield from board_row

    @property
    def cells_revealed(self) -> int:
        return sum(1 for cell in self.cells() if cell.is_revealed())

    @property
    def flags_used(self) -> int:
        return sum(1 for cell in self.cells() if cell.is_flagged())

    def is_game_over(self) -> bool:
        return self.game_state in (GameState.WON, GameState.LOST)

    # ------------------------------------------------------------------
    # Mine placement
    # ------------------------------------------------------------------

    def _in_safe_zone(self, row: int, col: int, origin_row: int, origin_col: int) -> bool:
        return abs(row - origin_row) <= 1 and abs(col - origin_col) <= 1

    def start(self, origin_row: int, origin_col: int) -> bool:
        """
        Place mines away from the first click and begin the game.

        Args:
            origin_row: Row of the first revealed cell
            origin_col: Column of the first revealed cell

        Returns:
            True if the board was started, False if it had already started
        """
        self._check_bounds(origin_row, origin_col)
        if self.game_state != GameState.NOT_STARTED:
            return False

        available = sum(
            1 for cell in self.cells()
            if not self._in_safe_zone(cell.row, cell.col, origin_row, origin_col)
        )
        if self.total_mines > available:
            raise ValueError(
                f"Cannot place {self.total_mines} mines outside the safe zone "
                f"around ({origin_row}, {origin_col}); only {available} cells available")

        self.game_state = GameState.IN_PROGRESS
        self._place_mines(origin_row, origin_col)
        self._notify("on_game_start")
        return True

    def _place_mines(self, origin_row: int, origin_col: int):
        """Rejection-sample mine positions outside the 3x3 zone around the origin"""
        positions = []
        taken = set()
        rejected = 0
        while len(positions) < self.total_mines:
            row = self._rng.randrange(self.rows)
            col = self._rng.randrange(self.cols)
            if (row, col) in taken or self._in_safe_zone(row, col, origin_row, origin_col):
                rejected += 1
                continue
            taken.add((row, col))
            positions.append((row, col))

        logger.debug("Placed %d mines around origin (%d, %d) after %d rejected draws",
                     self.total_mines, origin_row, origin_col, rejected)
        self._lay_mines(positions)

    def _lay_mines(self, positions):
        for row, col in positions:
            self.board[row][col].place_mine()
        self._calculate_adjacent_mines()
        self.mines_placed = True

    def _calculate_adjacent_mines(self):
        """Calculate the number of adjacent mines for each cell"""
        for cell in self.cells():
            if not cell.is_mine:
                cell.adjacent_mines = sum(
                    1 for nr, nc in self.neighbors(cell.row, cell.col)
                    if self.board[nr][nc].is_mine
                )

    # ------------------------------------------------------------------
    # Player intents
    # ------------------------------------------------------------------

    def reveal(self, row: int, col: int) -> bool:
        """
        Reveal a cell and handle game logic.

        The first accepted reveal places the mines. Revealing a mine loses the
        game; revealing a zero cell opens its whole empty region.

        Returns:
            True if the intent was accepted, False if it was ignored
        """
        self._check_bounds(row, col)
        if self.is_game_over():
            return False

        cell = self.board[row][col]
        if cell.state != CellState.HIDDEN:
            return False

        if self.game_state == GameState.NOT_STARTED:
            self.start(row, col)

        if cell.is_mine:
            cell.reveal()
            self.detonated_pos = (row, col)
            self._lose()
            return True

        opened = self._flood_reveal(row, col)
        logger.debug("Reveal at (%d, %d) opened %d cells", row, col, opened)

        if self._check_win_condition():
            self._win()
        return True

    def _flood_reveal(self, row: int, col: int) -> int:
        """Reveal (row, col) and spread through zero cells with a work-list"""
        opened = 0
        pending = deque([(row, col)])
        while pending:
            r, c = pending.pop()
            cell = self.board[r][c]
            if not cell.reveal():
                continue
            opened += 1
            if cell.adjacent_mines == 0:
                for nr, nc in self.neighbors(r, c):
                    if self.board[nr][nc].state == CellState.HIDDEN:
                        pending.append((nr, nc))
        return opened

    def toggle_flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a cell.

        The remaining-mine counter is not clamped and goes negative when more
        flags than mines are placed.
        """
        self._check_bounds(row, col)
        if self.is_game_over():
            return False

        cell = self.board[row][col]
        if not cell.toggle_flag():
            return False

        self.remaining_mines += -1 if cell.is_flagged() else 1
        self._notify("on_mine_count_changed", self.remaining_mines)
        return True

    # ------------------------------------------------------------------
    # End of game
    # ------------------------------------------------------------------

    def _check_win_condition(self) -> bool:
        """Check that no safe cell is left unrevealed"""
        unrevealed = sum(
            1 for cell in self.cells()
            if not cell.is_mine and not cell.is_revealed()
        )
        return unrevealed == 0

    def _lose(self):
        self.game_state = GameState.LOST
        for cell in self.cells():
            if cell.is_flagged():
                cell.mark_wrong_flag()
            else:
                cell.reveal()
        logger.info("Game lost: mine at %s", self.detonated_pos)
        self._notify("on_game_over", False)

    def _win(self):
        self.game_state = GameState.WON
        for cell in self.cells():
            if cell.is_mine:
                cell.flag()
        if self.remaining_mines != 0:
            self.remaining_mines = 0
            self._notify("on_mine_count_changed", self.remaining_mines)
        logger.info("Game won on %dx%d board with %d mines",
                    self.rows, self.cols, self.total_mines)
        self._notify("on_game_over", True)

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def get_board_array(self) -> np.ndarray:
        """
        Get the player-visible board as a numpy array

        Returns:
            2D int8 array: -3=hidden, -2=flag, -1=revealed mine, 0-8=numbers
        """
        view = np.full((self.rows, self.cols), HIDDEN_CODE, dtype=np.int8)
        for cell in self.cells():
            if cell.is_flagged():
                view[cell.row, cell.col] = FLAG_CODE
            elif cell.is_revealed():
                view[cell.row, cell.col] = MINE_CODE if cell.is_mine else cell.adjacent_mines
        return view
