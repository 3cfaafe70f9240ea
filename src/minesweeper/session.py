"""
Minesweeper Game Session
Connects the board engine, the game timer and the presentation layer
"""

import logging
import random
from typing import TYPE_CHECKING, List, Optional

from .board import Board, GameListener
from .config import BoardConfig, DIFFICULTIES, get_difficulty
from .timer import GameTimer

if TYPE_CHECKING:
    import tkinter as tk


logger = logging.getLogger(__name__)


class SessionListener(GameListener):
    """Board notifications plus the session's own events"""

    def on_new_game(self, board: Board):
        """Called after a fresh board replaces the previous one"""

    def on_tick(self, elapsed: int):
        """Called every timer tick with the elapsed seconds"""


class GameSession(GameListener):
    """
    Owns the current board and the timer for one game window.

    The timer starts on the board's first accepted reveal and stops on any
    terminal transition or when a new game replaces the board.
    """

    def __init__(self, master: 'tk.Misc', difficulty: str = 'beginner',
                 rng: Optional[random.Random] = None):
        self.timer = GameTimer(master, on_tick=self._on_timer_tick)
        self.board: Optional[Board] = None
        self.config: Optional[BoardConfig] = None
        self._rng = rng
        self._listeners: List[SessionListener] = []
        self.new_game_for(difficulty)

    def add_listener(self, listener: SessionListener):
        self._listeners.append(listener)

    def remove_listener(self, listener: SessionListener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, hook: str, *args):
        for listener in list(self._listeners):
            getattr(listener, hook)(*args)

    @property
    def elapsed(self) -> int:
        return self.timer.elapsed

    # ------------------------------------------------------------------
    # Game creation
    # ------------------------------------------------------------------

    def new_game(self, rows: int, cols: int, total_mines: int) -> Board:
        """
        Discard the current board and start a fresh one

        Args:
            rows: Number of rows
            cols: Number of columns
            total_mines: Mines to place on the first reveal

        Returns:
            The new board
        """
        config = BoardConfig(rows, cols, total_mines)

        self.timer.reset()
        if self.board is not None:
            self.board.remove_listener(self)

        self.config = config
        self.board = Board(rows, cols, total_mines, rng=self._rng)
        self.board.add_listener(self)
        logger.info("New game: %dx%d board with %d mines", rows, cols, total_mines)

        self._notify("on_new_game", self.board)
        return self.board

    def new_game_for(self, difficulty: str) -> Board:
        """Start a new game with a preset difficulty"""
        return self.new_game(*get_difficulty(difficulty).as_tuple())

    def restart(self) -> Board:
        """Start a new game with the current configuration"""
        return self.new_game(*self.config.as_tuple())

    def current_difficulty(self) -> Optional[str]:
        """Name of the preset matching the current board, if any"""
        for name, config in DIFFICULTIES.items():
            if config == self.config:
                return name
        return None

    # ------------------------------------------------------------------
    # Player intents
    # ------------------------------------------------------------------

    def reveal(self, row: int, col: int) -> bool:
        return self.board.reveal(row, col)

    def toggle_flag(self, row: int, col: int) -> bool:
        return self.board.toggle_flag(row, col)

    # ------------------------------------------------------------------
    # Board and timer notifications
    # ------------------------------------------------------------------

    def on_game_start(self):
        self.timer.start()
        self._notify("on_game_start")

    def on_game_over(self, won: bool):
        self.timer.stop()
        self._notify("on_game_over", won)

    def on_mine_count_changed(self, remaining: int):
        self._notify("on_mine_count_changed", remaining)

    def _on_timer_tick(self, elapsed: int):
        self._notify("on_tick", elapsed)
