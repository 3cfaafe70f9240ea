"""
Shared fixtures for the minesweeper test suite
"""

import random
from unittest.mock import Mock

import pytest

from minesweeper import Board, GameState


def make_board(rows, cols, mines_at):
    """Build a started board with mines at fixed positions"""
    board = Board(rows, cols, len(mines_at))
    board._lay_mines(mines_at)
    board.game_state = GameState.IN_PROGRESS
    return board


class FakeMaster:
    """Stands in for a tkinter widget: records ``after`` calls instead of scheduling them"""

    def __init__(self):
        self.pending = {}
        self.cancelled = []
        self._next_id = 0

    def after(self, delay_ms, callback):
        self._next_id += 1
        after_id = f"after#{self._next_id}"
        self.pending[after_id] = (delay_ms, callback)
        return after_id

    def after_cancel(self, after_id):
        self.cancelled.append(after_id)
        self.pending.pop(after_id, None)

    def fire(self):
        """Run every pending callback once, as the event loop would"""
        due = list(self.pending.items())
        self.pending.clear()
        for _, (_, callback) in due:
            callback()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def listener():
    return Mock()


@pytest.fixture
def master():
    return FakeMaster()
