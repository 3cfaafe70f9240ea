"""
Minesweeper package initialization
"""

from .board import Board, Cell, CellState, GameListener, GameState
from .config import BoardConfig, DIFFICULTIES, get_difficulty
from .session import GameSession, SessionListener
from .timer import GameTimer

__all__ = [
    'Board', 'Cell', 'CellState', 'GameListener', 'GameState',
    'BoardConfig', 'DIFFICULTIES', 'get_difficulty',
    'GameSession', 'SessionListener', 'GameTimer',
]
