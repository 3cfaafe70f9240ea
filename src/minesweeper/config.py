"""
Minesweeper Configuration
Board bounds, timer settings and preset difficulty levels
"""

from dataclasses import dataclass
from typing import Dict


MIN_BOARD_SIZE = 5
MAX_BOARD_SIZE = 50
MIN_MINES = 1
MAX_MINES_PERCENT = 90

# The first click keeps its 3x3 neighbourhood free of mines
SAFE_ZONE_CELLS = 9

TIMER_DELAY_MS = 1000


@dataclass(frozen=True)
class BoardConfig:
    """
    Dimensions and mine count of a board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        mines: Total mines to place.
    """

    rows: int
    cols: int
    mines: int

    def __post_init__(self):
        for name, size in (("rows", self.rows), ("cols", self.cols)):
            if not MIN_BOARD_SIZE <= size <= MAX_BOARD_SIZE:
                raise ValueError(
                    f"Board {name} must be between {MIN_BOARD_SIZE} and "
                    f"{MAX_BOARD_SIZE}, got {size}")
        if self.mines < MIN_MINES:
            raise ValueError(f"Board needs at least {MIN_MINES} mine, got {self.mines}")
        if self.mines > self.max_mines:
            raise ValueError(
                f"Too many mines for a {self.rows}x{self.cols} board "
                f"(max {self.max_mines}, got {self.mines})")

    @property
    def max_mines(self) -> int:
        cells = self.rows * self.cols
        return min(cells * MAX_MINES_PERCENT // 100, cells - SAFE_ZONE_CELLS)

    def as_tuple(self):
        return self.rows, self.cols, self.mines


DIFFICULTIES: Dict[str, BoardConfig] = {
    'beginner': BoardConfig(10, 10, 10),
    'intermediate': BoardConfig(15, 15, 20),
}


def get_difficulty(name: str) -> BoardConfig:
    """Look up a preset difficulty by name"""
    key = name.strip().lower()
    if key not in DIFFICULTIES:
        raise ValueError(
            f"Invalid difficulty: {name}. Must be one of: {', '.join(DIFFICULTIES)}")
    return DIFFICULTIES[key]
