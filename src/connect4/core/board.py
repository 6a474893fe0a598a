
# src/connect4/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

from connect4.config import DEFAULT_ROWS, DEFAULT_COLS
from connect4.core.errors import ColumnFullError, OutOfBoundsError
from connect4.types import Cell, Player, Move


@dataclass(slots=True)
class Board:
    """
    Column-major grid: grid[col][row], row 0 is the bottom of the board.
    """

    cols: int = DEFAULT_COLS
    rows: int = DEFAULT_ROWS
    grid: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.cols < 1 or self.rows < 1:
            raise ValueError(f"Board must be at least 1x1, got {self.cols}x{self.rows}.")
        if not self.grid:
            self.grid = [[None for _ in range(self.rows)] for _ in range(self.cols)]
        elif len(self.grid) != self.cols or any(len(col) != self.rows for col in self.grid):
            raise ValueError(f"Grid does not match a {self.cols}x{self.rows} board.")

    def copy(self) -> "Board":
        b = Board(self.cols, self.rows)
        b.grid = [col[:] for col in self.grid]
        return b

    def cell(self, col: int, row: int) -> Cell:
        return self.grid[col][row]

    def cells(self) -> Iterator[Tuple[int, int, Cell]]:
        # column-major, row ascending
        for c in range(self.cols):
            for r in range(self.rows):
                yield c, r, self.grid[c][r]

    def in_bounds(self, col: int) -> bool:
        return 0 <= col < self.cols

    def column_is_full(self, col: int) -> bool:
        return self.grid[col][self.rows - 1] is not None

    def valid_moves(self) -> List[Move]:
        return [Move(c) for c in range(self.cols) if not self.column_is_full(c)]

    def is_full(self) -> bool:
        return all(self.column_is_full(c) for c in range(self.cols))

    def drop(self, col: Move, player: Player) -> int:
        c = int(col)
        if not self.in_bounds(c):
            raise OutOfBoundsError("Game board does not have that many columns.")

        for r in range(self.rows):
            if self.grid[c][r] is None:
                self.grid[c][r] = player
                return r

        raise ColumnFullError("Column is full.")
