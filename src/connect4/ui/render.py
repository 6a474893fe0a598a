from __future__ import annotations
from typing import Iterable, List, Optional, Set

from connect4 import config
from connect4.config import PIECES
from connect4.core.board import Board
from connect4.core.rules import Coord
from connect4.types import Cell
from connect4.ui.colors import c, color_enabled, BOLD, DIM, FG_CYAN, FG_GRAY, FG_RED, FG_YELLOW, REVERSE, RESET


def _piece(cell: Cell, width: int) -> str:
    s = PIECES[cell].rjust(width)
    if cell is None:
        return c(s, FG_GRAY)
    if cell == "X":
        return c(s, FG_RED)
    return c(s, FG_YELLOW)


def board_lines(board: Board, highlight: Optional[Iterable[Coord]] = None) -> List[str]:
    """
    Highest row first, columns left to right, column indices underneath.
    """
    hl: Set[Coord] = set(highlight) if highlight else set()
    width = len(str(board.cols - 1))

    lines = []
    for r in range(board.rows - 1, -1, -1):
        parts = []
        for col in range(board.cols):
            p = _piece(board.grid[col][r], width)
            if (col, r) in hl and color_enabled():
                p = f"{REVERSE}{p}{RESET}"
            parts.append(p)
        lines.append(" ".join(parts))

    lines.append(c(" ".join(str(i).rjust(width) for i in range(board.cols)), DIM))
    return lines


def clear_screen() -> None:
    if config.CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def render(board: Board, status: str = "", highlight: Optional[Iterable[Coord]] = None) -> None:
    clear_screen()

    print(c("CONNECT 4", BOLD))
    if status:
        print(c(status, FG_CYAN))
    else:
        print()

    for line in board_lines(board, highlight):
        print(line)
    print()
