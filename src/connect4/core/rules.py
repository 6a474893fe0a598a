from __future__ import annotations
from typing import Iterable, List, NamedTuple, Optional, Sequence, Tuple

from connect4.config import CONNECT_N
from connect4.core.board import Board
from connect4.types import Player

Coord = Tuple[int, int]  # (col, row)


class WinCondition(NamedTuple):
    name: str
    dcol: int
    drow: int

    def __str__(self) -> str:
        return self.name


HORIZONTAL = WinCondition("Horizontal", 1, 0)
VERTICAL = WinCondition("Vertical", 0, 1)
DIAGONAL = WinCondition("Forward Diagonal", 1, 1)
ANTI_DIAGONAL = WinCondition("Reverse Diagonal", -1, 1)

DEFAULT_WIN_CONDITIONS: Tuple[WinCondition, ...] = (HORIZONTAL, VERTICAL, DIAGONAL, ANTI_DIAGONAL)


def win_conditions_by_name(names: Iterable[str]) -> Tuple[WinCondition, ...]:
    """
    Resolve a subset of the direction table, case-insensitively.
    The result keeps table order whatever order the names came in.
    """
    wanted = {n.strip().lower() for n in names}
    known = {wc.name.lower() for wc in DEFAULT_WIN_CONDITIONS}
    unknown = wanted - known
    if unknown:
        raise ValueError(f"Unknown win condition(s): {', '.join(sorted(unknown))}")
    return tuple(wc for wc in DEFAULT_WIN_CONDITIONS if wc.name.lower() in wanted)


def _line(col: int, row: int, wc: WinCondition) -> List[Coord]:
    return [(col + i * wc.dcol, row + i * wc.drow) for i in range(CONNECT_N)]


def _is_met(board: Board, col: int, row: int, wc: WinCondition) -> bool:
    end_col = col + (CONNECT_N - 1) * wc.dcol
    end_row = row + (CONNECT_N - 1) * wc.drow
    if not (0 <= end_col < board.cols and 0 <= end_row < board.rows):
        return False

    p = board.grid[col][row]
    if p is None:
        return False
    return all(board.grid[c][r] == p for c, r in _line(col, row, wc)[1:])


def has_four_connected(
    board: Board,
    col: int,
    row: int,
    conditions: Sequence[WinCondition] = DEFAULT_WIN_CONDITIONS,
) -> bool:
    # Forward-only: the board-wide scan visits every start cell.
    return any(_is_met(board, col, row, wc) for wc in conditions)


def find_four(
    board: Board,
    conditions: Sequence[WinCondition] = DEFAULT_WIN_CONDITIONS,
) -> Optional[Tuple[Player, List[Coord]]]:
    for c, r, p in board.cells():
        if p is None:
            continue
        for wc in conditions:
            if _is_met(board, c, r, wc):
                return p, _line(c, r, wc)
    return None


def check_winner(
    board: Board,
    conditions: Sequence[WinCondition] = DEFAULT_WIN_CONDITIONS,
) -> Optional[Player]:
    res = find_four(board, conditions)
    return res[0] if res else None


def is_draw(board: Board, conditions: Sequence[WinCondition] = DEFAULT_WIN_CONDITIONS) -> bool:
    return board.is_full() and check_winner(board, conditions) is None
