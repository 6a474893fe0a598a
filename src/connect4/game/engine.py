from __future__ import annotations
import dataclasses
import logging
from typing import Iterable

from connect4.config import DEFAULT_COLS, DEFAULT_ROWS
from connect4.core.board import Board
from connect4.core.errors import ColumnFullError, GameOverError, OutOfBoundsError
from connect4.core.rules import DEFAULT_WIN_CONDITIONS, WinCondition, has_four_connected
from connect4.game.state import GameState
from connect4.types import Player, Move

logger = logging.getLogger(__name__)


def other(player: Player) -> Player:
    if player == "X":
        return "O"
    if player == "O":
        return "X"
    raise RuntimeError(f"Invalid game state: unknown player {player!r}")


def initialise(
    columns: int = DEFAULT_COLS,
    rows: int = DEFAULT_ROWS,
    win_conditions: Iterable[WinCondition] = DEFAULT_WIN_CONDITIONS,
) -> GameState:
    state = GameState(board=Board(columns, rows), win_conditions=tuple(win_conditions))
    logger.debug(
        "New %dx%d game, win conditions: %s",
        columns, rows, ", ".join(str(wc) for wc in state.win_conditions) or "none",
    )
    return state


def play(state: GameState, column: Move) -> GameState:
    """
    Drop the current player's piece into `column` (zero-indexed) and return
    the resulting state. `state` is never modified.

    Rejected moves raise a MoveError subclass whose `previous_state` is the
    `state` passed in, so the caller can simply retry from it.
    """
    if isinstance(column, bool) or not isinstance(column, int):
        raise TypeError(f"Column must be an int, got {type(column).__name__}")
    col = column

    if state.is_over:
        logger.debug("Rejected move on column %d: game is %s", col, state.status)
        raise GameOverError("The game is already over.", state)

    board = state.board
    if not board.in_bounds(col):
        logger.debug("Rejected move on column %d: out of bounds", col)
        raise OutOfBoundsError("Game board does not have that many columns.", state)
    if board.column_is_full(col):
        logger.debug("Rejected move on column %d: column full", col)
        raise ColumnFullError("Column is full.", state)

    board = board.copy()
    row = board.drop(Move(col), state.current)
    moves = state.moves + 1
    logger.debug("Player %s dropped into (%d, %d)", state.current, col, row)

    # column-major, row ascending; first hit wins
    for c, r, cell in board.cells():
        if cell is not None and has_four_connected(board, c, r, state.win_conditions):
            logger.info("Player %s wins after %d moves", state.current, moves)
            return dataclasses.replace(
                state, board=board, status="completed", winner=state.current, moves=moves
            )

    if board.is_full():
        logger.info("Draw after %d moves", moves)
        return dataclasses.replace(state, board=board, status="draw", moves=moves)

    return dataclasses.replace(state, board=board, current=other(state.current), moves=moves)
