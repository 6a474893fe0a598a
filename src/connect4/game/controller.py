from __future__ import annotations
import logging
from typing import Optional

from connect4.config import PLAYER_NAMES
from connect4.core.errors import MoveError
from connect4.game.engine import play
from connect4.game.results import outcome_message, winning_line
from connect4.game.state import GameState
from connect4.ui.prompts import parse_move
from connect4.ui.render import render

logger = logging.getLogger(__name__)


def _turn_prompt(state: GameState) -> str:
    return (
        f"Player {PLAYER_NAMES[state.current]}'s turn. "
        f"Which column would you like to play in? 0-{state.board.cols - 1} (q to quit): "
    )


def run_game(state: GameState) -> Optional[GameState]:
    """
    Read-play-render loop for one game.

    Returns the terminal state, or None if the players quit early.
    """
    status = ""

    while True:
        if state.is_over:
            render(state.board, outcome_message(state), highlight=winning_line(state))
            return state

        render(state.board, status)
        status = ""

        raw = input(_turn_prompt(state))
        try:
            move = parse_move(raw)
        except ValueError as e:
            status = str(e)
            continue

        if move is None:
            logger.info("Game quit after %d moves", state.moves)
            render(state.board, "Game quit.")
            return None

        try:
            state = play(state, move)
        except MoveError as e:
            status = e.message
            state = e.previous_state
