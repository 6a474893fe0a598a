from __future__ import annotations
from typing import List

from connect4.config import PLAYER_NAMES
from connect4.core.rules import Coord, find_four
from connect4.game.state import GameState


def winning_line(state: GameState) -> List[Coord]:
    if state.status != "completed":
        return []
    res = find_four(state.board, state.win_conditions)
    return res[1] if res else []


def outcome_message(state: GameState) -> str:
    if state.status == "completed":
        if state.winner is None:
            raise RuntimeError("Game has been won with no winner. Invalid state.")
        return f"Player {PLAYER_NAMES[state.winner]} wins!"
    if state.status == "draw":
        return "It's a draw!"
    return ""
