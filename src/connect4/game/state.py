from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

from connect4.core.board import Board
from connect4.core.rules import DEFAULT_WIN_CONDITIONS, WinCondition
from connect4.types import Player, Status


@dataclass(frozen=True, slots=True)
class GameState:
    board: Board
    current: Player = "X"
    status: Status = "started"
    winner: Optional[Player] = None
    win_conditions: Tuple[WinCondition, ...] = DEFAULT_WIN_CONDITIONS
    moves: int = 0

    @property
    def is_over(self) -> bool:
        return self.status != "started"
