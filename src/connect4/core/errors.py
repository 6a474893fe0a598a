from __future__ import annotations
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from connect4.game.state import GameState


class MoveError(ValueError):
    """
    A rejected move.

    `previous_state` is the state the move was attempted on, unchanged, so the
    caller can re-prompt and retry from it. Board-level drops raise these
    without a state attached.
    """

    def __init__(self, message: str, previous_state: Optional["GameState"] = None) -> None:
        super().__init__(message)
        self.message = message
        self.previous_state = previous_state


class OutOfBoundsError(MoveError):
    pass


class ColumnFullError(MoveError):
    pass


class GameOverError(MoveError):
    pass
