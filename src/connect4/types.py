# src/connect4/types.py

from __future__ import annotations
from typing import Literal, Optional, NewType

Player = Literal["X", "O"]   # X is player one, O is player two
Cell = Optional[Player]
Move = NewType("Move", int)   # zero-indexed column
Status = Literal["started", "completed", "draw"]
