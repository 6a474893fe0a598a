# src/connect4/config.py

from __future__ import annotations

DEFAULT_ROWS = 6
DEFAULT_COLS = 7
CONNECT_N = 4

PLAYER_NAMES = {"X": "One", "O": "Two"}
PIECES = {"X": "x", "O": "o", None: "."}

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = False

# Logging (stderr, so it never mixes with the board)
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVEL = "WARNING"
