from __future__ import annotations
import logging
from typing import Callable, Optional, Tuple

from connect4.config import DEFAULT_COLS, DEFAULT_ROWS
from connect4.core.rules import DEFAULT_WIN_CONDITIONS, WinCondition
from connect4.game.controller import run_game
from connect4.game.engine import initialise
from connect4.game.state import GameState
from connect4.ui.prompts import ask, ask_yes_no, parse_positive_int

logger = logging.getLogger(__name__)

MENU = """<<Main Menu>>
1) Normal game
2) Customisable rules
3) Customisable rules and board size
0) Exit"""


def _choose_win_conditions() -> Tuple[WinCondition, ...]:
    if ask_yes_no("Would you like to play with the standard ruleset?"):
        return DEFAULT_WIN_CONDITIONS
    chosen = tuple(
        wc for wc in DEFAULT_WIN_CONDITIONS
        if ask_yes_no(f"Do you want to allow {wc.name.lower()} connect 4s?")
    )
    if not chosen:
        print("No win conditions selected: the game can only end in a draw.")
    return chosen


def _choose_board_size(cols: int, rows: int) -> Tuple[int, int]:
    if ask_yes_no("Would you like to play with a default gameboard?"):
        return cols, rows
    cols = ask("How many columns? ", parse_positive_int)
    rows = ask("How many rows? ", parse_positive_int)
    return cols, rows


def normal_game(cols: int = DEFAULT_COLS, rows: int = DEFAULT_ROWS) -> GameState:
    return initialise(cols, rows)


def custom_rules_game(cols: int = DEFAULT_COLS, rows: int = DEFAULT_ROWS) -> GameState:
    return initialise(cols, rows, _choose_win_conditions())


def custom_board_game(cols: int = DEFAULT_COLS, rows: int = DEFAULT_ROWS) -> GameState:
    cols, rows = _choose_board_size(cols, rows)
    return initialise(cols, rows, _choose_win_conditions())


MODES: dict[str, tuple[str, Callable[[int, int], GameState]]] = {
    "1": ("Normal Mode", normal_game),
    "2": ("Customisable Rules Mode", custom_rules_game),
    "3": ("Fully Customisable Mode", custom_board_game),
}


def play_mode(key: str, cols: int = DEFAULT_COLS, rows: int = DEFAULT_ROWS) -> None:
    title, setup = MODES[key]
    while True:
        print(f"<<{title}>>")
        state = setup(cols, rows)
        print(
            f"Beginning a game of board size: [{state.board.cols},{state.board.rows}], "
            f"with the following win conditions: "
            f"{', '.join(str(wc) for wc in state.win_conditions) or 'none'}"
        )
        run_game(state)

        if not ask_yes_no("Would you like to play again?"):
            print("Returning to the main menu.\n")
            return


def run_menu(cols: int = DEFAULT_COLS, rows: int = DEFAULT_ROWS, choice: Optional[str] = None) -> None:
    print("Welcome to connect 4")

    while True:
        if choice is None:
            print(MENU)
            key = input("Choice: ").strip()
        else:
            key, choice = choice, None

        if key == "0":
            print("Thank you for playing!")
            return
        if key not in MODES:
            print(f"Did not recognise <{key}> as an option.")
            continue

        logger.debug("Menu choice %s", key)
        play_mode(key, cols, rows)
