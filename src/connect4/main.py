from __future__ import annotations

import argparse
import logging
from contextlib import contextmanager
from typing import Iterator

from connect4 import config
from connect4.ui.menu import run_menu

MODE_CHOICES = {"menu": None, "normal": "1", "rules": "2", "board": "3"}


@contextmanager
def ui_options(use_color: bool, clear_screen: bool) -> Iterator[None]:
    """Apply the UI toggles for one run and put the old values back afterwards."""
    saved = config.USE_COLOR, config.CLEAR_SCREEN
    config.USE_COLOR, config.CLEAR_SCREEN = use_color, clear_screen
    try:
        yield
    finally:
        config.USE_COLOR, config.CLEAR_SCREEN = saved


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Play Connect 4 in the terminal.")
    ap.add_argument("--mode", choices=sorted(MODE_CHOICES), default="menu", help="Skip the main menu and start a mode directly")
    ap.add_argument("--columns", type=int, default=config.DEFAULT_COLS, help="Default board width")
    ap.add_argument("--rows", type=int, default=config.DEFAULT_ROWS, help="Default board height")
    ap.add_argument("--no-color", action="store_true", help="Disable ANSI colours")
    ap.add_argument("--clear", action="store_true", help="Clear the screen before each board")
    ap.add_argument("--log-level", type=str.upper, default=config.LOG_LEVEL,
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level (logs go to stderr)")
    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    if args.columns < 1 or args.rows < 1:
        ap.error("--columns and --rows must be at least 1")

    logging.basicConfig(level=args.log_level, format=config.LOG_FORMAT)

    choice = MODE_CHOICES[args.mode]

    use_color = config.USE_COLOR and not args.no_color
    clear_screen = config.CLEAR_SCREEN or args.clear
    with ui_options(use_color, clear_screen):
        try:
            run_menu(args.columns, args.rows, choice=choice)
        except (EOFError, KeyboardInterrupt):
            print("\nGoodbye.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
