from __future__ import annotations
from typing import Callable, Optional, TypeVar

from connect4.types import Move

T = TypeVar("T")

QUIT_WORDS = {"q", "quit", "exit"}


def parse_move(raw: str) -> Optional[Move]:
    """
    Zero-indexed column, or None when the player wants to quit.
    Bounds are the engine's job, not the parser's.
    """
    s = raw.strip().lower()
    if s in QUIT_WORDS:
        return None
    if not s.isdecimal():
        raise ValueError(f"The input <{raw.strip()}> could not be parsed as a column. Please try again.")
    return Move(int(s))


def parse_positive_int(raw: str) -> int:
    s = raw.strip()
    if not s.isdecimal() or int(s) < 1:
        raise ValueError(f"The input <{s}> is not a positive whole number. Please try again.")
    return int(s)


def parse_yes_no(raw: str, default: bool = True) -> bool:
    s = raw.strip().lower()
    if not s:
        return default
    if s in {"y", "yes"}:
        return True
    if s in {"n", "no"}:
        return False
    return default


def ask(prompt: str, parse: Callable[[str], T]) -> T:
    """Re-prompt until `parse` accepts the input."""
    while True:
        raw = input(prompt)
        try:
            return parse(raw)
        except ValueError as e:
            print(e)


def ask_yes_no(prompt: str, default: bool = True) -> bool:
    suffix = " Y/n " if default else " y/N "
    return parse_yes_no(input(prompt + suffix), default)
