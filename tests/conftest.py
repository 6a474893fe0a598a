from __future__ import annotations

import builtins

import pytest

from connect4 import config


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    monkeypatch.setattr(config, "USE_COLOR", False)
    monkeypatch.setattr(config, "CLEAR_SCREEN", False)


@pytest.fixture
def feed_input(monkeypatch):
    """Replace input() with a scripted sequence; EOFError once it runs dry."""

    def _feed(*answers: str) -> None:
        it = iter(answers)

        def fake_input(prompt: str = "") -> str:
            try:
                return next(it)
            except StopIteration:
                raise EOFError from None

        monkeypatch.setattr(builtins, "input", fake_input)

    return _feed
