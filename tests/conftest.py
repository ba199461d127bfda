"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chesslite.core.enums import Color
from chesslite.core.notation import STARTING_FEN
from chesslite.game.controller import GameController
from chesslite.game.settings import GameSettings


@pytest.fixture
def make_controller() -> Callable[..., GameController]:
    """Factory for a controller set up from a FEN placement."""

    def _make(
        fen: str = STARTING_FEN,
        first_player: Color = Color.WHITE,
        **kwargs: object,
    ) -> GameController:
        settings = GameSettings(first_player=first_player, start_fen=fen)
        return GameController(settings, **kwargs)  # type: ignore[arg-type]

    return _make
