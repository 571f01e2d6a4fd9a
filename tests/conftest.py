"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chesslaw.game.controller import ChessGame


@pytest.fixture
def game() -> ChessGame:
    """A fresh game at the standard starting position."""
    return ChessGame()
