"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from steed.core.board import Board


@pytest.fixture
def empty_board() -> Board:
    """A board with no pieces, white to move."""
    return Board.empty()


@pytest.fixture
def standard_board() -> Board:
    """The standard opening position."""
    return Board.standard()
