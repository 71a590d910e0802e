"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chez.core.board import Board
from chez.core.notation import STARTING_PLACEMENT, board_from_placement


@pytest.fixture
def empty_board() -> Board:
    return Board()


@pytest.fixture
def initial_board() -> Board:
    return board_from_placement(STARTING_PLACEMENT)
