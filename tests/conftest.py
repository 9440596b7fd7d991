"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable, Generator

import pytest

from src.core.shared_types import Color
from src.db.memory_repository import InMemoryGameRepository
from src.draughts.coordinate import BOARD_DIMENSION
from src.draughts.game import Game

PieceLayout = dict[tuple[int, int], str]

EMPTY_LAYOUT = ["." * BOARD_DIMENSION] * BOARD_DIMENSION


def layout(pieces: PieceLayout) -> list[str]:
    """Text layout of a board with only the given pieces: {(row, col): 'w' | 'b' | 'W' | 'B'}"""
    rows = [["."] * BOARD_DIMENSION for _ in range(BOARD_DIMENSION)]
    for (row, col), character in pieces.items():
        rows[row][col] = character
    return ["".join(row) for row in rows]


@pytest.fixture
def make_game() -> Callable[[PieceLayout, Color], Game]:
    """Call the inner function with the pieces to place and the color to move"""

    def _create_game(pieces: PieceLayout, color: Color = Color.WHITE) -> Game:
        return Game.from_layout(layout(pieces), color)

    return _create_game


@pytest.fixture
def memory_repository() -> Generator[InMemoryGameRepository, None, None]:
    """Ensures to clear the repository between tests"""
    repo = InMemoryGameRepository()
    try:
        yield repo
    finally:
        repo.clear()
