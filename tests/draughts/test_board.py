"""Unit tests for /src/draughts/board.py"""

import pytest

from src.core.exceptions import InvalidNotationError
from src.core.shared_types import Color
from src.draughts.board import Board
from src.draughts.coordinate import BOARD_DIMENSION, Coordinate
from src.draughts.pieces import Piece
from tests.conftest import EMPTY_LAYOUT, layout

STARTING_ROWS = [
    ".w.w.w.w",
    "w.w.w.w.",
    ".w.w.w.w",
    "........",
    "........",
    "b.b.b.b.",
    ".b.b.b.b",
    "b.b.b.b.",
]


def test_starting_position() -> None:
    board = Board.starting_position()
    assert board.to_rows() == STARTING_ROWS
    assert board.count_pieces() == 24
    assert board.count_pieces(Color.WHITE) == 12
    assert board.count_pieces(Color.BLACK) == 12


def test_new_board_is_empty() -> None:
    board = Board()
    assert board.count_pieces() == 0
    assert len(board.position) == BOARD_DIMENSION * BOARD_DIMENSION


def test_rows_roundtrip() -> None:
    rows = layout({(0, 1): "W", (3, 2): "b", (6, 5): "B", (2, 7): "w"})
    assert Board.from_rows(rows).to_rows() == rows


@pytest.mark.parametrize(
    "rows",
    [
        EMPTY_LAYOUT[:-1],  # a row short
        EMPTY_LAYOUT[:-1] + ["." * (BOARD_DIMENSION + 1)],  # a square too many
        EMPTY_LAYOUT[:-1] + ["...x...."],  # unknown piece
    ],
)
def test_invalid_rows(rows: list[str]) -> None:
    with pytest.raises(InvalidNotationError):
        _ = Board.from_rows(rows)


def test_queries() -> None:
    board = Board.from_rows(layout({(2, 1): "w", (5, 4): "B"}))
    assert board.get_piece(Coordinate(2, 1)) == Piece.man(Color.WHITE)
    assert board.get_color(Coordinate(5, 4)) == Color.BLACK
    assert board.get_piece(Coordinate(3, 2)) is None
    assert board.get_color(Coordinate(3, 2)) is None
    assert board.is_empty(Coordinate(3, 2))
    assert not board.is_empty(Coordinate(2, 1))


def test_queries_reject_missing_coordinate() -> None:
    """A None coordinate is a programming error"""
    board = Board()
    with pytest.raises(AssertionError):
        board.is_empty(None)  # type: ignore[arg-type]
    with pytest.raises(AssertionError):
        board.get_piece(None)  # type: ignore[arg-type]


def test_between_diagonal_pieces_keep_empty_cells() -> None:
    board = Board.from_rows(layout({(0, 1): "W", (2, 3): "b"}))
    pieces = board.get_between_diagonal_pieces(Coordinate(0, 1), Coordinate(4, 5))
    assert pieces == [None, Piece.man(Color.BLACK), None]


def test_move_relocates_the_same_piece() -> None:
    board = Board.from_rows(layout({(2, 1): "w"}))
    piece = board.get_piece(Coordinate(2, 1))
    board.move(Coordinate(2, 1), Coordinate(3, 2))
    assert board.is_empty(Coordinate(2, 1))
    assert board.get_piece(Coordinate(3, 2)) is piece


def test_move_onto_occupied_square_is_a_programming_error() -> None:
    board = Board.from_rows(layout({(2, 1): "w", (3, 2): "b"}))
    with pytest.raises(AssertionError):
        board.move(Coordinate(2, 1), Coordinate(3, 2))


def test_remove_and_put() -> None:
    board = Board.from_rows(layout({(2, 1): "w"}))
    removed = board.remove(Coordinate(2, 1))
    assert removed == Piece.man(Color.WHITE)
    assert board.is_empty(Coordinate(2, 1))
    assert board.remove(Coordinate(2, 1)) is None

    board.put(Coordinate(4, 3), Piece.king(Color.BLACK))
    assert board.get_piece(Coordinate(4, 3)) == Piece.king(Color.BLACK)
    board.put(Coordinate(4, 3), None)
    assert board.is_empty(Coordinate(4, 3))


def test_locate_color() -> None:
    board = Board.from_rows(layout({(2, 1): "w", (0, 1): "W", (5, 4): "b"}))
    assert set(board.locate_color(Color.WHITE)) == {Coordinate(2, 1), Coordinate(0, 1)}
    assert board.locate_color(Color.BLACK) == [Coordinate(5, 4)]


def test_reset_restores_starting_position() -> None:
    board = Board.from_rows(layout({(4, 3): "W"}))
    board.reset()
    assert board == Board.starting_position()


def test_text_rendering_has_indices() -> None:
    lines = str(Board.starting_position()).splitlines()
    assert lines[0] == " 01234567"
    assert lines[1] == "0" + STARTING_ROWS[0]
    assert len(lines) == BOARD_DIMENSION + 1
