"""Defines the draughts pieces and where they start"""

from dataclasses import dataclass
from typing import Optional, Self

from src.core.shared_types import Color, MoveError, PieceType
from src.draughts.coordinate import BOARD_DIMENSION, Coordinate
from src.draughts.movements import MOVEMENT_RULES

# Rows filled with pieces at the start, counted from each player's own edge of the board
INITIAL_ROWS = 3

# White starts on the low rows and moves up the board, black starts on the high rows and moves down
ADVANCE_DIRECTION: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: -1}

PROMOTION_ROW: dict[Color, int] = {Color.WHITE: BOARD_DIMENSION - 1, Color.BLACK: 0}

TEXT_TO_PIECE: dict[str, tuple[PieceType, Color]] = {
    "w": (PieceType.MAN, Color.WHITE),
    "b": (PieceType.MAN, Color.BLACK),
    "W": (PieceType.KING, Color.WHITE),
    "B": (PieceType.KING, Color.BLACK),
}

PIECE_TO_TEXT: dict[tuple[PieceType, Color], str] = {
    value: key for key, value in TEXT_TO_PIECE.items()
}


def get_initial_color(coordinate: Coordinate) -> Optional[Color]:
    """Color of the piece standing on this coordinate in the starting layout (None: empty at the start)"""
    if not coordinate.is_black():
        return None
    if coordinate.row < INITIAL_ROWS:
        return Color.WHITE
    if coordinate.row >= BOARD_DIMENSION - INITIAL_ROWS:
        return Color.BLACK
    return None


@dataclass
class Piece:
    type: PieceType
    color: Color

    @classmethod
    def man(cls, color: Color) -> Self:
        return cls(PieceType.MAN, color)

    @classmethod
    def king(cls, color: Color) -> Self:
        return cls(PieceType.KING, color)

    @classmethod
    def from_text(cls, character: str) -> Self:
        # lower case: men, upper case: kings
        piece_type, color = TEXT_TO_PIECE[character]
        return cls(piece_type, color)

    def to_text(self) -> str:
        return PIECE_TO_TEXT[(self.type, self.color)]

    def is_king(self) -> bool:
        return self.type == PieceType.KING

    def is_correct_movement(
        self,
        between_pieces: list[Optional["Piece"]],
        pair: int,
        coordinates: list[Coordinate],
    ) -> Optional[MoveError]:
        """Can this piece travel from coordinates[pair] to coordinates[pair + 1] over the given between pieces?"""
        movement_rule = MOVEMENT_RULES[self.type]
        return movement_rule(self, between_pieces, coordinates[pair], coordinates[pair + 1])

    def is_advanced(self, origin: Coordinate, target: Coordinate) -> bool:
        return (target.row - origin.row) * ADVANCE_DIRECTION[self.color] > 0

    def is_limit(self, coordinate: Coordinate) -> bool:
        """Has the piece reached the far edge of the board, where a man gets promoted?"""
        return coordinate.row == PROMOTION_ROW[self.color]

    def promoted(self) -> "Piece":
        """A king does not promote any further, so it just returns itself"""
        if self.is_king():
            return self
        return Piece.king(self.color)
