"""
Type definitions used across layers
"""

from enum import StrEnum


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"

    @property
    def opposite(self) -> "Color":
        return Color.BLACK if self == Color.WHITE else Color.WHITE


class PieceType(StrEnum):
    MAN = "man"
    KING = "king"


class StateValue(StrEnum):
    INITIAL = "initial"
    IN_GAME = "in game"
    FINAL = "final"


class MoveError(StrEnum):
    """Rule violations reported (not raised) by the engine when a move gets rejected."""

    # --- checked by the Game for every pair of coordinates
    EMPTY_ORIGIN = "the origin square is empty"
    OPPOSITE_PIECE = "the piece belongs to the opponent"
    NOT_EMPTY_TARGET = "the target square is occupied"

    # --- checked by the piece that moves
    NOT_DIAGONAL = "the movement is not diagonal"
    NOT_ADVANCED = "a man can only move forward"
    TOO_MUCH_ADVANCED = "a man cannot move that far"
    WITHOUT_EATING = "a jump must capture exactly one piece"
    COLLEAGUE_EATING = "cannot jump over your own pieces"
    TOO_MUCH_EATINGS = "cannot capture more than one piece per jump"

    # --- checked on the move as a whole
    TOO_MUCH_JUMPS = "every jump of a chain must capture"
