"""
Geometry/Base movement and capturing rules

Key idea: Use strategy pattern to define the legal movement for each piece type.

Whether the origin holds a piece of the right color and the target is free is checked by the Game before it asks the piece.
"""

from typing import TYPE_CHECKING, Callable, Optional, Protocol

from src.core.shared_types import Color, MoveError, PieceType
from src.draughts.coordinate import Coordinate

if TYPE_CHECKING:
    from src.draughts.pieces import Piece


class MovingPiece(Protocol):
    """Just the parts of a Piece the movement strategies need"""

    color: Color

    def is_advanced(self, origin: Coordinate, target: Coordinate) -> bool: ...


MovementRuleFn = Callable[
    [MovingPiece, list[Optional["Piece"]], Coordinate, Coordinate],
    Optional[MoveError],
]

# A man steps one square, or jumps two squares over the piece it captures
MAN_MAX_DISTANCE = 2


def occupied(between_pieces: list[Optional["Piece"]]) -> list["Piece"]:
    return [piece for piece in between_pieces if piece is not None]


def is_colleague_eating(
    piece: MovingPiece, between_pieces: list[Optional["Piece"]]
) -> bool:
    """Jumping over a piece of your own color is never allowed"""
    return any(other.color == piece.color for other in occupied(between_pieces))


# --- MOVEMENT RULES ---
def man_movement(
    piece: MovingPiece,
    between_pieces: list[Optional["Piece"]],
    origin: Coordinate,
    target: Coordinate,
) -> Optional[MoveError]:
    """
    A man:
    - moves a single square diagonally forward
    - captures by jumping diagonally forward over exactly one opposing piece, landing right behind it

    NOTE: A man never moves (or captures) backwards.
    """
    if not origin.is_on_diagonal(target):
        return MoveError.NOT_DIAGONAL
    if is_colleague_eating(piece, between_pieces):
        return MoveError.COLLEAGUE_EATING
    if not piece.is_advanced(origin, target):
        return MoveError.NOT_ADVANCED
    distance = origin.get_diagonal_distance(target)
    if distance > MAN_MAX_DISTANCE:
        return MoveError.TOO_MUCH_ADVANCED
    if distance == MAN_MAX_DISTANCE and len(occupied(between_pieces)) != 1:
        return MoveError.WITHOUT_EATING
    return None


def king_movement(
    piece: MovingPiece,
    between_pieces: list[Optional["Piece"]],
    origin: Coordinate,
    target: Coordinate,
) -> Optional[MoveError]:
    """
    A king (draught) slides any distance along a diagonal, in any direction.
    It may pass over (and capture) at most one opposing piece on the way.
    """
    if not origin.is_on_diagonal(target):
        return MoveError.NOT_DIAGONAL
    if is_colleague_eating(piece, between_pieces):
        return MoveError.COLLEAGUE_EATING
    if len(occupied(between_pieces)) > 1:
        return MoveError.TOO_MUCH_EATINGS
    return None


MOVEMENT_RULES: dict[PieceType, MovementRuleFn] = {
    PieceType.MAN: man_movement,
    PieceType.KING: king_movement,
}
