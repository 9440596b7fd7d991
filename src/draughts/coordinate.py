"""
A coordinate on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

from src.core.exceptions import InvalidNotationError

# Draughts board is 8x8 in this variant. Everything else is derived from this number
BOARD_DIMENSION = 8

DIAGONAL_DIRECTIONS: list[tuple[int, int]] = [(-1, -1), (-1, 1), (1, -1), (1, 1)]


@dataclass(frozen=True)
class Coordinate:
    row: int
    col: int

    @classmethod
    def from_notation(cls, text: str) -> Coordinate:
        """Notation: two digits, row first, both 1-based. '11' - '88' get converted to (0,0) - (7,7)"""
        text = text.strip()
        if len(text) != 2 or not text.isdigit():
            raise InvalidNotationError(
                f"Cannot interpret {text!r} as a coordinate. Expected two digits like '21'."
            )
        coordinate = cls(int(text[0]) - 1, int(text[1]) - 1)
        if not coordinate.is_within_bounds():
            raise InvalidNotationError(f"Coordinate {text!r} is outside of the board.")
        return coordinate

    def to_notation(self) -> str:
        return f"{self.row + 1}{self.col + 1}"

    def is_within_bounds(self) -> bool:
        return 0 <= self.row < BOARD_DIMENSION and 0 <= self.col < BOARD_DIMENSION

    def is_black(self) -> bool:
        """Only the dark squares are playable"""
        return (self.row + self.col) % 2 == 1

    def is_on_diagonal(self, other: Coordinate) -> bool:
        row_delta = abs(self.row - other.row)
        return row_delta != 0 and row_delta == abs(self.col - other.col)

    def get_diagonal_distance(self, other: Coordinate) -> int:
        assert self.is_on_diagonal(other)
        return abs(self.row - other.row)

    def get_direction(self, other: Coordinate) -> tuple[int, int]:
        """Unit step (drow, dcol) that walks along the diagonal from self towards other"""
        assert self.is_on_diagonal(other)
        distance = self.get_diagonal_distance(other)
        return (other.row - self.row) // distance, (other.col - self.col) // distance

    def get_diagonal_coordinates(self, distance: int) -> list[Coordinate]:
        """All coordinates at exactly `distance` diagonal steps that still lie on the board (at most 4)"""
        coordinates: list[Coordinate] = []
        for drow, dcol in DIAGONAL_DIRECTIONS:
            target = Coordinate(self.row + drow * distance, self.col + dcol * distance)
            if target.is_within_bounds():
                coordinates.append(target)
        return coordinates

    def get_between_diagonal_coordinates(self, other: Coordinate) -> list[Coordinate]:
        """
        The cells strictly between self and other, ordered walking away from self.

        Empty if the coordinates are adjacent, or not on a common diagonal at all.
        """
        if not self.is_on_diagonal(other):
            return []
        drow, dcol = self.get_direction(other)
        return [
            Coordinate(self.row + step * drow, self.col + step * dcol)
            for step in range(1, self.get_diagonal_distance(other))
        ]

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"


def parse_coordinates(text: str) -> list[Coordinate]:
    """A chain of coordinates written as dot separated notation, ex. '21.32' or '61.43.25'"""
    return [Coordinate.from_notation(part) for part in text.strip().split(".")]


def to_chain_notation(coordinates: list[Coordinate]) -> str:
    return ".".join(coordinate.to_notation() for coordinate in coordinates)
