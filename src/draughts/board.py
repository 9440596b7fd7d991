"""The Board holds the pieces: a mapping of every coordinate of the grid to the piece standing on it (or None)"""

from dataclasses import dataclass, field
from typing import Optional, Self

from src.core.exceptions import InvalidNotationError
from src.core.shared_types import Color
from src.draughts.coordinate import BOARD_DIMENSION, Coordinate
from src.draughts.pieces import TEXT_TO_PIECE, Piece, get_initial_color

EMPTY_SQUARE = "."


def all_coordinates() -> list[Coordinate]:
    return [
        Coordinate(row, col)
        for row in range(BOARD_DIMENSION)
        for col in range(BOARD_DIMENSION)
    ]


@dataclass
class Board:
    position: dict[Coordinate, Optional[Piece]] = field(
        default_factory=lambda: {coordinate: None for coordinate in all_coordinates()}
    )

    @classmethod
    def starting_position(cls) -> Self:
        board = cls()
        board.reset()
        return board

    @classmethod
    def from_rows(cls, rows: list[str]) -> Self:
        """Construct a board from its text layout.

        One string per row, row 0 first. Every character is one square:
        * 'w' / 'b': white / black man
        * 'W' / 'B': white / black king
        * '.': empty square
        ex. a lonely white man on (2, 1) in an otherwise empty board:
        ['........', '........', '.w......', '........', ...]
        """
        if len(rows) != BOARD_DIMENSION or any(len(row) != BOARD_DIMENSION for row in rows):
            raise InvalidNotationError(
                f"Board layout must contain {BOARD_DIMENSION} rows of {BOARD_DIMENSION} squares."
            )
        board = cls()
        for row_idx, row in enumerate(rows):
            for col_idx, character in enumerate(row):
                if character == EMPTY_SQUARE:
                    continue
                if character not in TEXT_TO_PIECE:
                    raise InvalidNotationError(
                        f"Unknown piece {character!r} in row {row_idx} of the board layout."
                    )
                board.put(Coordinate(row_idx, col_idx), Piece.from_text(character))
        return board

    def to_rows(self) -> list[str]:
        return [self._row_to_text(row) for row in range(BOARD_DIMENSION)]

    def _row_to_text(self, row: int) -> str:
        characters: list[str] = []
        for col in range(BOARD_DIMENSION):
            piece = self.get_piece(Coordinate(row, col))
            characters.append(piece.to_text() if piece else EMPTY_SQUARE)
        return "".join(characters)

    def reset(self) -> None:
        """Put every piece back on its starting square"""
        for coordinate in all_coordinates():
            color = get_initial_color(coordinate)
            self.put(coordinate, Piece.man(color) if color else None)

    # --- QUERIES ---
    def get_piece(self, coordinate: Coordinate) -> Optional[Piece]:
        assert coordinate is not None
        return self.position[coordinate]

    def get_color(self, coordinate: Coordinate) -> Optional[Color]:
        assert coordinate is not None
        piece = self.get_piece(coordinate)
        return piece.color if piece else None

    def is_empty(self, coordinate: Coordinate) -> bool:
        assert coordinate is not None
        return self.get_piece(coordinate) is None

    def get_between_diagonal_pieces(
        self, origin: Coordinate, target: Coordinate
    ) -> list[Optional[Piece]]:
        """Pieces (None for an empty cell) on every coordinate strictly between origin and target"""
        return [
            self.get_piece(coordinate)
            for coordinate in origin.get_between_diagonal_coordinates(target)
        ]

    def locate_color(self, color: Color) -> list[Coordinate]:
        return [
            coordinate
            for coordinate, piece in self.position.items()
            if piece is not None and piece.color == color
        ]

    def count_pieces(self, color: Optional[Color] = None) -> int:
        """Count all the pieces of a given color (or every piece on the board if no color is given)"""
        return sum(
            1
            for piece in self.position.values()
            if piece is not None and (color is None or piece.color == color)
        )

    # --- MUTATIONS (only called by the Game) ---
    def put(self, coordinate: Coordinate, piece: Optional[Piece]) -> None:
        assert coordinate is not None
        self.position[coordinate] = piece

    def remove(self, coordinate: Coordinate) -> Optional[Piece]:
        assert coordinate is not None
        piece = self.position[coordinate]
        self.position[coordinate] = None
        return piece

    def move(self, origin: Coordinate, target: Coordinate) -> None:
        """Relocate the piece. The target must be empty."""
        assert self.get_piece(origin) is not None
        assert self.is_empty(target)
        self.put(target, self.remove(origin))

    def __str__(self) -> str:
        header = " " + "".join(str(col) for col in range(BOARD_DIMENSION))
        lines = [header]
        lines.extend(f"{row}{text}" for row, text in enumerate(self.to_rows()))
        return "\n".join(lines)
