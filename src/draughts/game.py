"""
The Game class is the entrypoint into the domain layer.
It is responsible for orchestrating all the rules required to play a turn of draughts:
validating a (multi-jump) move, applying it to the board, and undoing it again when the move turns out to be illegal.

A move either gets committed as a whole (and the turn passes), or is rolled back as a whole.
Callers never see a half applied chain of jumps.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Optional, Self

from src.core.shared_types import Color, MoveError
from src.draughts.board import Board, all_coordinates
from src.draughts.coordinate import BOARD_DIMENSION, Coordinate, to_chain_notation
from src.draughts.pieces import Piece
from src.draughts.turn import Turn

logger = logging.getLogger(__name__)


@dataclass
class AppliedPair:
    """Snapshot of one applied (origin, target) step, enough to undo it."""

    origin: Coordinate
    target: Coordinate
    moved_piece: Piece
    captured: Optional[Coordinate] = None


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SESSION / SERVICE ---

    board: Board = field(default_factory=Board.starting_position)
    turn: Turn = field(default_factory=Turn)

    @classmethod
    def from_layout(cls, rows: list[str], color_to_move: Color = Color.WHITE) -> Self:
        """Start from an arbitrary position (see Board.from_rows for the notation)"""
        return cls(board=Board.from_rows(rows), turn=Turn(color_to_move))

    def reset(self) -> None:
        """Starting layout, and white to move"""
        self.board.reset()
        if self.turn.color != Color.WHITE:
            self.turn.change()
        logger.info("Game reset to the starting position")

    def move(self, *coordinates: Coordinate) -> Optional[MoveError]:
        """
        Attempt a move
        -----

        The coordinates describe a chain: (c0 -> c1), (c1 -> c2), ... every step is called a pair.

        1. validate + apply the pairs one by one (stop at the first illegal pair, or when a mandatory capture gets ignored)
        2. validate the move as a whole (every jump of a chain must capture)
        3. illegal? roll back everything that got applied and report the error
        4. legal? forfeit a random piece if a mandatory capture was ignored, and pass the turn
        """
        assert len(coordinates) >= 2
        applied: list[AppliedPair] = []
        error: Optional[MoveError] = None
        ignored_eating_movement = False
        for pair in range(len(coordinates) - 1):
            error = self._is_correct_pair_move(pair, coordinates)
            if error is not None:
                break
            ignored_eating_movement = self._is_eating_movement_ignored(pair, coordinates)
            if ignored_eating_movement:
                break
            applied.append(self._pair_move(pair, coordinates))

        if error is None:
            error = self._is_correct_global_move(applied, coordinates)

        if error is not None:
            self._undo_pairs(applied)
            logger.debug(
                "Rejected move %s for %s: %s",
                to_chain_notation(list(coordinates)),
                self.turn.color,
                error.name,
            )
            return error

        if ignored_eating_movement:
            self._remove_random_piece()
        logger.info("%s played %s", self.turn.color, to_chain_notation(list(coordinates)))
        self.turn.change()
        return None

    def possible_coordinates_to_make_eating(self) -> list[Coordinate]:
        """Coordinates of the pieces (of the side to move) that are able to capture right now"""
        return [
            coordinate
            for coordinate in self._get_coordinates_with_actual_color()
            if self._is_eating_possible(coordinate)
        ]

    def is_blocked(self) -> bool:
        """The side to move has no legal move left anywhere on the board"""
        return all(
            self._is_blocked(coordinate)
            for coordinate in self._get_coordinates_with_actual_color()
        )

    def cancel(self) -> None:
        """The side to move gives up: all their pieces leave the board"""
        for coordinate in self._get_coordinates_with_actual_color():
            self.board.remove(coordinate)
        logger.info("%s cancelled the game", self.turn.color)
        self.turn.change()

    # --- QUERIES ---
    def get_color(self, coordinate: Coordinate) -> Optional[Color]:
        assert coordinate is not None
        return self.board.get_color(coordinate)

    def get_piece(self, coordinate: Coordinate) -> Optional[Piece]:
        assert coordinate is not None
        return self.board.get_piece(coordinate)

    def get_turn_color(self) -> Color:
        return self.turn.color

    def get_dimension(self) -> int:
        return BOARD_DIMENSION

    def count_pieces(self, color: Optional[Color] = None) -> int:
        return self.board.count_pieces(color)

    def __str__(self) -> str:
        return f"{self.board}\n{self.turn}"

    # -- PAIR VALIDATION HELPERS ---
    def _is_correct_pair_move(
        self, pair: int, coordinates: tuple[Coordinate, ...] | list[Coordinate]
    ) -> Optional[MoveError]:
        origin = coordinates[pair]
        target = coordinates[pair + 1]
        assert origin is not None
        assert target is not None
        if self.board.is_empty(origin):
            return MoveError.EMPTY_ORIGIN
        if self.board.get_color(origin) != self.turn.color:
            return MoveError.OPPOSITE_PIECE
        if not self.board.is_empty(target):
            return MoveError.NOT_EMPTY_TARGET
        between_pieces = self.board.get_between_diagonal_pieces(origin, target)
        piece = self.board.get_piece(origin)
        # for the type checker: the origin is not empty
        assert piece is not None
        return piece.is_correct_movement(between_pieces, pair, list(coordinates))

    def _is_correct_global_move(
        self,
        applied: list[AppliedPair],
        coordinates: tuple[Coordinate, ...] | list[Coordinate],
    ) -> Optional[MoveError]:
        """A chain of more than one jump only makes sense if every jump captures"""
        captures = sum(1 for step in applied if step.captured is not None)
        if len(coordinates) > 2 and len(coordinates) > captures + 1:
            return MoveError.TOO_MUCH_JUMPS
        return None

    def _get_between_diagonal_piece(
        self, pair: int, coordinates: tuple[Coordinate, ...] | list[Coordinate]
    ) -> Optional[Coordinate]:
        """Coordinate of the first piece found between the two coordinates of the pair (None: nothing to capture)"""
        origin = coordinates[pair]
        target = coordinates[pair + 1]
        assert origin.is_on_diagonal(target)
        for coordinate in origin.get_between_diagonal_coordinates(target):
            if not self.board.is_empty(coordinate):
                return coordinate
        return None

    # -- MANDATORY CAPTURE HELPERS ---
    def _is_eating_movement_ignored(
        self, pair: int, coordinates: tuple[Coordinate, ...] | list[Coordinate]
    ) -> bool:
        """
        If any piece can capture, the pair must start from one of those pieces AND actually capture.
        Otherwise the player ignored a mandatory capture.
        """
        possible_coordinates = self.possible_coordinates_to_make_eating()
        if not possible_coordinates:
            return False
        return (
            coordinates[pair] not in possible_coordinates
            or self._get_between_diagonal_piece(pair, coordinates) is None
        )

    def _is_eating_possible(self, coordinate: Coordinate) -> bool:
        """Is there a jump (two squares away) from this coordinate that is legal and captures?"""
        for target in coordinate.get_diagonal_coordinates(2):
            if self._is_correct_pair_move(0, (coordinate, target)) is not None:
                continue
            between_coordinates = coordinate.get_between_diagonal_coordinates(target)
            if not self.board.is_empty(between_coordinates[0]):
                return True
        return False

    def _remove_random_piece(self) -> None:
        """Penalty for ignoring a mandatory capture: one of the pieces that could have captured is lost"""
        coordinates = self.possible_coordinates_to_make_eating()
        for_removing = random.choice(coordinates)
        self.board.remove(for_removing)
        logger.debug(
            "%s ignored a mandatory capture and forfeits the piece on %s",
            self.turn.color,
            for_removing,
        )

    # -- APPLY / UNDO HELPERS ---
    def _pair_move(
        self, pair: int, coordinates: tuple[Coordinate, ...] | list[Coordinate]
    ) -> AppliedPair:
        """
        Apply one pair to the board
        ---

        1. remove the captured piece (if any)
        2. move the piece
        3. promote it, when it reached the far edge of the board
        """
        origin = coordinates[pair]
        target = coordinates[pair + 1]
        moved_piece = self.board.get_piece(origin)
        # for the type checker: the pair was validated before
        assert moved_piece is not None

        for_removing = self._get_between_diagonal_piece(pair, coordinates)
        if for_removing is not None:
            self.board.remove(for_removing)
        self.board.move(origin, target)
        if moved_piece.is_limit(target):
            self.board.put(target, moved_piece.promoted())

        logger.debug(
            "Applied pair %s -> %s (captured: %s)", origin, target, for_removing
        )
        return AppliedPair(origin, target, moved_piece, for_removing)

    def _undo_pairs(self, applied: list[AppliedPair]) -> None:
        """
        Roll back in reverse order of application.

        NOTE: captured pieces come back as plain men of the opponent, even if they were kings.
        The moving piece gets back exactly as it was (a promotion made during the chain is undone).
        """
        for step in reversed(applied):
            self.board.remove(step.target)
            self.board.put(step.origin, step.moved_piece)
            if step.captured is not None:
                self.board.put(step.captured, Piece.man(self.turn.get_opposite_color()))
        if applied:
            logger.debug("Rolled back %d applied pair(s)", len(applied))

    # -- OWN PIECES HELPERS ---
    def _get_coordinates_with_actual_color(self) -> list[Coordinate]:
        return [
            coordinate
            for coordinate in all_coordinates()
            if self.board.get_color(coordinate) == self.turn.color
        ]

    def _is_blocked(self, coordinate: Coordinate) -> bool:
        for distance in (1, 2):
            for target in coordinate.get_diagonal_coordinates(distance):
                if self._is_correct_pair_move(0, (coordinate, target)) is None:
                    return False
        return True
