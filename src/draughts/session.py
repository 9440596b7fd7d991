"""
A Session wraps a Game with the bookkeeping around it: who is playing, has the game started, who won.

State machine:
INITIAL --start--> IN_GAME --(blocked / cancel)--> FINAL --resume--> INITIAL
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Self

from src.core.exceptions import GameStateError
from src.core.models import GameModel
from src.core.shared_types import Color, MoveError, StateValue
from src.draughts.coordinate import Coordinate, to_chain_notation
from src.draughts.game import Game

logger = logging.getLogger(__name__)


@dataclass
class Session:
    players: dict[Color, str]
    game: Game = field(default_factory=Game)
    state: StateValue = StateValue.INITIAL
    moves: list[str] = field(default_factory=list)
    winner: Optional[Color] = None

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a Session from the information the Service layer actually has"""
        try:
            state = StateValue(model.state)
        except ValueError as exc:
            raise GameStateError(
                f"Invalid state: {model.state!r}. \nPick one from {','.join([state.value for state in StateValue])}"
            ) from exc
        return cls(
            players={Color(color): name for color, name in model.registered_players.items()},
            game=Game.from_layout(model.board, Color(model.turn)),
            state=state,
            moves=list(model.moves),
            winner=Color(model.winner) if model.winner else None,
        )

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(
            board=self.game.board.to_rows(),
            turn=self.game.get_turn_color().value,
            state=self.state.value,
            registered_players={color.value: name for color, name in self.players.items()},
            moves=list(self.moves),
            winner=self.winner.value if self.winner else None,
        )

    def start(self) -> None:
        self._assert_state(StateValue.INITIAL)
        self.state = StateValue.IN_GAME

    def move(self, coordinates: list[Coordinate]) -> Optional[MoveError]:
        """
        Forward the move to the Game. Rule violations come back as a MoveError and leave everything untouched.

        After a committed move the opponent may be left without any legal move: that ends the game.
        """
        self._assert_state(StateValue.IN_GAME)
        mover = self.game.get_turn_color()
        error = self.game.move(*coordinates)
        if error is not None:
            return error

        self.moves.append(to_chain_notation(coordinates))
        if self.game.is_blocked():
            self._finish(winner=mover)
        return None

    def cancel(self) -> None:
        """The side to move resigns"""
        self._assert_state(StateValue.IN_GAME)
        loser = self.game.get_turn_color()
        self.game.cancel()
        self._finish(winner=loser.opposite)

    def resume(self) -> None:
        """Set up a fresh game after the previous one finished"""
        self._assert_state(StateValue.FINAL)
        self.game.reset()
        self.moves.clear()
        self.winner = None
        self.state = StateValue.INITIAL

    # -- PRIVATE HELPERS ---
    def _finish(self, winner: Color) -> None:
        self.winner = winner
        self.state = StateValue.FINAL
        logger.info("Game finished. Winner: %s", winner)

    def _assert_state(self, expected: StateValue) -> None:
        if self.state != expected:
            raise GameStateError(
                f"Game must be {expected.value!r} for this action. state: {self.state.value!r}"
            )
