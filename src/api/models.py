"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidNotationError, InvalidRequestError
from src.core.shared_types import Color, MoveError, StateValue
from src.draughts.coordinate import parse_coordinates

PieceColor = str
PlayerName = str


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    player_white: PlayerName
    player_black: PlayerName

    @field_validator(*["player_white", "player_black"])
    @classmethod
    def validate_player_name(cls, value: str) -> str:
        if not value.strip():
            raise InvalidRequestError("Player name cannot be empty.")
        return value.strip()


class GameRequest(BaseModel):
    game_id: UUID


class MoveRequest(BaseModel):
    """
    The move is written as dot separated coordinates, each coordinate as two digits (row, column) starting at 1.
    ex. "32.43" (a single step) or "32.54.76" (two jumps in a row)
    """

    game_id: UUID
    move: str

    @field_validator("move")
    @classmethod
    def validate_move(cls, value: str) -> str:
        try:
            coordinates = parse_coordinates(value)
        except InvalidNotationError as exc:
            raise InvalidRequestError(
                f"Cannot interpret move: {value!r}. {exc}"
            ) from exc

        if len(coordinates) < 2:
            raise InvalidRequestError(
                f"A move needs at least an origin and a target: {value!r}"
            )
        return value.strip()


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    players: dict[PieceColor, PlayerName]
    board: list[str]
    turn: Color
    state: StateValue
    move_history: list[str]
    winner: Optional[Color] = None


class MoveResponse(BaseModel):
    game: GameResponse
    error: Optional[MoveError] = None

    @property
    def accepted(self) -> bool:
        return self.error is None
