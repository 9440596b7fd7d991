"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and the domain / repository layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to each layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass, field
from typing import Optional

# Type aliases to make GameModel easier to read
PieceColor = str
PlayerName = str


@dataclass
class GameModel:
    """Transport-safe representation of a draughts game used between API, Service, repository, and Game layers."""

    board: list[str]
    turn: PieceColor
    state: str
    registered_players: dict[PieceColor, PlayerName]
    moves: list[str] = field(default_factory=list)
    winner: Optional[PieceColor] = None
