"""Protocol repository: the service only depends on this, not on where the games are kept"""

from typing import Protocol
from uuid import UUID

from src.core.models import GameModel


class GameRepository(Protocol):
    """Storage of the games being played, by ID"""

    def list_games(self) -> list[UUID]:
        """IDs of every stored game."""
        ...

    def get_game(self, game_id: UUID) -> GameModel | None:
        """Get game by ID, if record exists."""
        ...

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Store new game and return the stored data + newly created game ID."""
        ...

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Replace the record of an existing game. None if there is no such game."""
        ...

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Remove a game's record, returning what was removed."""
        ...
