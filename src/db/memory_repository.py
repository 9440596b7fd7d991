"""Implementation of (Game)Repository keeping the games in memory for as long as the process lives"""

from copy import deepcopy
from uuid import UUID, uuid4

from src.core.models import GameModel


class InMemoryGameRepository:
    """Games stored in a dictionary by ID. Copies go in and out, so callers cannot mutate a stored record by accident."""

    def __init__(self) -> None:
        self._games: dict[UUID, GameModel] = {}

    def list_games(self) -> list[UUID]:
        return list(self._games.keys())

    def get_game(self, game_id: UUID) -> GameModel | None:
        """Get game by ID, if record exists."""
        game = self._games.get(game_id)
        return deepcopy(game) if game else None

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Store new game and return the stored data + newly created game ID."""
        new_id = uuid4()
        self._games[new_id] = deepcopy(game)
        return deepcopy(game), new_id

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Replace the record of an existing game."""
        if game_id not in self._games:
            return None
        self._games[game_id] = deepcopy(game)
        return deepcopy(game)

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Remove a game's record."""
        return self._games.pop(game_id, None)

    def clear(self) -> None:
        """Forget every game. Keeps tests sharing a repository fixture independent of each other."""
        self._games.clear()
