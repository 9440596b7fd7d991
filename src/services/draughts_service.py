"""Orchestration of communication from API router to business logic and storage layers (and the reverse direction)."""

import logging
from uuid import UUID

from src.api.models import (
    CreateGameRequest,
    GameRequest,
    GameResponse,
    MoveRequest,
    MoveResponse,
)
from src.core.exceptions import RepositoryError
from src.core.models import GameModel
from src.core.shared_types import Color
from src.db.repository import GameRepository
from src.draughts.coordinate import parse_coordinates
from src.draughts.session import Session

logger = logging.getLogger(__name__)


class DraughtsService:
    """Orchestration of layers for draughts game."""

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- API routes logic ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """Both players known up front. The game waits in its initial state until it gets started."""

        # Use info in CreateGameRequest to create a new Session, and convert into GameModel
        session = Session(
            players={
                Color.WHITE: request.player_white,
                Color.BLACK: request.player_black,
            }
        )
        created_game_data = session.to_model()

        # Store the GameModel in the repository
        stored_game, game_id = self.repo.create_game(created_game_data)
        logger.info(
            "Created game %s: %s (white) vs %s (black)",
            game_id,
            request.player_white,
            request.player_black,
        )
        return self._create_game_response(game_id, stored_game)

    def start_game(self, request: GameRequest) -> GameResponse:
        """INITIAL -> IN_GAME"""
        session = Session.from_model(self._fetch_game(request.game_id))
        session.start()
        started = self._store(request.game_id, session)
        logger.info("Started game %s", request.game_id)
        return self._create_game_response(request.game_id, started)

    def get_game_state(self, request: GameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used in "polling" loop by frontend to check when it is the player's turn for instance.
        """
        game_model = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, game_model)

    def make_move(self, request: MoveRequest) -> MoveResponse:
        """
        Make a move attempt.
        ----
        A move that breaks the rules is not an exception: the response carries the error, and the stored game is left as it was.
        """

        # Retrieve persisted GameModel from repository
        stored_model = self._fetch_game(request.game_id)

        # Parse the notation in MoveRequest into coordinates
        coordinates = parse_coordinates(request.move)

        # Create a new Session instance from the retrieved GameModel, and attempt the move
        session = Session.from_model(stored_model)
        error = session.move(coordinates)
        if error is not None:
            return MoveResponse(
                game=self._create_game_response(request.game_id, stored_model),
                error=error,
            )

        # Capture updated state in GameModel, and store in repository
        after_move = self._store(request.game_id, session)
        if after_move.winner:
            logger.info("Game %s won by %s", request.game_id, after_move.winner)
        return MoveResponse(game=self._create_game_response(request.game_id, after_move))

    def cancel_game(self, request: GameRequest) -> GameResponse:
        """The player to move resigns."""
        session = Session.from_model(self._fetch_game(request.game_id))
        session.cancel()
        cancelled = self._store(request.game_id, session)
        logger.info("Game %s cancelled, winner: %s", request.game_id, cancelled.winner)
        return self._create_game_response(request.game_id, cancelled)

    def resume_game(self, request: GameRequest) -> GameResponse:
        """Play again with the same players after a game finished."""
        session = Session.from_model(self._fetch_game(request.game_id))
        session.resume()
        resumed = self._store(request.game_id, session)
        return self._create_game_response(request.game_id, resumed)

    def list_games(self) -> list[GameResponse]:
        """Show all recorded games."""
        return [
            self._create_game_response(game_id, self._fetch_game(game_id))
            for game_id in self.repo.list_games()
        ]

    def delete_game(self, request: GameRequest) -> None:
        """Handle a request to delete a Game record."""
        deleted = self.repo.delete_game(request.game_id)
        if deleted is None:
            raise RepositoryError(f"Game with {request.game_id=} not found.")

    # -- Internal helpers --
    def _create_game_response(self, game_id: UUID, model: GameModel) -> GameResponse:
        """Convert info in GameModel to a GameResponse (for game with given ID.)"""
        return GameResponse(
            game_id=game_id,
            players=model.registered_players,
            board=model.board,
            turn=model.turn,
            state=model.state,
            move_history=model.moves,
            winner=model.winner,
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model

    def _store(self, game_id: UUID, session: Session) -> GameModel:
        updated = self.repo.update_game(game_id, session.to_model())
        if updated is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return updated
