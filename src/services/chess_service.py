"""Orchestration of communication from the presentation layer to business logic and persistence layers (and the reverse direction)."""

import logging
from typing import Optional
from uuid import UUID

from src.api.models import (
    ActivateSquareRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    PieceResponse,
    ResetGameRequest,
)
from src.chess.game import GameState, activate_square, initial_state, reset_game
from src.chess.pieces import Piece
from src.core.exceptions import RepositoryError
from src.core.models import GameModel
from src.db.repository import GameRepository

logger = logging.getLogger(__name__)


class ChessService:
    """Orchestration of layers for chess game."""

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- Presentation layer logic ---
    def create_new_game(self) -> GameResponse:
        """Start a new session in the standard starting position."""

        # Create the starting GameState, and convert into GameModel
        created_game_data = initial_state().to_model()

        # Store the GameModel in the repository
        stored_game, game_id = self.repo.create_game(created_game_data)
        logger.info("Created game %s", game_id)

        # Return a GameResponse
        return self._create_game_response(game_id, GameState.from_model(stored_game))

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used by the frontend to (re)draw the board.
        """
        state = GameState.from_model(self._fetch_game(request.game_id))
        return self._create_game_response(request.game_id, state)

    def activate_square(self, request: ActivateSquareRequest) -> GameResponse:
        """A square on the board got clicked: select / deselect / move."""

        # Retrieve persisted GameModel from repository and rebuild the GameState
        state = GameState.from_model(self._fetch_game(request.game_id))

        # Let the domain layer decide what the click means
        new_state = activate_square(state, request.x, request.y)

        # store in repository (a click that changed nothing does not need to be stored)
        if new_state != state:
            self.repo.update_game(request.game_id, new_state.to_model())

        return self._create_game_response(request.game_id, new_state)

    def reset_game(self, request: ResetGameRequest) -> GameResponse:
        """Throw away the session's state and start over from the starting position."""

        # make sure the game exists before overwriting it
        previous_state = GameState.from_model(self._fetch_game(request.game_id))
        new_state = reset_game(previous_state)
        self.repo.update_game(request.game_id, new_state.to_model())
        logger.info("Reset game %s", request.game_id)
        return self._create_game_response(request.game_id, new_state)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        if self.repo.delete_game(request.game_id) is None:
            raise RepositoryError(f"Game with {request.game_id=} not found.")
        logger.info("Deleted game %s", request.game_id)

    # -- Internal helpers --
    def _create_game_response(self, game_id: UUID, state: GameState) -> GameResponse:
        """Convert a GameState to a GameResponse (for game with given ID.)"""
        board: list[list[Optional[PieceResponse]]] = [
            [_piece_response(piece) if piece is not None else None for piece in row]
            for row in state.board.rows
        ]
        return GameResponse(
            game_id=game_id,
            board=board,
            current_player=state.current_player,
            status=state.status,
            selected_square=(
                (state.selected_square.file, state.selected_square.rank)
                if state.selected_square is not None
                else None
            ),
            legal_moves=[(square.file, square.rank) for square in state.legal_moves],
            captured_pieces=[_piece_response(piece) for piece in state.captured_pieces],
            move_log=list(state.move_log),
            winner=state.winner,
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        logger.debug("Loaded game %s", game_id)
        return game_model


def _piece_response(piece: Piece) -> PieceResponse:
    return PieceResponse(
        id=piece.id,
        type=piece.type,
        color=piece.color,
        x=piece.position.file,
        y=piece.position.rank,
        has_moved=piece.has_moved,
    )
