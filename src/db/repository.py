"""Protocol repository (implemented with SQLAlchemy in sql_repository.py, the service tests use a dictionary)"""

from typing import Protocol
from uuid import UUID

from src.core.models import GameModel


class GameRepository(Protocol):
    """
    Storage of game sessions between two square activations.

    Lookups by an unknown id return None. Turning that into an error is up to the caller.
    """

    def get_game(self, game_id: UUID) -> GameModel | None:
        """Load the stored session state."""
        ...

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Store a fresh session, returning what was stored together with the id handed out for it."""
        ...

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Overwrite the whole session state (pieces, selection, captures, move log and status)."""
        ...

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Drop the session, returning its last state."""
        ...
