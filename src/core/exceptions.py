"""
Custom exceptions.

Every layer raises a subclass of GameError, so the outer layers can catch a single type if they do not care about the details.
"""


class GameError(Exception):
    """Base class for all errors raised by this application."""


class OutOfBoundsError(GameError):
    """Coordinates that do not lie on the 8x8 board were passed into the engine."""


class GameStateError(GameError):
    """Stored game data cannot be turned back into a valid GameState."""


class InvalidRequestError(GameError):
    """
    Request data failed validation.

    NOTE: deliberately not a ValueError. Pydantic would otherwise wrap it into a ValidationError.
    """


class RepositoryError(GameError):
    """Something went wrong fetching/storing a record (ex. unknown game id)."""


class InvalidFENError(GameError):
    """Piece placement string that does not describe an 8x8 board."""
