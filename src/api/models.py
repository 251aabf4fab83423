"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.chess.square import BOARD_DIMENSIONS
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, PieceType, Status

# (x, y) = (file, rank) as used by the engine
Coordinates = tuple[int, int]


# --- REQUEST MODELS ---
class GetGameRequest(BaseModel):
    game_id: UUID


class ActivateSquareRequest(BaseModel):
    """The presentation layer maps a click on the board to the square (x, y) and sends it here."""

    game_id: UUID
    x: int
    y: int

    @field_validator("x", "y")
    @classmethod
    def validate_coordinate(cls, value: int) -> int:
        # both dimensions are equal, so checking against the number of files is enough
        if not 0 <= value < BOARD_DIMENSIONS[0]:
            raise InvalidRequestError(
                f"Coordinate {value} is not on the board. Must lie in 0..{BOARD_DIMENSIONS[0] - 1}."
            )
        return value


class ResetGameRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class PieceResponse(BaseModel):
    id: str
    type: PieceType
    color: Color
    x: int
    y: int
    has_moved: bool


class GameResponse(BaseModel):
    game_id: UUID
    board: list[list[Optional[PieceResponse]]]  # rows[y][x]
    current_player: Color
    status: Status
    selected_square: Optional[Coordinates]
    legal_moves: list[Coordinates]
    captured_pieces: list[PieceResponse]
    move_log: list[str]
    winner: Optional[Color]
