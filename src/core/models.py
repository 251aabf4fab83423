"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the service layer (higher) and domain/db layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the DB layer, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass
from typing import Optional

# Type aliases to make GameModel easier to read
PieceRecord = dict[str, str | bool]
SquareName = str


@dataclass
class GameModel:
    """Transport-safe representation of a game session used between Service, DB, and Game layers.

    Piece records look like: {"id": "wp5", "type": "pawn", "color": "white", "square": "e2", "has_moved": False}
    """

    pieces: list[PieceRecord]
    current_player: str
    selected_square: Optional[SquareName]
    captured_pieces: list[PieceRecord]
    move_log: list[str]
    status: str
