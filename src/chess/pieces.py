"""Defines the chess pieces"""

from dataclasses import dataclass, field, replace
from typing import Self

from src.core.shared_types import Color, PieceType
from src.chess.square import Square

FEN_TO_PIECE: dict[str, PieceType] = {
    "p": PieceType.PAWN,
    "n": PieceType.KNIGHT,
    "b": PieceType.BISHOP,
    "r": PieceType.ROOK,
    "q": PieceType.QUEEN,
    "k": PieceType.KING,
}

PIECE_TO_FEN: dict[PieceType, str] = {value: key for key, value in FEN_TO_PIECE.items()}


@dataclass(frozen=True)
class Piece:
    """
    A piece standing on the board.

    `id` is handed out once when the board is set up and only exists so a renderer can follow a piece across moves.
    It is excluded from comparisons: two pieces of the same type/color on the same square are equal.
    """

    type: PieceType
    color: Color
    position: Square
    id: str = field(default="", compare=False)
    has_moved: bool = False

    @classmethod
    def from_fen(cls, character: str, position: Square, piece_id: str = "") -> Self:
        # lower case: Black pieces, upper case: White pieces
        color = Color.WHITE if character.isupper() else Color.BLACK
        piece_type = FEN_TO_PIECE[character.lower()]
        return cls(piece_type, color, position, piece_id)

    def to_fen(self) -> str:
        return (
            PIECE_TO_FEN[self.type].upper()
            if self.color == Color.WHITE
            else PIECE_TO_FEN[self.type].lower()
        )

    def moved_to(self, square: Square) -> Self:
        """The same piece (same id) after it has been relocated."""
        return replace(self, position=square, has_moved=True)
