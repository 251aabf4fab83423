"""Short algebraic-style notation for the move history"""

from typing import Optional

from src.chess.pieces import Piece, PieceType
from src.chess.square import Square


def piece_letter(piece: Piece) -> str:
    """
    Pawns get no letter, all other pieces the first letter of their name.

    NOTE: knights therefore show up as "K", just like the king. Known limitation, kept on purpose.
    """
    if piece.type == PieceType.PAWN:
        return ""
    return piece.type.value[0].upper()


def format_move(
    from_square: Square,
    to_square: Square,
    moving_piece: Piece,
    captured_piece: Optional[Piece] = None,
) -> str:
    """
    <piece letter><x if something was captured><destination square>

    ex) "e4", "Ra5", "Rxa5", "Kf3" (a knight move)

    No check/mate suffix, no disambiguation. The starting square is not part of the notation.
    """
    capture = "x" if captured_piece is not None else ""
    return f"{piece_letter(moving_piece)}{capture}{to_square.to_algebraic()}"
