"""Attack / check detection"""

from src.chess.board import Board
from src.chess.moves import is_legal_shape
from src.chess.pieces import Color
from src.chess.square import Square


def is_attacked(board: Board, square: Square, by_color: Color) -> bool:
    """
    Is the square in the line-of-sight of any piece of the given color?
    ---

    A square is attacked when one of those pieces could make a shape legal move onto it.

    NOTE: pawns only attack an occupied square this way (their diagonal step needs something to take).
    That is all we need: the only square ever tested is one the king stands on.
    """
    return any(
        is_legal_shape(board, piece.position, square)
        for piece in board.pieces(by_color)
    )


def is_in_check(board: Board, color: Color) -> bool:
    """Is the king of `color` attacked by the opponent? A board without that king is never in check."""
    king_square = board.locate_king(color)
    if king_square is None:
        return False
    return is_attacked(board, king_square, color.opponent())
