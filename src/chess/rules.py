"""
Legal moves and game status.

Combines the movement shapes (moves.py) with check detection (check.py).
"""

from src.chess.board import Board
from src.chess.check import is_in_check
from src.chess.moves import is_legal_shape
from src.chess.pieces import Color
from src.chess.square import Square, all_squares
from src.core.shared_types import Status


def legal_moves(board: Board, from_square: Square) -> tuple[Square, ...]:
    """
    Destinations the piece on `from_square` may legally move to
    ----

    ----
    1. try every square of the board (rank-major, file-minor: the order is kept for display)
    2. keep the shape legal ones
    3. drop those that would put (or leave) your own king in check

    An empty square has no legal moves.
    """
    piece = board.piece(from_square)
    if piece is None:
        return ()

    return tuple(
        to_square
        for to_square in all_squares()
        if is_legal_shape(board, from_square, to_square)
        and not is_putting_yourself_in_check(board, from_square, to_square)
    )


def is_putting_yourself_in_check(
    board: Board, from_square: Square, to_square: Square
) -> bool:
    """Return True if the move leaves the mover's king in check

    plan:
    1. build the board after the candidate move (a new board, the original is untouched)
    2. determine if king is in check on the new board
    """
    piece = board.piece(from_square)
    assert piece is not None
    hypothetical_board = board.with_move(from_square, to_square)
    return is_in_check(hypothetical_board, piece.color)


def has_legal_move(board: Board, color: Color) -> bool:
    return any(legal_moves(board, piece.position) for piece in board.pieces(color))


def game_status(board: Board, color: Color) -> Status:
    """
    Status of the game, seen from the player `color` who is about to move.

    * not in check --> playing
    * in check, with at least one legal move --> check
    * in check, without any legal move --> checkmate

    NOTE: no legal moves while not in check (stalemate) is reported as playing. Stalemate is not detected.
    """
    if not is_in_check(board, color):
        return Status.PLAYING
    if has_legal_move(board, color):
        return Status.CHECK
    return Status.CHECKMATE
