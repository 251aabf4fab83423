"""
Geometry/Base movement and capturing rules

Key idea: Use strategy pattern to define the movement shape of each piece type.

A move is "shape legal" if it matches the geometry of the piece and nothing stands in the way.
Whether the move leaves your own king in check is decided later (see rules.py).
"""

from typing import Callable, Optional, Protocol

from src.chess.pieces import Color, Piece, PieceType
from src.chess.square import Square


class Board(Protocol):
    """Just the parts the movement strategies need"""

    def piece(self, square: Square) -> Optional[Piece]: ...
    def is_empty(self, square: Square) -> bool: ...


# --- PAWN CONSTANTS ---
# White moves UP the board (towards rank index 0), Black moves DOWN.
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
PAWN_STARTING_RANK: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def is_path_clear(board: Board, from_square: Square, to_square: Square) -> bool:
    """
    Walk from `from_square` towards `to_square` one step at the time.
    Every square strictly in between must be empty. The endpoints themselves are not inspected.

    NOTE: only meaningful for squares on the same file, rank, or diagonal.
    """
    df = _sign(to_square.file - from_square.file)
    dr = _sign(to_square.rank - from_square.rank)
    file = from_square.file + df
    rank = from_square.rank + dr
    while (file, rank) != (to_square.file, to_square.rank):
        if not board.is_empty(Square(file, rank)):
            return False
        file += df
        rank += dr
    return True


# --- MOVEMENT RULES ---
def pawn_shape(board: Board, from_square: Square, to_square: Square, piece: Piece) -> bool:
    """
    A pawn:
    - moves by a single square forward, onto an empty square.
    - can move by two from its starting rank, onto an empty square.
    - takes diagonally (a diagonal step is only allowed onto an opponent's piece)

    NOTE: the square jumped over by the double step is NOT checked. Known limitation, kept on purpose.
    """
    df = to_square.file - from_square.file
    dr = to_square.rank - from_square.rank
    direction = PAWN_DIRECTION[piece.color]
    target = board.piece(to_square)

    if df == 0:
        if dr == direction and target is None:
            return True
        is_on_starting_rank = from_square.rank == PAWN_STARTING_RANK[piece.color]
        return is_on_starting_rank and dr == 2 * direction and target is None
    # a same-colour target has already been ruled out by is_legal_shape()
    return abs(df) == 1 and dr == direction and target is not None


def rook_shape(board: Board, from_square: Square, to_square: Square, piece: Piece) -> bool:
    """Rooks move either horizontally or vertically"""
    same_file = from_square.file == to_square.file
    same_rank = from_square.rank == to_square.rank
    return (same_file or same_rank) and is_path_clear(board, from_square, to_square)


def knight_shape(board: Board, from_square: Square, to_square: Square, piece: Piece) -> bool:
    """Knights jump: (2, 1) or (1, 2) in any direction. Nothing can block them."""
    df = abs(to_square.file - from_square.file)
    dr = abs(to_square.rank - from_square.rank)
    return (df, dr) in {(2, 1), (1, 2)}


def bishop_shape(board: Board, from_square: Square, to_square: Square, piece: Piece) -> bool:
    """Bishops move diagonally: |delta_rank| = |delta_file|"""
    df = abs(to_square.file - from_square.file)
    dr = abs(to_square.rank - from_square.rank)
    return df == dr and is_path_clear(board, from_square, to_square)


def queen_shape(board: Board, from_square: Square, to_square: Square, piece: Piece) -> bool:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    return rook_shape(board, from_square, to_square, piece) or bishop_shape(
        board, from_square, to_square, piece
    )


def king_shape(board: Board, from_square: Square, to_square: Square, piece: Piece) -> bool:
    """The king can move by a single square at the time, in any direction."""
    df = abs(to_square.file - from_square.file)
    dr = abs(to_square.rank - from_square.rank)
    return df <= 1 and dr <= 1


# -- STRATEGY PATTERN: MOVEMENT RULES ---
ShapeRuleFn = Callable[[Board, Square, Square, Piece], bool]
SHAPE_RULES: dict[PieceType, ShapeRuleFn] = {
    PieceType.PAWN: pawn_shape,
    PieceType.ROOK: rook_shape,
    PieceType.KNIGHT: knight_shape,
    PieceType.BISHOP: bishop_shape,
    PieceType.QUEEN: queen_shape,
    PieceType.KING: king_shape,
}


def is_legal_shape(board: Board, from_square: Square, to_square: Square) -> bool:
    """
    Can the piece standing on `from_square` move to `to_square`?
    ---

    Ignores whether the move leaves its own king in check.
    Never allowed: staying put, an empty starting square, or landing on a piece of your own color.
    """
    if from_square == to_square:
        return False

    piece = board.piece(from_square)
    if piece is None:
        return False

    target = board.piece(to_square)
    if target is not None and target.color == piece.color:
        return False

    movement_rule = SHAPE_RULES[piece.type]
    return movement_rule(board, from_square, to_square, piece)
