"""Unit tests for /src/chess/rules.py"""

import pytest

from src.chess.board import Board
from src.chess.pieces import Color, PieceType
from src.chess.rules import game_status, has_legal_move, is_putting_yourself_in_check, legal_moves
from src.chess.square import Square
from src.core.shared_types import Status

OPENING_MOVE_COUNT: dict[PieceType, int] = {
    PieceType.PAWN: 2,
    PieceType.KNIGHT: 2,
    PieceType.BISHOP: 0,
    PieceType.ROOK: 0,
    PieceType.QUEEN: 0,
    PieceType.KING: 0,
}


def sq(name: str) -> Square:
    return Square.from_algebraic(name)


# --- LEGAL MOVES ---
@pytest.mark.parametrize(
    "square", [Square(file, rank) for rank in (0, 1, 6, 7) for file in range(8)]
)
def test_opening_moves_of_every_piece(square: Square) -> None:
    """Textbook opening: two moves for every pawn and knight, nothing for the other pieces"""
    board = Board.starting_position()
    piece = board.piece(square)
    assert piece is not None
    assert len(legal_moves(board, square)) == OPENING_MOVE_COUNT[piece.type]


def test_opening_pawn_moves() -> None:
    board = Board.starting_position()
    assert set(legal_moves(board, sq("e2"))) == {sq("e3"), sq("e4")}
    assert set(legal_moves(board, sq("c7"))) == {sq("c6"), sq("c5")}


def test_moves_in_board_scan_order() -> None:
    """Rank-major, file-minor: e4 (rank index 4) comes before e3 (rank index 5)"""
    board = Board.starting_position()
    assert legal_moves(board, sq("e2")) == (Square(4, 4), Square(4, 5))
    assert legal_moves(board, sq("b1")) == (Square(0, 5), Square(2, 5))


def test_no_moves_from_empty_square() -> None:
    assert legal_moves(Board.starting_position(), sq("e4")) == ()


def test_pinned_piece_cannot_move() -> None:
    """The black bishop on e7 shields its king from the rook on e1: every bishop move would expose the king"""
    board = Board.from_fen("4k3/4b3/8/8/8/8/8/K3R3")
    assert legal_moves(board, sq("e7")) == ()


def test_pinned_piece_may_move_along_the_pin() -> None:
    """A pinned rook can still move along the file, including taking the pinning piece"""
    board = Board.from_fen("4k3/4r3/8/8/8/8/8/K3R3")
    moves = set(legal_moves(board, sq("e7")))
    assert moves == {sq(f"e{rank}") for rank in range(1, 7)}


def test_king_cannot_walk_into_check() -> None:
    board = Board.from_fen("4k3/8/8/8/8/8/8/3RK3")
    assert legal_moves(board, sq("e8")) == (sq("f8"), sq("e7"), sq("f7"))


def test_must_respond_to_check() -> None:
    """Only the king is left to answer the check, and it has to step off the e-file"""
    board = Board.from_fen("4k3/8/8/8/8/8/8/K3R3")
    assert legal_moves(board, sq("e8")) == (sq("d8"), sq("f8"), sq("d7"), sq("f7"))


def test_hypothetical_moves_do_not_change_board() -> None:
    board = Board.from_fen("4k3/4b3/8/8/8/8/8/K3R3")
    before = board.to_fen()
    _ = legal_moves(board, sq("e7"))
    _ = legal_moves(board, sq("e8"))
    assert board.to_fen() == before


def test_is_putting_yourself_in_check() -> None:
    board = Board.from_fen("4k3/4b3/8/8/8/8/8/K3R3")
    assert is_putting_yourself_in_check(board, sq("e7"), sq("d6"))
    assert not is_putting_yourself_in_check(board, sq("e8"), sq("d8"))


# --- GAME STATUS ---
def test_status_starting_position() -> None:
    board = Board.starting_position()
    assert game_status(board, Color.WHITE) == Status.PLAYING
    assert game_status(board, Color.BLACK) == Status.PLAYING


def test_status_check() -> None:
    board = Board.from_fen("4k3/8/8/8/8/8/8/4R2K")
    assert game_status(board, Color.BLACK) == Status.CHECK
    # white is not the one in check
    assert game_status(board, Color.WHITE) == Status.PLAYING


def test_status_back_rank_mate() -> None:
    board = Board.from_fen("R5k1/5ppp/8/8/8/8/8/6K1")
    assert game_status(board, Color.BLACK) == Status.CHECKMATE
    assert not has_legal_move(board, Color.BLACK)


def test_status_check_when_attack_can_be_blocked() -> None:
    """Same back rank attack, but a black rook on b7 can block on b8"""
    board = Board.from_fen("R5k1/1r3ppp/8/8/8/8/8/6K1")
    assert game_status(board, Color.BLACK) == Status.CHECK


def test_stalemate_is_not_detected() -> None:
    """Black has no legal move but is not in check. Known limitation: reported as playing."""
    board = Board.from_fen("7k/5Q2/6K1/8/8/8/8/8")
    assert not has_legal_move(board, Color.BLACK)
    assert game_status(board, Color.BLACK) == Status.PLAYING


def test_status_without_king() -> None:
    """A board without a king is never in check, so the game is simply playing"""
    board = Board.from_fen("8/8/8/8/8/8/8/R7")
    assert game_status(board, Color.BLACK) == Status.PLAYING
