"""The Game board: the configuration of pieces on the 8x8 grid"""

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Self

from src.chess.pieces import FEN_TO_PIECE, PIECE_TO_FEN, Color, Piece, PieceType
from src.chess.square import BOARD_DIMENSIONS, Square, all_squares
from src.core.exceptions import InvalidFENError

STARTING_POSITION_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"

Row = tuple[Optional[Piece], ...]


@dataclass(frozen=True)
class Board:
    """
    Immutable grid of pieces, indexed as rows[rank][file].

    The grid is the source of truth. A piece's `position` is a copy of its grid location,
    kept in sync by every method that relocates a piece.

    Moving a piece never touches this board: `with_move()` builds a new one that only copies the (at most two) rows
    that change and shares all the others. Evaluating hypothetical moves is therefore always safe.
    """

    rows: tuple[Row, ...]

    @classmethod
    def empty(cls) -> Self:
        empty_row: Row = (None,) * BOARD_DIMENSIONS[0]
        return cls((empty_row,) * BOARD_DIMENSIONS[1])

    @classmethod
    def starting_position(cls) -> Self:
        """Standard setup: black on ranks 0 and 1, white on ranks 6 and 7."""
        return cls.from_fen(STARTING_POSITION_FEN)

    @classmethod
    def from_fen(cls, fen_str: str) -> Self:
        """Construct a board using the piece placement part of a FEN string.

        ex. standard starting position:
        rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
        means:
        * black pieces are on the 8th rank (rank index 0), starting with rook on a8, knight on b8, etc.
        * pawns cover the 7th rank (rank index 1) entirely
        * ranks 6 through 3 have 8 consecutive empty squares
        * rank 2 are the white pawns (capital letters)
        * 1st rank (rank index 7) are the white pieces.

        Pieces get their ids here, numbered per color and type in scan order: "br1", "bn1", ..., "wp8".
        The first queen and king of each color go unnumbered ("wq", "bk"), any further one continues at 2.
        """
        counters: Counter[tuple[Color, PieceType]] = Counter()
        rows: list[Row] = []
        for rank, fen_one_rank in enumerate(fen_str.split("/")):
            row: list[Optional[Piece]] = []
            for character in fen_one_rank:
                if character.isalpha():
                    if character.lower() not in FEN_TO_PIECE:
                        raise InvalidFENError(f"Unknown piece {character!r} in {fen_str!r}.")
                    color = Color.WHITE if character.isupper() else Color.BLACK
                    key = (color, FEN_TO_PIECE[character.lower()])
                    counters[key] += 1
                    row.append(
                        Piece.from_fen(character, Square(len(row), rank), _piece_id(key, counters[key]))
                    )
                elif character in "12345678":
                    # A number denotes the amount of empty squares after each other
                    row.extend([None] * int(character))
                else:
                    raise InvalidFENError(f"Unexpected character {character!r} in {fen_str!r}.")
            if len(row) != BOARD_DIMENSIONS[0]:
                raise InvalidFENError(f"Rank {rank} of {fen_str!r} does not describe 8 squares.")
            rows.append(tuple(row))
        if len(rows) != BOARD_DIMENSIONS[1]:
            raise InvalidFENError(f"{fen_str!r} does not describe 8 ranks.")
        return cls(tuple(rows))

    @classmethod
    def from_pieces(cls, pieces: Iterable[Piece]) -> Self:
        """Place each piece on the square stored in its `position`

        Raises ValueError when two pieces claim the same square or share a (non-empty) id.
        """
        grid: list[list[Optional[Piece]]] = [
            [None] * BOARD_DIMENSIONS[0] for _ in range(BOARD_DIMENSIONS[1])
        ]
        seen_ids: set[str] = set()
        for piece in pieces:
            if grid[piece.position.rank][piece.position.file] is not None:
                raise ValueError(f"Two pieces on {piece.position.to_algebraic()}.")
            if piece.id:
                if piece.id in seen_ids:
                    raise ValueError(f"Piece id {piece.id!r} is used twice.")
                seen_ids.add(piece.id)
            grid[piece.position.rank][piece.position.file] = piece
        return cls(tuple(tuple(row) for row in grid))

    def to_fen(self) -> str:
        """Ranks are separated by slashes in FEN string."""
        return "/".join(self._rank_to_fen(row) for row in self.rows)

    def _rank_to_fen(self, row: Row) -> str:
        """FEN string of a single rank"""
        fen_characters: list[str] = []
        empty_count = 0
        for piece in row:
            if piece is not None:
                if empty_count > 0:
                    fen_characters.append(str(empty_count))
                    empty_count = 0
                fen_characters.append(piece.to_fen())
            else:
                empty_count += 1

        # if the entire rank is empty, then we still place this number in the string
        if empty_count > 0:
            fen_characters.append(str(empty_count))
        return "".join(fen_characters)

    def piece(self, square: Square) -> Optional[Piece]:
        return self.rows[square.rank][square.file]

    def is_empty(self, square: Square) -> bool:
        return self.piece(square) is None

    def pieces(self, color: Optional[Color] = None) -> Iterator[Piece]:
        """All pieces (of a given color) in board scan order"""
        for square in all_squares():
            piece = self.piece(square)
            if piece is not None and (color is None or piece.color == color):
                yield piece

    def locate_king(self, color: Color) -> Optional[Square]:
        return next(
            (
                piece.position
                for piece in self.pieces(color)
                if piece.type == PieceType.KING
            ),
            None,
        )

    def with_move(self, from_square: Square, to_square: Square) -> Self:
        """New board with the piece on `from_square` relocated to `to_square` (whatever stood there is gone)."""
        moving_piece = self.piece(from_square)
        if moving_piece is None:
            raise ValueError(f"No piece to move on {from_square.to_algebraic()}")

        rows = list(self.rows)
        from_row = list(rows[from_square.rank])
        from_row[from_square.file] = None
        rows[from_square.rank] = tuple(from_row)

        # NOTE: read the row again, from and to might be on the same rank
        to_row = list(rows[to_square.rank])
        to_row[to_square.file] = moving_piece.moved_to(to_square)
        rows[to_square.rank] = tuple(to_row)
        return type(self)(tuple(rows))


UNNUMBERED_FIRST_ID = (PieceType.QUEEN, PieceType.KING)


def _piece_id(key: tuple[Color, PieceType], number: int) -> str:
    color, piece_type = key
    prefix = f"{color.value[0]}{PIECE_TO_FEN[piece_type]}"
    if piece_type in UNNUMBERED_FIRST_ID and number == 1:
        return prefix
    return f"{prefix}{number}"
