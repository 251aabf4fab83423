"""
A square on the board

(placed in its own module as multiple other modules need to import it)

Squares are zero-indexed array coordinates: `file` is the column (0 = a-file), `rank` is the row.
Rank index 0 is black's back rank, so the square name of rank index r is 8 - r  (Square(0, 0) is a8, Square(4, 7) is e1).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

# Chess board is always 8x8. Just in case we want to try some funky stuff, make it adjustable
BOARD_DIMENSIONS = (8, 8)
FILE_NAMES = "abcdefgh"


@dataclass(frozen=True)
class Square:
    file: int
    rank: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a8' - 'h1' get converted to (0,0) - (7,7)"""
        file = ord(sq[0]) - ord("a")
        rank = BOARD_DIMENSIONS[1] - int(sq[1])
        return cls(file, rank)

    def to_algebraic(self) -> str:
        return f"{FILE_NAMES[self.file]}{BOARD_DIMENSIONS[1] - self.rank}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.file < BOARD_DIMENSIONS[0]) and (
            0 <= self.rank < BOARD_DIMENSIONS[1]
        )


def all_squares() -> Iterator[Square]:
    """Board scan order: rank-major, file-minor"""
    for rank in range(BOARD_DIMENSIONS[1]):
        for file in range(BOARD_DIMENSIONS[0]):
            yield Square(file, rank)
