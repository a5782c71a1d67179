"""
A coordinate on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass
from string import ascii_lowercase

from src.core.exceptions import InvalidCoordinateError

# Chess board is always 8x8. The grid is square, so a single number is enough.
BOARD_SIZE = 8


@dataclass(frozen=True)
class Coordinate:
    """
    (file, rank) of a cell, counted from zero: a1 is (0, 0), h8 is (7, 7).

    A coordinate knows nothing about the board it will be used on. Whether it lies on the board is checked by the Board.
    """

    file: int
    rank: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Coordinate:
        """Algebraic notation: 'a1' - 'h8' get converted to (0,0) - (7,7)

        Squares beyond the board ('i1', 'a10') are fine here, the Board decides they are out of bounds.
        """
        file_char, rank_chars = sq[:1], sq[1:]
        is_square_name = (
            len(sq) >= 2
            and file_char in ascii_lowercase
            and rank_chars.isascii()
            and rank_chars.isdigit()
        )
        if not is_square_name:
            raise InvalidCoordinateError(f"Cannot interpret {sq!r} as a square name.")
        file = ord(file_char) - ord("a")
        rank = int(rank_chars) - 1
        return cls(file, rank)

    def to_algebraic(self) -> str:
        return f"{chr(self.file + ord('a'))}{self.rank + 1}"
