"""Basic definition of a move"""

from __future__ import annotations

from dataclasses import dataclass

from src.chessboard.coordinate import Coordinate


@dataclass(frozen=True)
class Move:
    from_square: Coordinate
    to_square: Coordinate

    @classmethod
    def from_uci(cls, uci: str) -> Move:
        """
        Universal Chess Interface:
        ---
        One of the standard chess notations for moves

        example:
        * "e2e4": move the piece that was on e2 to e4
        """
        from_sq = Coordinate.from_algebraic(uci[:2])
        to_sq = Coordinate.from_algebraic(uci[2:4])
        return cls(from_sq, to_sq)

    def to_uci(self) -> str:
        return f"{self.from_square.to_algebraic()}{self.to_square.to_algebraic()}"
