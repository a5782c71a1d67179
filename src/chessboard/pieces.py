"""Defines the pieces and the content of a single cell of the board"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from src.core.shared_types import Color, PieceKind

FEN_TO_PIECE: dict[str, PieceKind] = {
    "p": PieceKind.PAWN,
    "n": PieceKind.KNIGHT,
    "b": PieceKind.BISHOP,
    "r": PieceKind.ROOK,
    "q": PieceKind.QUEEN,
    "k": PieceKind.KING,
}

PIECE_TO_FEN: dict[PieceKind, str] = {value: key for key, value in FEN_TO_PIECE.items()}


@dataclass(frozen=True)
class Piece:
    kind: PieceKind
    color: Color

    @classmethod
    def from_fen(cls, character: str) -> Piece:
        # lower case: Black pieces, upper case: White pieces
        color = Color.WHITE if character.isupper() else Color.BLACK
        kind = FEN_TO_PIECE[character.lower()]
        return cls(kind, color)

    def to_fen(self) -> str:
        return (
            PIECE_TO_FEN[self.kind].upper()
            if self.color == Color.WHITE
            else PIECE_TO_FEN[self.kind].lower()
        )


@dataclass(frozen=True)
class Square:
    """
    One cell of the board: either empty, or occupied by exactly one piece.

    Squares are immutable. Moving a piece hands the whole Square object over to the destination cell
    and puts a fresh empty Square in the origin cell.
    """

    piece: Optional[Piece] = None

    @classmethod
    def empty(cls) -> Square:
        return cls()

    @classmethod
    def occupied(cls, kind: PieceKind, color: Color) -> Square:
        return cls(Piece(kind, color))

    @classmethod
    def from_fen(cls, character: str) -> Square:
        return cls(Piece.from_fen(character))

    def to_fen(self) -> Optional[str]:
        """FEN only has characters for pieces. Runs of empty squares are counted by the layout."""
        return self.piece.to_fen() if self.piece is not None else None

    @property
    def is_empty(self) -> bool:
        return self.piece is None

    @property
    def color(self) -> Optional[Color]:
        """Color of the occupant, if any"""
        return self.piece.color if self.piece is not None else None

    @property
    def kind(self) -> Optional[PieceKind]:
        return self.piece.kind if self.piece is not None else None


EMPTY = Square.empty()
