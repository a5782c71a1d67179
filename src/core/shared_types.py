"""
Type definitions used across layers
"""

from enum import StrEnum


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"


class PieceKind(StrEnum):
    PAWN = "pawn"
    KNIGHT = "knight"
    BISHOP = "bishop"
    ROOK = "rook"
    QUEEN = "queen"
    KING = "king"


class MoveError(StrEnum):
    """Reasons a move request gets rejected. Values double as the messages shown to a player."""

    ORIGIN_OUT_OF_BOUNDS = "origin square is out of bounds"
    DESTINATION_OUT_OF_BOUNDS = "destination square is out of bounds"
    EMPTY_ORIGIN_SQUARE = "an empty square cannot be moved"
    WRONG_PLAYERS_PIECE = "you cannot move your opponent's pieces"
    FRIENDLY_CAPTURE = "you cannot move a piece onto another one of your pieces"
    # only reachable when a custom movement rule is plugged into the board
    ILLEGAL_PIECE_MOVEMENT = "this piece cannot move like that"
