"""
Ready-made layouts to create a Board from.

A layout is just data: a list of ranks, each rank a list of Squares, so `layout[rank][file]`.
Rank 0 holds the white pieces, the last rank the black pieces.
Every function returns a brand new grid, so boards never end up sharing one.
"""

from typing import Sequence

from src.chessboard.coordinate import BOARD_SIZE
from src.chessboard.pieces import EMPTY, FEN_TO_PIECE, Square
from src.core.exceptions import InvalidFENError
from src.core.shared_types import Color, PieceKind

Layout = list[list[Square]]

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"

BACK_RANK: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


def empty_layout() -> Layout:
    return [[EMPTY for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]


def standard_layout() -> Layout:
    """The standard starting position: white on ranks 1-2, black on ranks 7-8."""
    layout = empty_layout()
    layout[0] = [Square.occupied(kind, Color.WHITE) for kind in BACK_RANK]
    layout[1] = [Square.occupied(PieceKind.PAWN, Color.WHITE) for _ in range(BOARD_SIZE)]
    layout[BOARD_SIZE - 2] = [
        Square.occupied(PieceKind.PAWN, Color.BLACK) for _ in range(BOARD_SIZE)
    ]
    layout[BOARD_SIZE - 1] = [Square.occupied(kind, Color.BLACK) for kind in BACK_RANK]
    return layout


def _is_empty_run(character: str) -> bool:
    """Plain ASCII digits only: "²" or "٣" count as digits for str.isdigit(), not for FEN"""
    return character.isascii() and character.isdigit()


def is_valid_placement(placement: str) -> bool:
    """Only check the part of the FEN encoding for the board position."""
    rank_fens = placement.split("/")
    if len(rank_fens) != BOARD_SIZE:
        return False

    for rank_fen in rank_fens:
        file_count = 0
        for character in rank_fen:
            # make sure every character is valid
            if _is_empty_run(character):
                file_count += int(character)
            elif character.lower() in FEN_TO_PIECE:
                file_count += 1
            else:
                # immediately invalidate if the character is anything else
                return False

        # make sure you are creating a correctly sized board
        if file_count != BOARD_SIZE:
            return False
    return True


def layout_from_fen(placement: str) -> Layout:
    """Construct a layout using the first part of a FEN string.

    ex. standard starting position:
    rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
    means:
    * black pieces are on the 8th rank, starting with rook on a8, knight on b8, etc.
    * pawns cover 7th rank entirely
    * ranks 6 through 3 have 8 consecutive empty squares
    * rank 2 are the white pawns (capital letters)
    * 1st rank are the white pieces.
    """
    if not is_valid_placement(placement):
        raise InvalidFENError(
            f"Cannot interpret supplied string as a piece placement: {placement}"
        )

    layout = empty_layout()
    for rank_idx, fen_one_rank in enumerate(placement.split("/")):
        # FEN string is read from top rank (8th) to bottom rank (1st)
        rank = BOARD_SIZE - 1 - rank_idx
        # ... but the first character is the a-file, so reads in normal direction
        file = 0
        for character in fen_one_rank:
            if character.isalpha():
                layout[rank][file] = Square.from_fen(character)
                file += 1
            else:
                # A number denotes the amount of empty squares after each other (already in place)
                file += int(character)
    return layout


def layout_to_fen(layout: Sequence[Sequence[Square]]) -> str:
    """Ranks are separated by slashes in FEN string, top rank first."""
    return "/".join(_rank_to_fen(rank) for rank in reversed(layout))


def _rank_to_fen(rank: Sequence[Square]) -> str:
    """FEN string of a single rank"""
    fen_characters: list[str] = []
    empty_count = 0
    for square in rank:
        fen_char = square.to_fen()
        if fen_char is not None:
            if empty_count > 0:
                fen_characters.append(str(empty_count))
                empty_count = 0
            fen_characters.append(fen_char)
        else:
            empty_count += 1

    # if the entire rank is empty, then we still place this number in the string
    if empty_count > 0:
        fen_characters.append(str(empty_count))
    return "".join(fen_characters)
