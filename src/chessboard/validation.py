"""
The ordered checks a move request must pass before the board is allowed to change.

1. origin lies on the board
2. destination lies on the board
3. there is a piece on the origin square
4. that piece belongs to the player whose turn it is
5. the destination is not occupied by a piece of the same color
6. the movement rule of the piece allows it (permissive unless a rule is plugged in)

The first failing check is the one reported. Checks 1 and 2 come first:
nothing is looked up on the board by a coordinate that has not been checked yet.
"""

from typing import Mapping, Optional

from src.chessboard.coordinate import Coordinate
from src.chessboard.movement import MOVEMENT_RULES, BoardView, MovementRule
from src.core.shared_types import MoveError, PieceKind


def validate_move(
    board: BoardView,
    origin: Coordinate,
    destination: Coordinate,
    movement_rules: Mapping[PieceKind, MovementRule] = MOVEMENT_RULES,
) -> Optional[MoveError]:
    """Returns None if the move may be made, otherwise the reason it may not. Never changes the board."""
    if not board.is_within_bounds(origin):
        return MoveError.ORIGIN_OUT_OF_BOUNDS

    if not board.is_within_bounds(destination):
        return MoveError.DESTINATION_OUT_OF_BOUNDS

    origin_square = board.square(origin)
    destination_square = board.square(destination)

    if origin_square.is_empty:
        return MoveError.EMPTY_ORIGIN_SQUARE

    # prevents moving the opponent's pieces
    if origin_square.color != board.get_player():
        return MoveError.WRONG_PLAYERS_PIECE

    # prevents landing on one of your own pieces (moving a piece onto its own square included)
    if destination_square.color == origin_square.color:
        return MoveError.FRIENDLY_CAPTURE

    movement_rule = movement_rules[origin_square.kind]
    if not movement_rule(origin, destination, board):
        return MoveError.ILLEGAL_PIECE_MOVEMENT

    return None
