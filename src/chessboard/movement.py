"""
Geometry/Base movement rules

Key idea: Use strategy pattern to define, for each piece kind, which relocations its movement pattern allows.

The board only ships the permissive rule: any piece may go to any square, regardless of distance or path.
Proper movement patterns can be plugged in per piece kind (see `Board(movement_rules=...)`)
without touching the ordered checks in `validation.py`.
"""

from typing import Callable, Protocol

from src.chessboard.coordinate import Coordinate
from src.chessboard.pieces import Square
from src.core.shared_types import Color, PieceKind


class BoardView(Protocol):
    """Just the parts of the Board the movement rules and the validator need"""

    def is_within_bounds(self, coordinate: Coordinate) -> bool: ...
    def square(self, coordinate: Coordinate) -> Square: ...
    def get_player(self) -> Color: ...


# NOTE: a rule is only consulted for moves that already passed every other check
MovementRule = Callable[[Coordinate, Coordinate, BoardView], bool]


def unrestricted(origin: Coordinate, destination: Coordinate, board: BoardView) -> bool:
    return True


# -- STRATEGY PATTERN: MOVEMENT RULES ---
MOVEMENT_RULES: dict[PieceKind, MovementRule] = {
    kind: unrestricted for kind in PieceKind
}
