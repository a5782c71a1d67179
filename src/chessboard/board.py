"""
The Board owns the grid of squares and whose turn it is.

`move_piece` is the only way to change either of them. Every request is validated first (see `validation.py`),
and only a move that passed all checks touches the grid, so a half-made move can never be observed.
"""

from __future__ import annotations

import logging
from typing import Callable, Mapping, Optional, Sequence

from src.chessboard.coordinate import BOARD_SIZE, Coordinate
from src.chessboard.layouts import Layout, layout_from_fen, layout_to_fen, standard_layout
from src.chessboard.movement import MOVEMENT_RULES, MovementRule
from src.chessboard.moves import Move
from src.chessboard.pieces import EMPTY, Square
from src.chessboard.turns import next_player
from src.chessboard.validation import validate_move
from src.core.exceptions import (
    IllegalMoveError,
    InvalidCoordinateError,
    InvalidLayoutError,
)
from src.core.models import BoardModel
from src.core.shared_types import Color, MoveError, PieceKind

logger = logging.getLogger(__name__)

LayoutView = tuple[tuple[Square, ...], ...]
LayoutProvider = Callable[[], Layout]


class Board:
    def __init__(
        self,
        layout: Sequence[Sequence[Square]],
        player: Color = Color.WHITE,
        movement_rules: Optional[Mapping[PieceKind, MovementRule]] = None,
    ) -> None:
        """
        The board takes a copy of the rows it is given, so changing the original layout afterwards does not affect it.
        Only the shape of the layout is checked, not whether the position makes sense (piece counts etc.).
        """
        _check_layout_shape(layout)
        self._layout: Layout = [list(rank) for rank in layout]
        self._player = Color(player)
        self._moves: list[Move] = []
        self._movement_rules: dict[PieceKind, MovementRule] = {
            **MOVEMENT_RULES,
            **(movement_rules or {}),
        }

    @classmethod
    def standard(
        cls,
        layout_provider: LayoutProvider = standard_layout,
        player: Color = Color.WHITE,
        movement_rules: Optional[Mapping[PieceKind, MovementRule]] = None,
    ) -> Board:
        """Default board: standard starting position, white to move."""
        return cls(layout_provider(), player, movement_rules)

    @classmethod
    def from_fen(cls, placement: str, player: Color = Color.WHITE) -> Board:
        return cls(layout_from_fen(placement), player)

    @classmethod
    def from_model(cls, model: BoardModel) -> Board:
        """Rebuild a board from the information the Service layer stores. Moves played earlier are kept as history only."""
        board = cls.from_fen(model.placement, Color(model.player))
        board._moves = [Move.from_uci(uci) for uci in model.moves_uci]
        return board

    def to_model(self) -> BoardModel:
        return BoardModel(
            placement=self.to_fen(),
            player=str(self._player),
            moves_uci=[move.to_uci() for move in self._moves],
        )

    # --- READ ACCESS ---
    def get_layout(self) -> LayoutView:
        return tuple(tuple(rank) for rank in self._layout)

    def get_player(self) -> Color:
        return self._player

    @property
    def size(self) -> int:
        return len(self._layout)

    @property
    def moves(self) -> tuple[Move, ...]:
        return tuple(self._moves)

    def is_within_bounds(self, coordinate: Coordinate) -> bool:
        # NOTE: negative numbers would silently index from the end of a list
        return (0 <= coordinate.rank < len(self._layout)) and (
            0 <= coordinate.file < len(self._layout[coordinate.rank])
        )

    def square(self, coordinate: Coordinate) -> Square:
        if not self.is_within_bounds(coordinate):
            raise InvalidCoordinateError(f"{coordinate} does not lie on the board.")
        return self._layout[coordinate.rank][coordinate.file]

    def to_fen(self) -> str:
        return layout_to_fen(self._layout)

    # --- MOVING PIECES ---
    def check_move(
        self, origin: Coordinate, destination: Coordinate
    ) -> Optional[MoveError]:
        """Dry run of `move_piece`: the reason the move would be rejected, or None."""
        return validate_move(self, origin, destination, self._movement_rules)

    def move_piece(self, origin: Coordinate, destination: Coordinate) -> None:
        """
        Attempt to move the piece on `origin` to `destination`
        -----

        1. validate the request (raises IllegalMoveError, nothing changes)
        2. hand the origin square over to the destination, whatever stood there is gone
        3. origin becomes empty
        4. record the move and pass the turn to the other player
        """
        error = self.check_move(origin, destination)
        if error is not None:
            logger.debug(
                "Rejected move %s -> %s for %s: %s",
                origin,
                destination,
                self._player,
                error,
            )
            raise IllegalMoveError(error)

        moved_square = self._layout[origin.rank][origin.file]
        self._layout[origin.rank][origin.file] = EMPTY
        self._layout[destination.rank][destination.file] = moved_square
        self._moves.append(Move(origin, destination))
        self._next_turn()
        logger.debug(
            "Moved %s from %s to %s. %s to move.",
            moved_square.piece,
            origin,
            destination,
            self._player,
        )

    def make_move(self, move: Move) -> None:
        self.move_piece(move.from_square, move.to_square)

    def move_pieces(self, moves: list[Move]) -> None:
        """convenience method to apply multiple moves (if you quickly want to start a board in a given position reached after some moves)

        Stops at the first move that is not allowed. Moves before it stay on the board.
        """
        for move in moves:
            self.make_move(move)

    def _next_turn(self) -> None:
        self._player = next_player(self._player)


def _check_layout_shape(layout: Sequence[Sequence[Square]]) -> None:
    """Board is always BOARD_SIZE x BOARD_SIZE and only holds squares."""
    if len(layout) != BOARD_SIZE:
        raise InvalidLayoutError(
            f"Layout must have {BOARD_SIZE} ranks, got {len(layout)}."
        )
    for rank_idx, rank in enumerate(layout):
        if len(rank) != BOARD_SIZE:
            raise InvalidLayoutError(
                f"Rank {rank_idx} must have {BOARD_SIZE} squares, got {len(rank)}."
            )
        if not all(isinstance(square, Square) for square in rank):
            raise InvalidLayoutError(f"Rank {rank_idx} contains something other than a Square.")
