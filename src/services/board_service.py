"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
from uuid import UUID

from src.api.models import (
    BoardResponse,
    CreateBoardRequest,
    DeleteBoardRequest,
    GetBoardRequest,
    MoveRequest,
)
from src.chessboard.board import Board
from src.chessboard.coordinate import Coordinate
from src.core.exceptions import RepositoryError
from src.core.models import BoardModel
from src.core.shared_types import Color
from src.db.repository import BoardRepository

logger = logging.getLogger(__name__)


class BoardService:
    """Orchestration of layers for a chess board."""

    def __init__(self, repository: BoardRepository) -> None:
        self.repo = repository

    # -- API routes logic ---
    def create_board(self, request: CreateBoardRequest) -> BoardResponse:
        """Set up a new board: standard starting position unless a placement was supplied."""

        board = (
            Board.from_fen(request.placement, request.player)
            if request.placement
            else Board.standard(player=request.player)
        )

        model = board.to_model()
        board_id = self.repo.add(model)
        logger.info("Created board %s, %s to move", board_id, request.player)

        return self._create_board_response(board_id, model)

    def get_board(self, request: GetBoardRequest) -> BoardResponse:
        board_model = self._fetch_board(request.board_id)
        return self._create_board_response(request.board_id, board_model)

    def make_move(self, request: MoveRequest) -> BoardResponse:
        """
        Make a move attempt.
        ----
        An illegal move raises IllegalMoveError before anything is written to the repository.
        """

        # Retrieve persisted BoardModel from repository and rebuild the Board
        stored_model = self._fetch_board(request.board_id)
        board = Board.from_model(stored_model)

        board.move_piece(
            Coordinate.from_algebraic(request.from_square),
            Coordinate.from_algebraic(request.to_square),
        )

        # store in repository
        updated_model = board.to_model()
        self.repo.save(request.board_id, updated_model)
        return self._create_board_response(request.board_id, updated_model)

    def delete_board(self, request: DeleteBoardRequest) -> BoardResponse:
        board_model = self._fetch_board(request.board_id)
        self.repo.remove(request.board_id)
        logger.info("Deleted board %s", request.board_id)
        return self._create_board_response(request.board_id, board_model)

    # -- PRIVATE HELPERS ---
    def _create_board_response(self, board_id: UUID, model: BoardModel) -> BoardResponse:
        return BoardResponse(
            board_id=board_id,
            player=Color(model.player),
            placement=model.placement,
            move_history=model.moves_uci,
        )

    def _fetch_board(self, board_id: UUID) -> BoardModel:
        """Attempt to find the board in the repository and raise error if it fails."""
        board_model = self.repo.get(board_id)
        if board_model is None:
            raise RepositoryError(f"Board with {board_id=} not found.")
        return board_model
