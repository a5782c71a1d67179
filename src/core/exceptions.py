"""Errors raised by the different layers. All of them can be caught as a ChessError."""

from src.core.shared_types import MoveError


class ChessError(Exception):
    """Base class for everything the application raises on purpose."""


class IllegalMoveError(ChessError):
    """A move request was rejected. The board is left untouched."""

    def __init__(self, error: MoveError) -> None:
        super().__init__(f"Move not allowed: {error}")
        self.error = error


class InvalidCoordinateError(ChessError):
    pass


class InvalidLayoutError(ChessError):
    pass


class InvalidFENError(ChessError):
    pass


class InvalidRequestError(ChessError):
    """NOTE: must not subclass ValueError, pydantic would wrap it in a ValidationError."""


class RepositoryError(ChessError):
    pass
