"""Where boards are kept in between requests. The service only knows this protocol."""

from typing import Protocol
from uuid import UUID

from src.core.models import BoardModel


class BoardRepository(Protocol):
    """Boards are stored as BoardModel, under the ID handed out by `add`."""

    def add(self, board: BoardModel) -> UUID: ...

    def get(self, board_id: UUID) -> BoardModel | None: ...

    def save(self, board_id: UUID, board: BoardModel) -> bool:
        """Overwrite a stored board. False if there is nothing stored under this ID."""
        ...

    def remove(self, board_id: UUID) -> bool:
        """False if there is nothing stored under this ID."""
        ...
