"""Requests and Response models"""

from string import ascii_lowercase
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color


# --- REQUEST MODELS ---
class CreateBoardRequest(BaseModel):
    player: Color = Color.WHITE
    placement: Optional[str] = None

    @field_validator("placement")
    @classmethod
    def validate_placement(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value

        value = value.strip()
        if " " in value:
            raise InvalidRequestError(
                "Only the piece placement (first part of a FEN string) is expected."
            )
        if len(value.split("/")) != 8:
            raise InvalidRequestError("Piece placement must contain 8 ranks.")
        return value


class GetBoardRequest(BaseModel):
    board_id: UUID


class DeleteBoardRequest(BaseModel):
    board_id: UUID


class MoveRequest(BaseModel):
    board_id: UUID
    from_square: str
    to_square: str

    @field_validator(*["from_square", "to_square"])
    @classmethod
    def validate_square(cls, value: str) -> str:
        def _is_algebraic_notation(value: str) -> bool:
            # NOTE: only the notation is checked here. Whether the square lies on the board is up to the Board.
            if len(value) < 2:
                return False

            first_character = value[0]
            remaining_characters = value[1:]
            if first_character not in ascii_lowercase:
                return False
            # str.isdigit() alone would also accept "²"
            if not (remaining_characters.isascii() and remaining_characters.isdigit()):
                return False
            return True

        if not _is_algebraic_notation(value):
            raise InvalidRequestError(
                f"Cannot interpret {value!r} as a valid square name."
            )
        return value


# --- RESPONSE MODELS ---
class BoardResponse(BaseModel):
    board_id: UUID
    player: Color
    placement: str
    move_history: list[str]
