"""Unit tests for /src/chessboard/turns.py"""

from src.chessboard.turns import next_player
from src.core.shared_types import Color


def test_players_take_turns() -> None:
    assert next_player(Color.WHITE) == Color.BLACK
    assert next_player(Color.BLACK) == Color.WHITE


def test_two_turns_later_it_is_your_turn_again() -> None:
    for color in Color:
        assert next_player(next_player(color)) == color
