"""Whose turn is it next"""

from src.core.shared_types import Color


def next_player(player: Color) -> Color:
    """White and Black simply take turns. The board calls this once for every move it accepts."""
    return Color.WHITE if player == Color.BLACK else Color.BLACK
