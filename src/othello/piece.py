"""
Disc colors and the occupant of a single board cell.
"""
from enum import Enum
from typing import Union


class Color(Enum):
    BLACK = "black"
    WHITE = "white"

    @property
    def opposite(self) -> 'Color':
        return Color.WHITE if self is Color.BLACK else Color.BLACK

    @classmethod
    def coerce(cls, color: Union['Color', str]) -> 'Color':
        """Accept a Color or its string value; anything else raises ValueError."""
        if isinstance(color, cls):
            return color
        try:
            return cls(color)
        except ValueError:
            raise ValueError(f"Invalid color: {color!r}") from None


class _Empty:
    """Sentinel occupant of an empty cell."""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "EMPTY"

    def render(self) -> str:
        return "."


EMPTY = _Empty()


class Piece:
    """A disc on the board. Its color can only change by flipping."""

    SYMBOLS = {Color.BLACK: 'B', Color.WHITE: 'W'}

    def __init__(self, color: Union[Color, str]):
        self.color = Color.coerce(color)

    def flip(self) -> None:
        """Toggle the disc to the opposite color."""
        self.color = self.color.opposite

    def render(self) -> str:
        return self.SYMBOLS[self.color]

    def copy(self) -> 'Piece':
        return Piece(self.color)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Piece({self.color.value!r})"
