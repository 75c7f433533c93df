"""
Errors raised by the Othello board.
"""


class OthelloError(Exception):
    """Base class for board errors."""


class InvalidPosition(OthelloError, IndexError):
    """Raised when a position falls outside the 8x8 grid."""

    def __init__(self, pos):
        self.pos = pos
        super().__init__(f"Invalid position: {pos!r}")


class InvalidMove(OthelloError, ValueError):
    """Raised when a placement is occupied or captures nothing."""

    def __init__(self, pos, color):
        self.pos = pos
        self.color = color
        super().__init__(f"Invalid move: {color.value} at {pos!r}")
