"""
Board module for Othello.
Handles the board state, move validation and disc flipping.
"""
import logging
from typing import List, Tuple, Optional, Union

import numpy as np

from .config import Config, CAPTURE_FIRST, CAPTURE_POLICIES
from .errors import InvalidPosition, InvalidMove
from .logger import LOGGER_NAME
from .piece import Color, Piece, EMPTY

logger = logging.getLogger(f"{LOGGER_NAME}.board")

Position = Tuple[int, int]
Cell = Union[Piece, type(EMPTY)]


def _make_grid(size: int) -> List[List[Cell]]:
    """
    Returns an empty size x size grid with black discs at (3, 4) and (4, 3)
    and white discs at (3, 3) and (4, 4).
    """
    grid = [[EMPTY for _ in range(size)] for _ in range(size)]
    grid[3][4] = Piece(Color.BLACK)
    grid[4][3] = Piece(Color.BLACK)
    grid[3][3] = Piece(Color.WHITE)
    grid[4][4] = Piece(Color.WHITE)
    return grid


class Board:
    """
    Represents the Othello board as an 8x8 grid of cells.

    Each cell holds either EMPTY or a Piece. The grid is only mutated by
    place_piece, which places one disc and flips every captured disc.
    """

    # Board dimensions
    SIZE = 8

    # Directions as (d_row, d_col): E, SE, S, SW, W, NW, N, NE
    DIRS = (
        (0, 1), (1, 1), (1, 0),
        (1, -1), (0, -1), (-1, -1),
        (-1, 0), (-1, 1),
    )

    # Values used by get_board_state
    EMPTY_VALUE = 0
    BLACK_VALUE = 1
    WHITE_VALUE = 2

    def __init__(self, config: Optional[Config] = None):
        """Initialize a new board with the four center discs preset."""
        if config is None:
            config = Config()
        if config.rules.board_size != self.SIZE:
            raise ValueError("Only 8x8 board is supported")
        if config.rules.capture_policy not in CAPTURE_POLICIES:
            raise ValueError(
                f"Unknown capture policy {config.rules.capture_policy!r}, "
                f"expected one of {CAPTURE_POLICIES}"
            )

        self.config = config
        self.capture_policy = config.rules.capture_policy
        self._grid = _make_grid(self.SIZE)

    @classmethod
    def from_string(cls, text: str, config: Optional[Config] = None) -> 'Board':
        """
        Build a board from 8 rows of 'B', 'W' and '.' characters.
        Whitespace inside and around rows is ignored.
        """
        rows = ["".join(line.split()) for line in text.strip().splitlines()]
        rows = [row for row in rows if row]
        if len(rows) != cls.SIZE or any(len(row) != cls.SIZE for row in rows):
            raise ValueError(f"Expected {cls.SIZE} rows of {cls.SIZE} cells")

        board = cls(config)
        symbols = {'B': Color.BLACK, 'W': Color.WHITE}
        for i, row in enumerate(rows):
            for j, char in enumerate(row):
                if char == '.':
                    board._grid[i][j] = EMPTY
                elif char in symbols:
                    board._grid[i][j] = Piece(symbols[char])
                else:
                    raise ValueError(f"Unknown cell {char!r} at {(i, j)}")
        return board

    def copy(self) -> 'Board':
        """Create a deep copy of the board."""
        new_board = type(self)(self.config)
        new_board._grid = [
            [cell if cell is EMPTY else cell.copy() for cell in row]
            for row in self._grid
        ]
        return new_board

    def is_valid_pos(self, pos) -> bool:
        """Check if a position is a (row, col) pair of integers on the board."""
        try:
            row, col = pos
        except (TypeError, ValueError):
            return False
        for value in (row, col):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                return False
            if not 0 <= value < self.SIZE:
                return False
        return True

    def get_piece(self, pos) -> Cell:
        """
        Returns the piece at a given (row, col) position, or EMPTY.

        Raises:
            InvalidPosition: if the position is not on the board
        """
        if not self.is_valid_pos(pos):
            raise InvalidPosition(pos)
        row, col = pos
        return self._grid[row][col]

    def is_occupied(self, pos) -> bool:
        """Check if a given position has a piece on it."""
        return self.get_piece(pos) is not EMPTY

    def is_mine(self, pos, color: Union[Color, str]) -> bool:
        """Check if the piece at a given position matches a given color."""
        piece = self.get_piece(pos)
        return piece is not EMPTY and piece.color is Color.coerce(color)

    def positions_to_flip(self, pos, color: Union[Color, str],
                          direction: Tuple[int, int]) -> Optional[List[Position]]:
        """
        Follow a direction away from pos, collecting discs of the opposite
        color until a disc of the given color closes the run. Discs of the
        given color met before anything is collected are stepped over.

        Returns:
            The captured positions from nearest to farthest, or None if the
            run reaches the edge of the board or hits an empty cell.

        Raises:
            InvalidPosition: if pos is not on the board
        """
        if not self.is_valid_pos(pos):
            raise InvalidPosition(pos)
        color = Color.coerce(color)
        d_row, d_col = direction
        row, col = pos
        captured: List[Position] = []

        for _ in range(self.SIZE - 1):
            row += d_row
            col += d_col
            new_pos = (row, col)
            if not self.is_valid_pos(new_pos):
                return None

            piece = self.get_piece(new_pos)
            if piece is EMPTY:
                return None
            if piece.color is color:
                if captured:
                    return captured
                continue
            captured.append(new_pos)

        return None

    def valid_move(self, pos, color: Union[Color, str]) -> Union[List[Position], bool]:
        """
        Check that a position is free and that placing a disc of the given
        color there captures at least one opposing disc.

        Returns:
            The list of positions to flip, or False if the move is invalid.
            Under the "first" capture policy only the first capturing
            direction in DIRS order contributes.
        """
        color = Color.coerce(color)
        if self.is_occupied(pos):
            return False

        captures: List[Position] = []
        for direction in self.DIRS:
            run = self.positions_to_flip(pos, color, direction)
            if run is None:
                continue
            if self.capture_policy == CAPTURE_FIRST:
                return run
            captures.extend(run)

        return captures or False

    def place_piece(self, pos, color: Union[Color, str]) -> List[Position]:
        """
        Add a disc of the given color at pos and flip every captured disc.

        Returns:
            The positions that were flipped

        Raises:
            InvalidPosition: if pos is not on the board
            InvalidMove: if pos is occupied or captures nothing
        """
        color = Color.coerce(color)
        captures = self.valid_move(pos, color)
        if not captures:
            logger.debug("Rejected %s move at %s", color.value, pos)
            raise InvalidMove(pos, color)

        row, col = pos
        self._grid[row][col] = Piece(color)
        for captured in captures:
            self.get_piece(captured).flip()

        logger.debug("%s placed at %s, flipped %s", color.value, (row, col), captures)
        return captures

    def valid_moves(self, color: Union[Color, str]) -> List[Position]:
        """All positions where the given color may move, in row-major order."""
        color = Color.coerce(color)
        moves = []
        for row in range(self.SIZE):
            for col in range(self.SIZE):
                if self.valid_move((row, col), color):
                    moves.append((row, col))
        return moves

    def has_move(self, color: Union[Color, str]) -> bool:
        """Check if there are any valid moves for the given color."""
        return len(self.valid_moves(color)) != 0

    def is_over(self) -> bool:
        """Check if both colors are out of moves."""
        return not self.has_move(Color.WHITE) and not self.has_move(Color.BLACK)

    def count(self, color: Union[Color, str]) -> int:
        """Number of discs of the given color on the board."""
        color = Color.coerce(color)
        return sum(
            1 for row in self._grid for cell in row
            if cell is not EMPTY and cell.color is color
        )

    def get_board_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            2D numpy array with 0 for empty, 1 for black and 2 for white
        """
        values = {Color.BLACK: self.BLACK_VALUE, Color.WHITE: self.WHITE_VALUE}
        state = np.full((self.SIZE, self.SIZE), self.EMPTY_VALUE, dtype=int)
        for i, row in enumerate(self._grid):
            for j, cell in enumerate(row):
                if cell is not EMPTY:
                    state[i, j] = values[cell.color]
        return state

    def render(self) -> str:
        """Return the grid as text with row and column numbers."""
        lines = [" | ".join([" "] + [str(i) for i in range(self.SIZE)]) + " |"]
        for i, row in enumerate(self._grid):
            cells = [" " if cell is EMPTY else cell.render() for cell in row]
            lines.append(" | ".join([str(i)] + cells) + " |")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()
