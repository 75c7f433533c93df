"""
Othello rules engine.
This package contains the board state, move validation and capture logic.
"""

from .piece import Color, Piece, EMPTY
from .board import Board
from .errors import OthelloError, InvalidPosition, InvalidMove
from .config import Config, get_default_config
from .logger import setup_logger

__all__ = [
    'Board', 'Color', 'Piece', 'EMPTY',
    'OthelloError', 'InvalidPosition', 'InvalidMove',
    'Config', 'get_default_config', 'setup_logger',
]
