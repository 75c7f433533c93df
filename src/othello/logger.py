"""
Logging utilities for the Othello rules engine.
"""
import logging
from typing import Optional

from .config import Config

LOGGER_NAME = "othello"


def setup_logger(config: Optional[Config] = None) -> logging.Logger:
    """
    Configure and return the package logger.

    Args:
        config: Configuration object (default: get_default_config())

    Returns:
        The "othello" logger with a console handler and, when
        config.logging.log_file is set, a file handler.
    """
    if config is None:
        config = Config()
    level = getattr(logging, config.logging.log_level.upper(), None)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {config.logging.log_level!r}")

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Remove handlers from an earlier call to prevent duplicate logging
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(config.logging.log_format)

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(formatter)
    logger.addHandler(console)

    if config.logging.log_file:
        file_handler = logging.FileHandler(config.logging.log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
