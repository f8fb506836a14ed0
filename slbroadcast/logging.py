"""Logging configuration for the slbroadcast package."""
import logging
import sys

from .config import Config

def setup_logger(name: str = "slbroadcast", level: int = None) -> logging.Logger:
    """
    Set up a logger with the specified name and log level.

    Args:
        name: The name of the logger
        level: The logging level (default: Config.LOG_LEVEL)

    Returns:
        Configured logger instance
    """
    if level is None:
        level = logging.getLevelName(Config.LOG_LEVEL)
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Don't add handlers if they're already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            Config.LOG_FORMAT,
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
