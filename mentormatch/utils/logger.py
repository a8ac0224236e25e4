"""Logging configuration"""
import logging
from typing import Union
from rich.logging import RichHandler

from .config import config


def setup_logger(name: str = "mentormatch", level: Union[int, str] = logging.INFO) -> logging.Logger:
    """Setup logger with rich formatting"""
    logger = logging.getLogger(name)
    logger.setLevel(level.upper() if isinstance(level, str) else level)

    if not logger.handlers:
        handler = RichHandler(rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    return logger

# Global logger instance
logger = setup_logger(level=config.log_level)
