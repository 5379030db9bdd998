"""Logging setup for the nbody_sim package."""

import logging
from typing import Optional, Union

DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(
    level: Union[int, str] = "INFO",
    log_file: Optional[str] = None,
    fmt: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Configure the dedicated ``nbody_sim`` logger.

    The root logger is left alone and records do not propagate to it.
    Calling this again replaces the handlers instead of stacking them.

    Args:
        level: Logging level name or number
        log_file: Optional path for an additional file handler
        fmt: Record format

    Returns:
        The configured package logger
    """
    logger = logging.getLogger("nbody_sim")
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    logger.propagate = False

    formatter = logging.Formatter(fmt)

    if logger.hasHandlers():
        logger.handlers.clear()

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
