"""Utility functions."""

import logging
from typing import Optional, Union

from statespace.config import get_parameter


def setup_logging(level: Optional[Union[int, str]] = None,
                  format_string: Optional[str] = None) -> None:
    """Setup logging configuration.

    Args:
        level: Logging level, as a number or a level name such as "DEBUG".
            Defaults to ``logging.level`` from the loaded configuration.
        format_string: Custom format string
    """
    if level is None:
        level = get_parameter('logging.level', 'INFO')
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown logging level: {level}")

    if format_string is None:
        if level <= logging.DEBUG:
            format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_string = "%(levelname)s: %(message)s"

    logging.basicConfig(
        level=level,
        format=format_string,
        datefmt="%Y-%m-%d %H:%M:%S"
    )
