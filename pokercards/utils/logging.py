"""
Logging utilities for pokercards.

The package logs under the ``"pokercards"`` logger and installs no handlers
on import. Applications call :func:`setup_logging` (or
``get_config().apply_logging()``) to see the output.
"""

import logging
import os
import sys
from typing import Optional


logger = logging.getLogger("pokercards")

formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

_console_handler: Optional[logging.Handler] = None


def setup_logging(log_file: Optional[str] = None, level: int = logging.INFO) -> logging.Logger:
    """
    Set up logging for the pokercards package.

    Calling this more than once changes the level but never adds a second
    console handler or a second handler for the same log file.

    Args:
        log_file (Optional[str], optional): Path to the log file. Defaults to None.
        level (int, optional): Logging level. Defaults to logging.INFO.

    Returns:
        logging.Logger: The configured logger.
    """
    global _console_handler

    logger.setLevel(level)

    if _console_handler is None:
        _console_handler = logging.StreamHandler(sys.stdout)
        _console_handler.setFormatter(formatter)
        logger.addHandler(_console_handler)
    _console_handler.setLevel(level)

    if log_file:
        log_path = os.path.abspath(log_file)
        log_dir = os.path.dirname(log_path)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)

        for handler in logger.handlers:
            if isinstance(handler, logging.FileHandler) and handler.baseFilename == log_path:
                handler.setLevel(level)
                break
        else:
            file_handler = logging.FileHandler(log_path)
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
