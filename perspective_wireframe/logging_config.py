#
# PROJECT: perspective-wireframe
# MODULE: perspective_wireframe/logging_config.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 11
# LOG_REF: 2026-10-19
#

"""
Logging Configuration
Sets up the package logger for the renderer and the demo.
"""
import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "perspective_wireframe"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None,
                  console: bool = True, stream=None) -> logging.Logger:
    """
    Configures the logger for the 'perspective_wireframe' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
        console: Add a console handler.  Turned off while curses owns the terminal.
        stream: Console stream, stdout by default.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Replace handlers from an earlier call; close them so log files are released
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    if console:
        console_handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    logger.debug("Logging initialized.")
    return logger
