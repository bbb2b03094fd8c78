#
# PROJECT: wireframe-ppm
# MODULE: wireframe_ppm/logging_config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
import sys


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """
    Configures the 'wireframe_ppm' package logger.

    Logs go to stderr; stdout is reserved for the output filename.
    """
    logger = logging.getLogger("wireframe_ppm")
    logger.setLevel(level)

    # Avoid duplicate handlers when main() runs more than once in a process
    if logger.hasHandlers():
        logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    ))
    logger.addHandler(handler)
    return logger
