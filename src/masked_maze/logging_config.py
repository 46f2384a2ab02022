"""
Logging Configuration
Sets up the package logger for command-line runs.
"""
import logging
import sys


def setup_logging(level: int = logging.INFO) -> None:
    """
    Configures the logger for the 'masked_maze' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
    """
    logger = logging.getLogger("masked_maze")
    logger.setLevel(level)

    # Avoid duplicate output when the CLI is invoked more than once in-process
    if logger.hasHandlers():
        logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S"
        )
    )
    logger.addHandler(console_handler)
