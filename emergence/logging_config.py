"""Console and optional file logging for the animation."""
import logging
import sys
from typing import Optional


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Attach handlers to the ``emergence`` logger; every module logger under it
    (graph, simulation, scheduler) reports through them.

    Args:
        level: Threshold applied to the logger and its handlers.
        log_file: When given, the same records are also written there,
            truncating any previous run.
    """
    logger = logging.getLogger("emergence")
    logger.setLevel(level)

    # calling twice must not double every line
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug(f"Logging at level {logging.getLevelName(level)}.")
