"""Structured logging configuration."""

import logging
import sys

HANDLER_NAME = "puredpx"


def setup_logging(level: int = logging.INFO) -> None:
    """Configure structured logging for the command-line tool."""
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Repeated calls in one process only adjust the level
    if any(h.get_name() == HANDLER_NAME for h in root_logger.handlers):
        return

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    # Numba logs compilation details at DEBUG
    logging.getLogger("numba").setLevel(logging.WARNING)
