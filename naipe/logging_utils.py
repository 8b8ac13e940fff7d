"""Logging setup for programs built on naipe.

The library only creates loggers; handlers are installed by the program
that drives a game, once, at start-up.
"""

import logging

LOG_FORMAT = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = "WARNING") -> None:
    """Call once at program start (cli/main.py)."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
