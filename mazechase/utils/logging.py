"""Logging setup for the CLI and the API server."""

from __future__ import annotations

import logging
import sys

# The renderer polls /frame every few milliseconds; its access log is noise.
NOISY_LOGGERS: tuple[str, ...] = ("uvicorn.access",)


def setup_logging(level: str = "INFO", quiet: tuple[str, ...] = NOISY_LOGGERS) -> logging.Handler:
    """Send all records at *level* and above to stdout with one shared format.

    Loggers listed in *quiet* are capped at WARNING regardless of *level*.
    Returns the installed handler.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s [%(levelname)-5s] %(name)-25s | %(message)s",
        datefmt="%H:%M:%S",
    ))

    root = logging.getLogger()
    root.setLevel(numeric_level)
    root.handlers.clear()
    root.addHandler(handler)

    for name in quiet:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))
    return handler
