"""Logging setup for zonetree."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

__all__ = ["get_logger", "setup_logging"]

ROOT_LOGGER = "zonetree"


def setup_logging(level: int | str = logging.INFO, stream: TextIO = sys.stderr) -> None:
    """Configure basic logging.

    Args:
        level: Logging level (number or name such as "DEBUG").
        stream: Output stream.
    """
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=stream,
    )


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger in the zonetree namespace.

    Args:
        name: Module name; names outside the package are nested under it.

    Returns:
        Logger instance.
    """
    if not name:
        return logging.getLogger(ROOT_LOGGER)
    if name == ROOT_LOGGER or name.startswith(f"{ROOT_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
