"""Lightweight logging setup for the TUI and library debugging."""

import logging
import sys
from typing import Optional, TextIO, Union


def resolve_level(level: Union[int, str]) -> int:
    """Turn ``"debug"``/``"INFO"``/``10`` into a logging level number."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"unknown log level {level!r}")
    return value


def configure_logging(
    level: Union[int, str] = logging.INFO,
    stream: Optional[TextIO] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    # Configure root logger once; keep output simple for terminals.
    # Records go to ``handler`` if given, else to ``stream`` (stdout by default).
    if handler is None:
        handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    logging.basicConfig(
        level=resolve_level(level),
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[handler],
    )
