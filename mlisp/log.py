from __future__ import annotations
import logging
import sys
from typing import Optional, TextIO

from mlisp.config import validate_log_level

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

_LEVELS = {
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


def to_logging_level(name: str) -> Optional[int]:
    """Map a verbosity name to a logging level; "none" maps to None."""
    return _LEVELS.get(validate_log_level(name))


def configure_logging(name: str, stream: Optional[TextIO] = None) -> None:
    """Configure the root logger for the given verbosity.

    "none" leaves logging unconfigured, so only errors reach stderr.
    """
    level = to_logging_level(name)
    if level is None:
        return
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        stream=stream or sys.stderr,
    )
