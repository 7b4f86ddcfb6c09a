"""Logger hierarchy shared by the engine, the CLI and the service."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

_ROOT = "doxycomplete"
_CONSOLE_FORMAT = "[doxycomplete] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(component: str | None = None) -> logging.Logger:
    """Return the logger for ``component`` (e.g. ``parser``) under ``doxycomplete``."""
    return logging.getLogger(f"{_ROOT}.{component}" if component else _ROOT)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Route doxycomplete records to stderr and, optionally, to ``log_file``.

    Generated comments are written to stdout, so console logging always
    goes to stderr.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_ROOT)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is not None:
        sink = logging.FileHandler(log_file, encoding="utf-8")
        sink.setLevel(logging.DEBUG)
        sink.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(sink)
        if not verbose:
            logger.setLevel(logging.DEBUG)
            console.setLevel(logging.INFO)

    return logger


__all__ = ["configure_logging", "get_logger"]
