from __future__ import annotations

import logging
from pathlib import Path

from doxycomplete.logging import configure_logging, get_logger


def test_component_loggers_share_the_root() -> None:
    assert get_logger().name == "doxycomplete"
    assert get_logger("parser").name == "doxycomplete.parser"


def test_configure_logging_replaces_handlers() -> None:
    configure_logging()
    logger = configure_logging(verbose=True)

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert logger.propagate is False


def test_log_file_receives_debug_records(tmp_path: Path) -> None:
    log_file = tmp_path / "doxycomplete.log"
    logger = configure_logging(log_file=log_file)

    get_logger("renderer").debug("rendered %d lines", 3)

    assert "DEBUG doxycomplete.renderer: rendered 3 lines" in log_file.read_text(encoding="utf-8")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
