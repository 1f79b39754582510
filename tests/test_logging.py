"""Tests for llmsgen.logging."""

from __future__ import annotations

import logging
from pathlib import Path

from llmsgen.logging import configure_logging, get_logger


def test_get_logger_nests_under_package() -> None:
    assert get_logger().name == "llmsgen"
    assert get_logger("processor").name == "llmsgen.processor"


def test_configure_logging_is_repeatable_and_writes_file(tmp_path: Path) -> None:
    log_file = tmp_path / "run.log"
    logger = logging.getLogger("llmsgen")
    try:
        configure_logging()
        logger = configure_logging(verbose=True, log_file=log_file)

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2

        get_logger("index").debug("rendered %d entries", 3)
        for handler in logger.handlers:
            handler.flush()

        assert "llmsgen.index: rendered 3 entries" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.propagate = True
        logger.setLevel(logging.NOTSET)
