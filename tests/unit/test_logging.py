"""Tests for logging setup."""

import logging
from pathlib import Path

from rich.logging import RichHandler

from portfolio_content.utils.logging import ROOT_LOGGER, get_logger, setup_logging


def test_get_logger_names():
    assert get_logger("portfolio_content.content.repository").name == (
        "portfolio_content.content.repository"
    )
    assert get_logger("cli").name == "portfolio_content.cli"
    assert get_logger(ROOT_LOGGER).name == ROOT_LOGGER


def test_verbosity_levels():
    assert setup_logging(verbosity=0).level == logging.WARNING
    assert setup_logging(verbosity=1).level == logging.INFO
    assert setup_logging(verbosity=2).level == logging.DEBUG


def test_repeated_setup_replaces_handlers(tmp_path: Path):
    setup_logging(verbosity=1, log_file=tmp_path / "a.log")
    logger = setup_logging(verbosity=1)

    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], RichHandler)


def test_log_file_receives_debug(tmp_path: Path):
    log_file = tmp_path / "nested" / "run.log"
    logger = setup_logging(verbosity=0, log_file=log_file)

    get_logger("content.repository").debug("reading projects")
    for handler in logger.handlers:
        handler.flush()

    assert logger.level == logging.DEBUG
    assert "reading projects" in log_file.read_text(encoding="utf-8")

    setup_logging(verbosity=0)
