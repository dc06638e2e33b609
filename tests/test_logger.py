# File: tests/test_logger.py
import logging
from logging.handlers import RotatingFileHandler

from html_grader.logger import LOGGER_NAME, configure


def test_configure_console_only():
    lg = configure(level="INFO")
    assert lg.name == LOGGER_NAME
    assert lg.level == logging.INFO
    assert len(lg.handlers) == 1
    assert not lg.propagate


def test_configure_with_file(tmp_path):
    log_file = tmp_path / "grader.log"
    lg = configure(level="DEBUG", log_file=log_file, log_format="%(levelname)s %(message)s")
    assert any(isinstance(h, RotatingFileHandler) for h in lg.handlers)
    lg.debug("hello %s", "file")
    assert log_file.read_text(encoding="utf-8").strip() == "DEBUG hello file"


def test_configure_replaces_handlers(tmp_path):
    configure(log_file=tmp_path / "a.log")
    lg = configure()
    assert len(lg.handlers) == 1
    assert lg.level == logging.WARNING
