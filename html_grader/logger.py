# File: html_grader/logger.py
"""Logging for the html-grader command.

Stdout belongs to the JSON report, so console records are written to
stderr.  The CLI calls :func:`init_logging` once per run with its
``--log-level``, ``--log-file`` and ``--log-format`` options; library
code only imports :data:`logger`.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Optional, Union

DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOGGER_NAME: Final[str] = "HtmlGrader"

# rotation of the optional --log-file
_MAX_BYTES: Final[int] = 5 * 1024 * 1024
_BACKUPS: Final[int] = 3


def _make_handlers(log_file: Optional[Union[str, Path]], fmt: str) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        handlers.append(
            RotatingFileHandler(
                filename=str(log_file),
                maxBytes=_MAX_BYTES,
                backupCount=_BACKUPS,
                encoding="utf-8",
            )
        )
    formatter = logging.Formatter(fmt)
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def configure(
    level: Union[int, str] = "WARNING",
    log_file: Optional[Union[str, Path]] = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Install fresh handlers on the ``HtmlGrader`` logger.

    Handlers from a previous call are closed first, so a rotated log file
    is never held open twice and stderr is re-read on every call.
    """
    lg = logging.getLogger(LOGGER_NAME)
    for handler in list(lg.handlers):
        lg.removeHandler(handler)
        handler.close()
    for handler in _make_handlers(log_file, log_format):
        lg.addHandler(handler)
    lg.setLevel(level)
    lg.propagate = False
    return lg


init_logging = configure

logger: logging.Logger = configure()

__all__ = ["DEFAULT_FORMAT", "LOGGER_NAME", "configure", "init_logging", "logger"]
