# File: html_grader/utils.py
"""html_grader.utils: small path helpers shared by the loaders and the CLI."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence, Union

from html_grader.errors import MissingFileError
from html_grader.logger import logger

__all__: Sequence[str] = ("assert_file_exists",)


def assert_file_exists(path: Union[str, Path]) -> Path:
    """Раскрывает `~`, проверяет существование и возвращает Path."""
    p = Path(path).expanduser()
    if not p.exists():
        logger.debug("Path not found: %s", p)
        raise MissingFileError(path)
    return p
