# File: html_grader/errors.py
"""Exception hierarchy shared by the loaders, the config layer and the CLI."""

from __future__ import annotations

import errno
import os
from pathlib import Path
from typing import Union

__all__ = [
    "GraderError",
    "MissingFileError",
    "MalformedChecksError",
    "FetchError",
    "DocumentReadError",
    "SourceSelectionError",
]


class GraderError(Exception):
    """Base class for every error raised by html_grader."""


class MissingFileError(GraderError, FileNotFoundError):
    """A checks file or an HTML file does not exist."""

    def __init__(self, path: Union[str, Path]) -> None:
        super().__init__(errno.ENOENT, os.strerror(errno.ENOENT), str(path))

    def __str__(self) -> str:
        return f"{self.filename} does not exist. Exiting."


class MalformedChecksError(GraderError, ValueError):
    """The checks file is not valid JSON."""


class FetchError(GraderError):
    """Retrieving a document over HTTP failed."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(message)
        self.url = url
        self.message = message


class DocumentReadError(GraderError):
    """A local HTML file exists but cannot be read."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(message)
        self.path = path
        self.message = message


class SourceSelectionError(GraderError):
    """Neither or both of the file and URL sources were given."""
