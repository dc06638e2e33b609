# File: html_grader/loader/reader.py
"""
Reader for HTML documents stored on the local filesystem.
"""
from __future__ import annotations

from pathlib import Path
from typing import Union

from html_grader.errors import DocumentReadError
from html_grader.loader.models import Document
from html_grader.logger import logger
from html_grader.utils import assert_file_exists


def read_document(path: Union[str, Path]) -> Document:
    """
    Read the whole file as bytes.

    Raises MissingFileError if it is absent and DocumentReadError if it
    cannot be read (a directory, no permission, ...).
    """
    p = assert_file_exists(path)
    try:
        content = p.read_bytes()
    except OSError as exc:
        logger.debug("Cannot read %s: %s", p, exc)
        raise DocumentReadError(str(path), f"{exc.strerror or exc}: '{p}'") from exc
    logger.debug("Read %d bytes from %s", len(content), p)
    return Document(str(path), content)
