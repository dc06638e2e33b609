# File: html_grader/checks.py
"""Loading of the check list: a JSON array of CSS selectors."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Union

from html_grader.errors import MalformedChecksError
from html_grader.logger import logger
from html_grader.utils import assert_file_exists

__all__ = ["load_checks"]


def load_checks(path: Union[str, Path]) -> List[str]:
    """Read the checks file and return its selectors sorted lexicographically.

    Only JSON syntax is validated; the decoded array is used as-is.
    Raises MissingFileError if the file is absent and MalformedChecksError
    if it is not valid JSON.
    """
    p = assert_file_exists(path)
    try:
        checks = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise MalformedChecksError(f"Invalid JSON in {p}: {exc}") from exc
    checks = sorted(checks)
    logger.debug("Loaded %d checks from %s", len(checks), p)
    return checks
