# File: html_grader/engine.py
"""html_grader.engine: orchestration of a grading run for the CLI and library callers."""

from __future__ import annotations

from pathlib import Path
from typing import Union

from html_grader.checks import load_checks
from html_grader.config import DEFAULT_CHECKS, GraderConfig
from html_grader.loader import load_document
from html_grader.loader.models import Document
from html_grader.loader.reader import read_document
from html_grader.logger import logger
from html_grader.parser.matcher import check_html

__all__ = ["check_document", "check_html_file", "run_check"]


def check_document(document: Document, checks_file: Union[str, Path]) -> dict[str, bool]:
    """Grade an already loaded document against the selectors in *checks_file*."""
    checks = load_checks(checks_file)
    logger.info("Checking %s against %d selectors", document.source, len(checks))
    return check_html(document.content, checks)


def run_check(config: GraderConfig) -> dict[str, bool]:
    """Load the document described by *config* and grade it.

    Errors of the loaders (MissingFileError, FetchError) and of the checks
    file (MalformedChecksError) propagate to the caller.
    """
    document = load_document(config)
    return check_document(document, config.checks)


def check_html_file(
    html_file: Union[str, Path], checks_file: Union[str, Path] = DEFAULT_CHECKS
) -> dict[str, bool]:
    """Grade a local HTML file; the result maps each selector to its presence."""
    return check_document(read_document(html_file), checks_file)
