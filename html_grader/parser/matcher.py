# File: html_grader/parser/matcher.py
"""Selector matching for HtmlGrader.

Parsing and selector evaluation are delegated to BeautifulSoup (its
``select_one`` is backed by soupsieve).  This module only decides *what*
is asked of the tree:

* the document is parsed once per call to :func:`check_html`;
* every selector is evaluated against that same tree, in the order given;
* the answer for a selector is "does it select at least one element".

A selector soupsieve cannot parse raises
:class:`soupsieve.SelectorSyntaxError`; it is not caught here.
"""
from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Union

from bs4 import BeautifulSoup

from html_grader.logger import logger

__all__: Sequence[str] = ("check_html", "parse_document")

Markup = Union[str, bytes]


def parse_document(content: Markup) -> BeautifulSoup:
    """Parse raw HTML (bytes or text) into a queryable tree."""
    return BeautifulSoup(content, "html.parser")


def check_html(content: Markup, checks: Iterable[str]) -> dict[str, bool]:
    """Return ``{selector: present}`` for every selector in *checks*.

    Keys are inserted in the order of *checks*; a duplicated selector
    keeps a single key.
    """
    soup = parse_document(content)
    results: dict[str, bool] = {}
    for selector in checks:
        results[selector] = soup.select_one(selector) is not None
    logger.debug(
        "Matched %d/%d selectors", sum(results.values()), len(results)
    )
    return results
