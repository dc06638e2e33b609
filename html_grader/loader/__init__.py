# File: html_grader/loader/__init__.py
"""html_grader.loader: obtaining the raw HTML from a local file or a URL."""

from __future__ import annotations

import asyncio

from html_grader.config import GraderConfig
from html_grader.loader.fetcher import fetch_url
from html_grader.loader.models import Document
from html_grader.loader.reader import read_document


def load_document(config: GraderConfig) -> Document:
    """Read ``config.file`` or fetch ``config.url``, whichever is set."""
    if config.file is not None:
        return read_document(config.file)
    return asyncio.run(
        fetch_url(config.url, timeout=config.timeout, user_agent=config.user_agent)
    )


__all__ = ["Document", "fetch_url", "load_document", "read_document"]
