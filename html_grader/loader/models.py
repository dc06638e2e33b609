# File: html_grader/loader/models.py
"""
Data models for the document loaders.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Document:
    """Raw HTML bytes together with the file path or URL they came from."""

    source: str
    content: bytes
