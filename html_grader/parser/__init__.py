# File: html_grader/parser/__init__.py
"""html_grader.parser: selector matching against a parsed HTML tree."""

from html_grader.parser.matcher import check_html, parse_document

__all__ = ["check_html", "parse_document"]
