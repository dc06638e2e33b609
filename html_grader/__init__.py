# File: html_grader/__init__.py
"""
HtmlGrader package initializer.
Defines package version and exposes the file-checking helper.
The CLI lives in :mod:`html_grader.cli`.
"""
__version__ = "0.1.0"

from html_grader.engine import check_html_file

__all__ = ["__version__", "check_html_file"]
