# File: html_grader/report/__init__.py
"""html_grader.report: serialization of the check results used by the CLI and tests."""

from html_grader.report.json_report import format_report, render_json

__all__ = ["format_report", "render_json"]
