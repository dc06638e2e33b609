# File: html_grader/report/json_report.py

"""
Генерация JSON-отчёта для проекта HtmlGrader.

Отчёт печатается в stdout; файлы не создаются.
"""
import json
from typing import IO, Mapping, Optional

import click


def format_report(results: Mapping[str, bool]) -> str:
    """
    Serialize the result map with a two-space indent, keys in insertion order.

    Пример:
    ```python
    >>> print(format_report({"a": False, "h1": True}))
    {
      "a": false,
      "h1": true
    }
    ```
    """
    return json.dumps(dict(results), ensure_ascii=False, indent=2)


def render_json(results: Mapping[str, bool], file: Optional[IO[str]] = None) -> None:
    """Write the report followed by a newline to *file* (stdout by default)."""
    click.echo(format_report(results), file=file)
