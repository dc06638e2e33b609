# File: tests/conftest.py
import json
from pathlib import Path

import pytest

from html_grader.logger import configure
from html_grader.loader.models import Document

SAMPLE_HTML = "<html><body><h1>t</h1></body></html>"


@pytest.fixture(autouse=True)
def reset_logging():
    """
    CliRunner swaps sys.stderr; rebind the project logger after each test
    so later records do not go to a closed stream.
    """
    yield
    configure()


@pytest.fixture()
def checks_file(tmp_path) -> Path:
    """
    Write an unsorted checks file and return its path.
    """
    path = tmp_path / "checks.json"
    path.write_text(json.dumps(["h1", "a", "nonexistent-tag-xyz"]), encoding="utf-8")
    return path


@pytest.fixture()
def html_file(tmp_path) -> Path:
    """
    Write a minimal HTML page with a single heading.
    """
    path = tmp_path / "index.html"
    path.write_text(SAMPLE_HTML, encoding="utf-8")
    return path


@pytest.fixture()
def sample_document() -> Document:
    """
    Provide a Document as returned by the URL loader.
    """
    return Document(source="http://example.com/", content=SAMPLE_HTML.encode("utf-8"))
