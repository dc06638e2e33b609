# File: tests/test_checks.py
import json

import pytest

from html_grader.checks import load_checks
from html_grader.errors import MalformedChecksError, MissingFileError


def test_load_checks_sorted(checks_file):
    assert load_checks(checks_file) == ["a", "h1", "nonexistent-tag-xyz"]


def test_load_checks_keeps_duplicates(tmp_path):
    path = tmp_path / "dup.json"
    path.write_text(json.dumps(["p", "a", "p"]), encoding="utf-8")
    assert load_checks(path) == ["a", "p", "p"]


def test_load_checks_missing_file(tmp_path):
    missing = tmp_path / "missing.json"
    with pytest.raises(MissingFileError) as exc_info:
        load_checks(missing)
    assert str(exc_info.value) == f"{missing} does not exist. Exiting."
    assert isinstance(exc_info.value, FileNotFoundError)


@pytest.mark.parametrize("content", ["", "[\"h1\",", "not json"])
def test_load_checks_malformed(tmp_path, content):
    path = tmp_path / "bad.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(MalformedChecksError) as exc_info:
        load_checks(path)
    assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)
    assert isinstance(exc_info.value, ValueError)
