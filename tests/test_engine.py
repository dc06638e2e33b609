# File: tests/test_engine.py
import json

import pytest

import html_grader
from html_grader.config import GraderConfig
from html_grader.engine import check_document, check_html_file, run_check
from html_grader.errors import MalformedChecksError, MissingFileError

EXPECTED = {"a": False, "h1": True, "nonexistent-tag-xyz": False}


def test_check_html_file(html_file, checks_file):
    result = check_html_file(html_file, checks_file)
    assert result == EXPECTED
    assert list(result) == sorted(EXPECTED)


def test_check_html_file_default_checks(html_file, checks_file, monkeypatch):
    monkeypatch.chdir(checks_file.parent)
    assert check_html_file(html_file) == EXPECTED


def test_check_html_file_exported():
    assert html_grader.check_html_file is check_html_file


def test_check_document(sample_document, checks_file):
    assert check_document(sample_document, checks_file) == EXPECTED


def test_run_check_from_file(html_file, checks_file):
    cfg = GraderConfig(checks=checks_file, file=html_file)
    assert run_check(cfg) == EXPECTED


def test_run_check_is_idempotent(html_file, checks_file):
    cfg = GraderConfig(checks=checks_file, file=html_file)
    assert json.dumps(run_check(cfg)) == json.dumps(run_check(cfg))


def test_run_check_missing_html(tmp_path, checks_file):
    cfg = GraderConfig(checks=checks_file, file=tmp_path / "absent.html")
    with pytest.raises(MissingFileError):
        run_check(cfg)


def test_run_check_malformed_checks(tmp_path, html_file):
    bad = tmp_path / "bad.json"
    bad.write_text("[", encoding="utf-8")
    with pytest.raises(MalformedChecksError):
        run_check(GraderConfig(checks=bad, file=html_file))
