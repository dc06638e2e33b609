# File: html_grader/config.py
"""
Configuration of a single grading run.

Pydantic describes the run (checks file, document source, HTTP settings);
an optional YAML or JSON settings file can provide defaults for the CLI.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from html_grader import __version__
from html_grader.errors import MissingFileError, SourceSelectionError

DEFAULT_CHECKS = Path("checks.json")
DEFAULT_USER_AGENT = f"HtmlGrader/{__version__}"


class GraderConfig(BaseModel):
    """Параметры одного запуска проверки."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    checks: Path = Field(DEFAULT_CHECKS, description="JSON file with the list of selectors.")
    file: Optional[Path] = Field(None, description="Local HTML document.")
    url: Optional[str] = Field(None, description="Remote HTML document fetched with GET.")
    timeout: Optional[float] = Field(None, gt=0, description="Total HTTP timeout (seconds); None waits forever.")
    user_agent: str = Field(DEFAULT_USER_AGENT, min_length=1, description="User-Agent header.")

    @field_validator("url", mode="before")
    def _strip_url(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip() or None
        return v

    @model_validator(mode="after")
    def _check_single_source(self) -> GraderConfig:
        if self.file is None and self.url is None:
            raise SourceSelectionError("Must specify either --file or --url!")
        if self.file is not None and self.url is not None:
            raise SourceSelectionError("Specify only one of --file or --url!")
        return self


class GraderSettings(BaseModel):
    """Defaults read from a settings file; every key is optional."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    checks: Optional[Path] = None
    timeout: Optional[float] = Field(None, gt=0)
    user_agent: Optional[str] = Field(None, min_length=1)


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def load_settings(path: Union[str, Path]) -> GraderSettings:
    """
    Читает YAML или JSON и возвращает проверенный объект GraderSettings.
    При отсутствии файла бросает MissingFileError.
    """
    path_obj = Path(path).expanduser()
    if not path_obj.is_file():
        raise MissingFileError(path_obj)

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Unsupported settings format: {suffix}")

    return GraderSettings(**data)
