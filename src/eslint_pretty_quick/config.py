"""Wizard options and answers-file loading."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .models import ProjectType

MINIMUM_NODE_VERSION = "14.0.0"
DEFAULT_ESLINT_CONFIG = ".eslintrc.json"


class SetupError(Exception):
    """Base class for errors that abort the wizard."""


class ConfigError(SetupError):
    """Raised when an answers file is invalid."""


def _normalize_project_type(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip().lower()
    return value


class SetupOptions(BaseModel):
    """Validated choices driving every generation step."""

    model_config = ConfigDict(frozen=True)

    project_type: ProjectType
    use_typescript: bool = False
    use_husky: bool = False
    use_strict: bool = False
    use_prettier: bool = True

    @field_validator("project_type", mode="before")
    @classmethod
    def normalize_project_type(cls, value: Any) -> Any:
        return _normalize_project_type(value)


class SetupAnswers(BaseModel):
    """Pre-recorded answers; unset fields are prompted for."""

    project_type: Optional[ProjectType] = Field(default=None, description="Project ecosystem")
    use_typescript: Optional[bool] = None
    use_husky: Optional[bool] = None
    use_strict: Optional[bool] = None
    use_prettier: Optional[bool] = None

    @field_validator("project_type", mode="before")
    @classmethod
    def normalize_project_type(cls, value: Any) -> Any:
        return _normalize_project_type(value)

    def missing(self) -> list[str]:
        return [name for name, value in self if value is None]


def load_answers(path: Path) -> SetupAnswers:
    """Load an answers file from YAML."""

    try:
        data = yaml.safe_load(path.read_text())
    except FileNotFoundError as exc:
        raise ConfigError(f"Answers file not found: {path}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse YAML: {exc}") from exc

    try:
        return SetupAnswers.model_validate(data or {})
    except ValidationError as exc:
        raise ConfigError(f"Invalid answers file: {exc}") from exc


def save_answers(answers: SetupAnswers, path: Path) -> None:
    """Persist answers to disk as YAML."""

    rendered = answers.model_dump(mode="json")
    path.write_text(yaml.safe_dump(rendered, sort_keys=False))


__all__ = [
    "ConfigError",
    "DEFAULT_ESLINT_CONFIG",
    "MINIMUM_NODE_VERSION",
    "SetupAnswers",
    "SetupError",
    "SetupOptions",
    "load_answers",
    "save_answers",
]
