"""Persisting generated files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, Optional

import yaml
from loguru import logger

from .config import SetupError

_YAML_SUFFIXES = {".yaml", ".yml"}


class WriterError(SetupError):
    """Raised when a generated file cannot be written."""


def render_document(path: Path, document: Any) -> str:
    if path.suffix in _YAML_SUFFIXES:
        return yaml.safe_dump(document, sort_keys=False)
    return json.dumps(document, indent=2) + "\n"


def write_text(path: Path, content: str, mode: Optional[int] = None) -> Path:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        if mode is not None:
            path.chmod(mode)
    except OSError as exc:
        raise WriterError(f"Unable to write {path}: {exc}") from exc
    logger.info("File created: {}", path)
    return path


def write_document(path: Path, document: Any) -> Path:
    """Write JSON, or YAML when the destination ends in ``.yaml``/``.yml``."""

    return write_text(path, render_document(path, document))


def write_lines(path: Path, lines: Iterable[str]) -> Path:
    return write_text(path, "\n".join(lines) + "\n")


__all__ = ["WriterError", "render_document", "write_document", "write_lines", "write_text"]
