"""Inspection of the target project before anything is written."""

from __future__ import annotations

import json
import os
import re
import subprocess
from fnmatch import fnmatch
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Tuple

import yaml
from loguru import logger

from .config import MINIMUM_NODE_VERSION, SetupError, SetupOptions
from .ignores import build_ignore_list, compile_ignore_spec
from .models import ExistingConfig, ProjectType

ESLINT_CONFIG_CANDIDATES: Tuple[str, ...] = (
    ".eslintrc.js",
    ".eslintrc.cjs",
    ".eslintrc.yaml",
    ".eslintrc.yml",
    ".eslintrc.json",
    ".eslintrc",
)
_SCRIPT_SUFFIXES = {".js", ".cjs"}
_TYPESCRIPT_MARKERS = ("*.d.ts", "*.ts", "*.svelte")
_YAML_SUFFIXES = {".yaml", ".yml"}
# Strings are matched first so comment markers inside them survive.
_JSON_COMMENT = re.compile(r'("(?:\\.|[^"\\])*")|//[^\n]*|/\*.*?\*/', re.S)


class EnvironmentCheckError(SetupError):
    """Raised when the project cannot be set up at all."""


class ExistingConfigError(SetupError):
    """Raised when an existing lint configuration cannot be parsed."""


def parse_version(raw: str) -> Tuple[int, ...]:
    """Turn ``v18.16.0`` into ``(18, 16, 0)``."""

    cleaned = raw.strip().lstrip("v").split("-", 1)[0]
    try:
        return tuple(int(part) for part in cleaned.split("."))
    except ValueError as exc:
        raise EnvironmentCheckError(f"Unrecognised Node.js version: {raw.strip()}") from exc


def detect_node_version() -> str:
    try:
        completed = subprocess.run(
            ["node", "--version"], capture_output=True, text=True, check=True
        )
    except (OSError, subprocess.CalledProcessError) as exc:
        raise EnvironmentCheckError("Node.js is required but could not be run.") from exc
    return completed.stdout.strip()


def check_node_version(minimum: str = MINIMUM_NODE_VERSION) -> str:
    version = detect_node_version()
    if parse_version(version) < parse_version(minimum):
        raise EnvironmentCheckError(
            f"Node.js version {minimum} or higher is required. Current version: {version}"
        )
    logger.debug("Node.js {} satisfies >= {}", version, minimum)
    return version


def check_git_repository(root: Path) -> None:
    if not (root / ".git").is_dir():
        raise EnvironmentCheckError(
            "This directory is not a Git repository. "
            "Please initialize a Git repository before running this tool."
        )


def read_package_json(root: Path) -> Dict[str, Any]:
    path = root / "package.json"
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise EnvironmentCheckError(
            "Unable to read package.json. Make sure you are in the root directory of your project."
        ) from exc
    if not isinstance(data, dict):
        raise EnvironmentCheckError("package.json must contain a JSON object.")
    return data


def check_environment(root: Path) -> Dict[str, Any]:
    """Run every precondition and return the parsed ``package.json``."""

    check_node_version()
    check_git_repository(root)
    return read_package_json(root)


def strip_json_comments(text: str) -> str:
    """Drop ``//`` and ``/* */`` comments, which ESLint allows in JSON configs."""

    return _JSON_COMMENT.sub(lambda match: match.group(1) or "", text)


def load_config_document(path: Path) -> Any:
    """Parse JSON (comments allowed) or YAML, depending on the file name.

    ``.eslintrc`` may hold either format, so JSON is tried before YAML.
    """

    text = path.read_text(encoding="utf-8")
    if path.suffix in _YAML_SUFFIXES:
        return yaml.safe_load(text)
    try:
        return json.loads(strip_json_comments(text)) if text.strip() else None
    except json.JSONDecodeError:
        if path.suffix == ".json":
            raise
    return yaml.safe_load(text)


def find_existing_config(
    root: Path, candidates: Iterable[str] = ESLINT_CONFIG_CANDIDATES
) -> Optional[ExistingConfig]:
    """Return the first lint configuration file found, parsed when possible."""

    for name in candidates:
        path = root / name
        if not path.is_file():
            continue
        if path.suffix in _SCRIPT_SUFFIXES:
            logger.warning("Found {}; JavaScript configurations cannot be merged.", name)
            return ExistingConfig(path=path)
        try:
            data = load_config_document(path)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as exc:
            raise ExistingConfigError(f"Failed to parse {name}: {exc}") from exc
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ExistingConfigError(f"{name} does not contain a configuration object.")
        logger.info("Found existing ESLint configuration: {}", name)
        return ExistingConfig(path=path, document=data)
    return None


def detect_typescript(root: Path, project_type: ProjectType) -> bool:
    """Look for declaration, TypeScript or component files outside build folders."""

    folders = [pattern for pattern in build_ignore_list(project_type) if pattern.endswith("/")]
    spec = compile_ignore_spec(folders)
    for dirpath, dirnames, filenames in os.walk(root):
        base = Path(dirpath).relative_to(root)
        # Ignored folders are pruned here so the walk never descends into them.
        dirnames[:] = sorted(
            name for name in dirnames if not spec.match_file(f"{(base / name).as_posix()}/")
        )
        for name in sorted(filenames):
            if any(fnmatch(name, marker) for marker in _TYPESCRIPT_MARKERS):
                logger.debug("TypeScript detected via {}", (base / name).as_posix())
                return True
    return False


def resolve_typescript(root: Path, options: SetupOptions) -> SetupOptions:
    """Svelte projects take their TypeScript flag from the files on disk."""

    if options.project_type is not ProjectType.SVELTE:
        return options
    detected = detect_typescript(root, options.project_type)
    if detected != options.use_typescript:
        logger.info(
            "Overriding TypeScript answer for svelte project: {}",
            "TypeScript" if detected else "JavaScript",
        )
    return options.model_copy(update={"use_typescript": detected})


__all__ = [
    "ESLINT_CONFIG_CANDIDATES",
    "EnvironmentCheckError",
    "ExistingConfigError",
    "check_environment",
    "detect_typescript",
    "find_existing_config",
    "resolve_typescript",
]
