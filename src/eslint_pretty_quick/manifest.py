"""Scripts and lint-staged entries added to ``package.json``."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

from .config import SetupOptions
from .environment import read_package_json
from .merge import merge
from .models import ProjectType
from .writer import write_document

_EXTRA_EXTENSIONS = {ProjectType.VUE: "vue", ProjectType.SVELTE: "svelte"}


def build_scripts(options: SetupOptions) -> Dict[str, str]:
    scripts = {"lint": "eslint .", "lint:fix": "eslint . --fix"}
    if options.use_prettier:
        scripts["format"] = "prettier --write ."
        scripts["format:check"] = "prettier --check ."
    if options.use_husky:
        scripts["prepare"] = "husky install"
    return scripts


def build_lint_staged(options: SetupOptions) -> Dict[str, List[str]]:
    """Map staged-file globs to the commands run on them before a commit."""

    extensions = ["js", "jsx"]
    if options.use_typescript:
        extensions += ["ts", "tsx"]
    extra = _EXTRA_EXTENSIONS.get(options.project_type)
    if extra:
        extensions.append(extra)

    source_commands = ["eslint --fix"]
    if options.use_prettier:
        source_commands.append("prettier --write")

    staged = {f"*.{{{','.join(extensions)}}}": source_commands}
    if options.use_prettier:
        staged["*.{json,md}"] = ["prettier --write"]
    return staged


def build_manifest_updates(options: SetupOptions) -> Dict[str, Any]:
    updates: Dict[str, Any] = {"scripts": build_scripts(options)}
    if options.use_husky:
        updates["lint-staged"] = build_lint_staged(options)
    return updates


def update_package_json(root: Path, updates: Dict[str, Any]) -> Path:
    """Merge ``updates`` into ``package.json``, keeping the user's other entries."""

    package_json = read_package_json(root)
    return write_document(root / "package.json", merge(package_json, updates))


__all__ = [
    "build_lint_staged",
    "build_manifest_updates",
    "build_scripts",
    "update_package_json",
]
