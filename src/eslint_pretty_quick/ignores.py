"""Ignore lists for ESLint and Prettier."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, List, Mapping, Tuple

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern

from .models import ProjectType

COMMON_LINT_IGNORES: Tuple[str, ...] = (
    "node_modules/",
    "dist/",
    "build/",
    "coverage/",
    "*.min.js",
    "*.d.ts",
)

TYPE_LINT_IGNORES: Mapping[ProjectType, Tuple[str, ...]] = MappingProxyType(
    {
        ProjectType.NEXTJS: (".next/", "out/", "next-env.d.ts"),
        ProjectType.REACT: ("storybook-static/",),
        ProjectType.NODEJS: (),
        ProjectType.ANGULAR: (".angular/", "e2e/"),
        ProjectType.VUE: (".nuxt/", ".output/"),
        ProjectType.SVELTE: (".svelte-kit/", "package/"),
    }
)

FORMATTER_IGNORES: Tuple[str, ...] = (
    "node_modules/",
    "dist/",
    "build/",
    "coverage/",
    "package-lock.json",
    "yarn.lock",
    "pnpm-lock.yaml",
)


def build_ignore_list(project_type: ProjectType) -> List[str]:
    """Patterns written to ``.eslintignore``."""

    return list(COMMON_LINT_IGNORES) + list(TYPE_LINT_IGNORES.get(project_type, ()))


def build_formatter_ignore_list() -> List[str]:
    """Patterns written to ``.prettierignore``."""

    return list(FORMATTER_IGNORES)


def compile_ignore_spec(patterns: Iterable[str]) -> PathSpec:
    return PathSpec.from_lines(GitWildMatchPattern, patterns)


__all__ = [
    "build_formatter_ignore_list",
    "build_ignore_list",
    "compile_ignore_spec",
]
