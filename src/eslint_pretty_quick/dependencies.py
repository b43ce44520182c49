"""Catalog of npm packages required for each project type."""

from __future__ import annotations

from types import MappingProxyType
from typing import List, Mapping, Tuple

from .models import DependencySpecifier, ProjectType

FORMATTER_MARKER = "prettier"

_Specs = Tuple[DependencySpecifier, ...]

COMMON_DEPENDENCIES: _Specs = (
    DependencySpecifier("eslint", "^8.39.0"),
    DependencySpecifier("prettier", "^2.8.8"),
    DependencySpecifier("eslint-config-prettier", "^8.8.0"),
    DependencySpecifier("eslint-plugin-prettier", "^4.2.1"),
)

TYPE_DEPENDENCIES: Mapping[ProjectType, _Specs] = MappingProxyType(
    {
        ProjectType.NEXTJS: (DependencySpecifier("@next/eslint-plugin-next", "^13.3.4"),),
        ProjectType.REACT: (
            DependencySpecifier("eslint-plugin-react", "^7.32.2"),
            DependencySpecifier("eslint-plugin-react-hooks", "^4.6.0"),
            DependencySpecifier("eslint-plugin-jsx-a11y", "^6.7.1"),
        ),
        ProjectType.NODEJS: (DependencySpecifier("eslint-plugin-node", "^11.1.0"),),
        ProjectType.ANGULAR: (
            DependencySpecifier("@angular-eslint/eslint-plugin", "^16.0.3"),
            DependencySpecifier("@angular-eslint/eslint-plugin-template", "^16.0.3"),
        ),
        ProjectType.VUE: (DependencySpecifier("eslint-plugin-vue", "^9.11.0"),),
        ProjectType.SVELTE: (
            DependencySpecifier("eslint-plugin-svelte", "^2.27.1"),
            # Dropped together with the formatter through the name filter.
            DependencySpecifier("prettier-plugin-svelte", "^2.10.1"),
        ),
    }
)

TYPESCRIPT_DEPENDENCIES: _Specs = (
    DependencySpecifier("@typescript-eslint/parser", "^5.59.5"),
    DependencySpecifier("@typescript-eslint/eslint-plugin", "^5.59.5"),
)

HOOK_DEPENDENCIES: _Specs = (
    DependencySpecifier("husky", "^8.0.3"),
    DependencySpecifier("lint-staged", "^13.2.2"),
)


def bundles_typescript(project_type: ProjectType) -> bool:
    """Next.js ships its own TypeScript lint support."""

    return ProjectType(project_type) is ProjectType.NEXTJS


def get_project_dependencies(
    project_type: ProjectType, use_typescript: bool, use_prettier: bool
) -> List[DependencySpecifier]:
    """Return the ordered install list for a project.

    Raises ``KeyError`` for a project type missing from the catalog.
    """

    dependencies = list(COMMON_DEPENDENCIES)
    dependencies.extend(TYPE_DEPENDENCIES[project_type])
    if use_typescript and not bundles_typescript(project_type):
        dependencies.extend(TYPESCRIPT_DEPENDENCIES)
    if not use_prettier:
        dependencies = [dep for dep in dependencies if FORMATTER_MARKER not in dep.name]
    return dependencies


__all__ = [
    "COMMON_DEPENDENCIES",
    "HOOK_DEPENDENCIES",
    "TYPESCRIPT_DEPENDENCIES",
    "TYPE_DEPENDENCIES",
    "get_project_dependencies",
]
