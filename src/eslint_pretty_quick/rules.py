"""ESLint configuration rules per project type.

The configuration is built by an ordered pipeline of pure steps. Each step
receives the document produced so far and returns a new one:

``base`` -> ``existing`` -> ``type:<name>`` -> ``typescript`` -> ``prettier``

Rules set by a later step replace rules of the same name set earlier. The
strictness rules live in ``base``, so a type or TypeScript step that touches
the same rule wins over them.
"""

from __future__ import annotations

from copy import deepcopy
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from .config import SetupOptions
from .dependencies import bundles_typescript
from .merge import merge, node_kind
from .models import NodeKind, ProjectType

Document = Dict[str, Any]
Step = Callable[[Document], Document]

TYPESCRIPT_PARSER = "@typescript-eslint/parser"
SVELTE_PARSER = "svelte-eslint-parser"
SVELTE_FILES = "*.svelte"
PRETTIER_EXTENDS = "plugin:prettier/recommended"

STRICT_RULES: Mapping[str, str] = MappingProxyType(
    {"no-console": "error", "no-debugger": "error", "no-unused-vars": "error"}
)
RELAXED_RULES: Mapping[str, str] = MappingProxyType({"no-console": "warn"})


def _extend(config: Document, key: str, items: List[Any]) -> None:
    # An entry appended again moves to the end: ESLint gives later extends priority.
    current = config.get(key, [])
    if node_kind(current) is not NodeKind.SEQUENCE:
        current = [current]
    config[key] = [item for item in current if item not in items] + list(items)


def _mapping(config: Document, key: str) -> Document:
    if node_kind(config.get(key)) is not NodeKind.MAPPING:
        config[key] = {}
    return config[key]


def _rules(config: Document, rules: Mapping[str, Any]) -> None:
    _mapping(config, "rules").update(deepcopy(dict(rules)))


def base_config(use_strict: bool) -> Document:
    """Fields every generated configuration carries."""

    return {
        "root": True,
        "env": {"browser": True, "es2021": True, "node": True},
        "parserOptions": {"ecmaVersion": 2021, "sourceType": "module"},
        "rules": dict(STRICT_RULES if use_strict else RELAXED_RULES),
    }


def _nextjs(config: Document) -> None:
    _extend(config, "extends", ["next/core-web-vitals", "plugin:@next/next/recommended"])


def _react(config: Document) -> None:
    _extend(
        config,
        "extends",
        [
            "eslint:recommended",
            "plugin:react/recommended",
            "plugin:react/jsx-runtime",
            "plugin:react-hooks/recommended",
            "plugin:jsx-a11y/recommended",
        ],
    )
    _extend(config, "plugins", ["react", "react-hooks", "jsx-a11y"])
    config["settings"] = merge(_mapping(config, "settings"), {"react": {"version": "detect"}})
    _rules(config, {"react/react-in-jsx-scope": "off", "react/prop-types": "off"})


def _nodejs(config: Document) -> None:
    _extend(config, "extends", ["eslint:recommended", "plugin:node/recommended"])
    _extend(config, "plugins", ["node"])


def _angular(config: Document) -> None:
    _extend(
        config,
        "extends",
        [
            "eslint:recommended",
            "plugin:@angular-eslint/recommended",
            "plugin:@angular-eslint/template/recommended",
        ],
    )
    _extend(config, "plugins", ["@angular-eslint"])


def _vue(config: Document) -> None:
    _extend(config, "extends", ["eslint:recommended", "plugin:vue/vue3-recommended"])
    _extend(config, "plugins", ["vue"])
    _rules(config, {"vue/multi-word-component-names": "off"})


def _svelte(config: Document) -> None:
    _extend(config, "extends", ["eslint:recommended", "plugin:svelte/recommended"])
    _extend(config, "plugins", ["svelte"])
    # Component files need their own parser, separate from the document-wide one.
    _extend(config, "overrides", [{"files": [SVELTE_FILES], "parser": SVELTE_PARSER}])


TYPE_RULES: Mapping[ProjectType, Callable[[Document], None]] = MappingProxyType(
    {
        ProjectType.NEXTJS: _nextjs,
        ProjectType.REACT: _react,
        ProjectType.NODEJS: _nodejs,
        ProjectType.ANGULAR: _angular,
        ProjectType.VUE: _vue,
        ProjectType.SVELTE: _svelte,
    }
)


def _targets_svelte(override: Any) -> bool:
    if node_kind(override) is not NodeKind.MAPPING:
        return False
    files = override.get("files")
    if node_kind(files) is NodeKind.SEQUENCE:
        return SVELTE_FILES in files
    return files == SVELTE_FILES


def _svelte_override(config: Document) -> Optional[Document]:
    """The last ``*.svelte`` override, which is the one the svelte step appended."""

    overrides = config.get("overrides")
    if node_kind(overrides) is not NodeKind.SEQUENCE:
        return None
    for override in reversed(overrides):
        if _targets_svelte(override):
            return override
    return None


def _typescript(config: Document, project_type: ProjectType, use_strict: bool) -> None:
    _extend(config, "extends", ["plugin:@typescript-eslint/recommended"])
    _extend(config, "plugins", ["@typescript-eslint"])
    _rules(
        config,
        {
            "no-unused-vars": "off",
            "@typescript-eslint/no-unused-vars": "error" if use_strict else "warn",
        },
    )
    parser_options = _mapping(config, "parserOptions")
    if project_type is ProjectType.VUE:
        parser_options["parser"] = TYPESCRIPT_PARSER
        return
    config["parser"] = TYPESCRIPT_PARSER
    if project_type is ProjectType.SVELTE:
        parser_options["extraFileExtensions"] = [".svelte"]
        override = _svelte_override(config)
        if override is not None:
            _mapping(override, "parserOptions")["parser"] = TYPESCRIPT_PARSER


def _prettier(config: Document) -> None:
    _extend(config, "extends", [PRETTIER_EXTENDS])


def _pure(mutator: Callable[[Document], None]) -> Step:
    def step(config: Document) -> Document:
        updated = deepcopy(config)
        mutator(updated)
        return updated

    return step


def rule_steps(
    project_type: ProjectType, use_typescript: bool, use_strict: bool, use_prettier: bool
) -> List[Tuple[str, Step]]:
    """Type, TypeScript and Prettier steps for a project, in application order."""

    project_type = ProjectType(project_type)
    steps: List[Tuple[str, Step]] = [
        (f"type:{project_type.value}", _pure(TYPE_RULES[project_type])),
    ]
    if use_typescript and not bundles_typescript(project_type):
        steps.append(
            ("typescript", _pure(lambda config: _typescript(config, project_type, use_strict)))
        )
    if use_prettier:
        steps.append(("prettier", _pure(_prettier)))
    return steps


def apply_rules(
    project_type: ProjectType,
    use_typescript: bool,
    use_strict: bool,
    use_prettier: bool,
    config: Document,
) -> Document:
    """Run the project-specific steps over ``config`` and return the result."""

    for _, step in rule_steps(project_type, use_typescript, use_strict, use_prettier):
        config = step(config)
    return config


def generation_steps(
    options: SetupOptions, existing: Optional[Document] = None
) -> List[Tuple[str, Step]]:
    """The full pipeline, starting from an empty document."""

    steps: List[Tuple[str, Step]] = [("base", lambda _: base_config(options.use_strict))]
    if existing is not None:
        snapshot = deepcopy(existing)
        steps.append(("existing", lambda config: merge(config, snapshot)))
    steps.extend(
        rule_steps(
            options.project_type,
            options.use_typescript,
            options.use_strict,
            options.use_prettier,
        )
    )
    return steps


def build_config(options: SetupOptions, existing: Optional[Document] = None) -> Document:
    config: Document = {}
    for _, step in generation_steps(options, existing):
        config = step(config)
    return config


__all__ = [
    "apply_rules",
    "base_config",
    "build_config",
    "generation_steps",
    "rule_steps",
]
