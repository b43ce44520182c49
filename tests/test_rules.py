from __future__ import annotations

import pytest

from eslint_pretty_quick.config import SetupOptions
from eslint_pretty_quick.models import ProjectType
from eslint_pretty_quick.rules import (
    apply_rules,
    base_config,
    build_config,
    generation_steps,
    rule_steps,
)


def _options(project_type: str, **flags) -> SetupOptions:
    return SetupOptions(project_type=project_type, **flags)


@pytest.mark.parametrize("project_type", list(ProjectType))
def test_required_fields_always_present(project_type: ProjectType) -> None:
    config = build_config(_options(project_type.value, use_prettier=False))
    for key in ("root", "env", "parserOptions", "rules"):
        assert key in config


def test_strict_rules_are_errors() -> None:
    config = build_config(_options("nodejs", use_strict=True, use_prettier=True))
    rules = config["rules"]
    assert rules["no-console"] == "error"
    assert rules["no-debugger"] == "error"
    assert rules["no-unused-vars"] == "error"


def test_relaxed_rules_only_warn_on_console() -> None:
    rules = base_config(use_strict=False)["rules"]
    assert rules == {"no-console": "warn"}


def test_nodejs_has_no_optional_parser_settings() -> None:
    config = build_config(_options("nodejs", use_prettier=True))
    assert config["extends"] == [
        "eslint:recommended",
        "plugin:node/recommended",
        "plugin:prettier/recommended",
    ]
    assert config["plugins"] == ["node"]
    for key in ("settings", "parser", "overrides"):
        assert key not in config


def test_react_settings_and_rules() -> None:
    config = build_config(_options("react"))
    assert config["settings"] == {"react": {"version": "detect"}}
    assert config["rules"]["react/react-in-jsx-scope"] == "off"
    assert config["plugins"] == ["react", "react-hooks", "jsx-a11y"]


def test_typescript_sets_parser_and_overrides_unused_vars() -> None:
    config = build_config(_options("react", use_typescript=True, use_strict=True))
    assert config["parser"] == "@typescript-eslint/parser"
    assert "@typescript-eslint" in config["plugins"]
    # TypeScript rules come after strictness and replace the base rule.
    assert config["rules"]["no-unused-vars"] == "off"
    assert config["rules"]["@typescript-eslint/no-unused-vars"] == "error"
    assert config["extends"][-1] == "plugin:prettier/recommended"


def test_nextjs_ignores_typescript_flag() -> None:
    config = build_config(_options("nextjs", use_typescript=True, use_prettier=False))
    assert "parser" not in config
    assert config["extends"] == ["next/core-web-vitals", "plugin:@next/next/recommended"]


def test_vue_typescript_uses_nested_parser() -> None:
    config = build_config(_options("vue", use_typescript=True))
    assert "parser" not in config
    assert config["parserOptions"]["parser"] == "@typescript-eslint/parser"


def test_svelte_override_parser() -> None:
    config = build_config(_options("svelte", use_prettier=False))
    assert config["overrides"] == [{"files": ["*.svelte"], "parser": "svelte-eslint-parser"}]
    assert "parser" not in config


def test_svelte_typescript_nests_second_parser() -> None:
    config = build_config(_options("svelte", use_typescript=True))
    assert config["parser"] == "@typescript-eslint/parser"
    assert config["parserOptions"]["extraFileExtensions"] == [".svelte"]
    override = config["overrides"][0]
    assert override["parser"] == "svelte-eslint-parser"
    assert override["parserOptions"] == {"parser": "@typescript-eslint/parser"}


def test_existing_config_merged_before_type_rules() -> None:
    existing = {
        "extends": ["airbnb", "plugin:prettier/recommended"],
        "rules": {"no-console": "off", "semi": "error"},
    }
    config = build_config(_options("nodejs", use_strict=True), existing)
    assert config["extends"] == [
        "airbnb",
        "eslint:recommended",
        "plugin:node/recommended",
        "plugin:prettier/recommended",
    ]
    assert config["rules"]["no-console"] == "off"
    assert config["rules"]["semi"] == "error"


def test_existing_string_extends_is_kept() -> None:
    config = build_config(_options("vue", use_prettier=False), {"extends": "airbnb"})
    assert config["extends"] == ["airbnb", "eslint:recommended", "plugin:vue/vue3-recommended"]


def test_steps_can_be_snapshotted() -> None:
    options = _options("angular", use_typescript=True, use_prettier=True)
    steps = generation_steps(options, {"rules": {"eqeqeq": "error"}})
    assert [name for name, _ in steps] == [
        "base",
        "existing",
        "type:angular",
        "typescript",
        "prettier",
    ]
    config: dict = {}
    snapshots = []
    for _, step in steps:
        previous = config
        config = step(config)
        snapshots.append(config)
        assert config is not previous
    assert "extends" not in snapshots[1]
    assert snapshots[1]["rules"]["eqeqeq"] == "error"
    assert "parser" not in snapshots[2]
    assert snapshots[3]["parser"] == "@typescript-eslint/parser"


def test_apply_rules_does_not_mutate_input() -> None:
    config = base_config(use_strict=False)
    result = apply_rules(ProjectType.REACT, True, False, True, config)
    assert config == base_config(use_strict=False)
    assert result["rules"]["@typescript-eslint/no-unused-vars"] == "warn"


def test_nodejs_rules_are_only_strictness() -> None:
    config = build_config(_options("nodejs", use_strict=False))
    assert config["rules"] == {"no-console": "warn"}


def test_svelte_typescript_tolerates_odd_overrides() -> None:
    existing = {
        "overrides": [
            {"files": None},
            {"files": "*.svelte.bak"},
            "not-an-override",
        ]
    }
    config = build_config(_options("svelte", use_typescript=True), existing)
    assert config["overrides"][:3] == existing["overrides"]
    generated = config["overrides"][-1]
    assert generated["parser"] == "svelte-eslint-parser"
    assert generated["parserOptions"] == {"parser": "@typescript-eslint/parser"}


def test_svelte_typescript_targets_generated_override() -> None:
    existing = {
        "overrides": [
            {"files": "*.svelte", "rules": {"no-undef": "off"}, "parserOptions": "legacy"},
        ]
    }
    config = build_config(_options("svelte", use_typescript=True), existing)
    user_override, generated = config["overrides"]
    assert user_override == existing["overrides"][0]
    assert generated["files"] == ["*.svelte"]
    assert generated["parserOptions"]["parser"] == "@typescript-eslint/parser"


def test_svelte_typescript_replaces_non_mapping_parser_options() -> None:
    config = {"overrides": [{"files": ["*.svelte"], "parserOptions": []}]}
    typescript = dict(rule_steps(ProjectType.SVELTE, True, False, False))["typescript"]
    result = typescript(config)
    assert result["overrides"][-1]["parserOptions"] == {"parser": "@typescript-eslint/parser"}
