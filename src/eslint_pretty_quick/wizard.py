"""High level setup routine tying the generators to the filesystem."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Any, Dict, Optional

from loguru import logger

from .config import DEFAULT_ESLINT_CONFIG, SetupOptions
from .dependencies import get_project_dependencies
from .environment import find_existing_config, resolve_typescript
from .hooks import Installer, Runner, setup_husky
from .ignores import build_formatter_ignore_list, build_ignore_list
from .manifest import build_manifest_updates, update_package_json
from .models import ExistingConfig, ProjectType, SetupResult
from .prompts import Prompter
from .rules import build_config
from .writer import write_document, write_lines

PRETTIER_CONFIG: Dict[str, Any] = {
    "singleQuote": True,
    "trailingComma": "es5",
    "printWidth": 100,
    "tabWidth": 2,
    "semi": True,
}

SVELTE_TSCONFIG: Dict[str, Any] = {
    "extends": "./.svelte-kit/tsconfig.json",
    "compilerOptions": {
        "allowJs": True,
        "checkJs": True,
        "esModuleInterop": True,
        "forceConsistentCasingInFileNames": True,
        "resolveJsonModule": True,
        "skipLibCheck": True,
        "sourceMap": True,
        "strict": True,
    },
}


def build_prettier_config(project_type: ProjectType) -> Dict[str, Any]:
    config = dict(PRETTIER_CONFIG)
    if project_type is ProjectType.SVELTE:
        config["plugins"] = ["prettier-plugin-svelte"]
        config["overrides"] = [{"files": "*.svelte", "options": {"parser": "svelte"}}]
    return config


def describe_options(options: SetupOptions) -> None:
    logger.info("Setting up your {} project with the following options:", options.project_type.value)
    logger.info("- {}", "TypeScript" if options.use_typescript else "JavaScript")
    logger.info("- {} Husky and lint-staged", "With" if options.use_husky else "Without")
    logger.info("- {} ESLint configuration", "Strict" if options.use_strict else "Standard")
    logger.info("- {} Prettier integration", "With" if options.use_prettier else "Without")


def _existing_snapshot(
    existing: Optional[ExistingConfig], prompter: Prompter
) -> Optional[Dict[str, Any]]:
    if existing is None or not existing.mergeable:
        return None
    if prompter.confirm(f"An ESLint configuration already exists at {existing.path.name}. Overwrite it?"):
        logger.info("Replacing {}", existing.path.name)
        return None
    logger.info("Merging generated settings into {}", existing.path.name)
    return existing.document


def run_setup(
    root: Path,
    options: SetupOptions,
    *,
    prompter: Prompter,
    installer: Installer,
    runner: Runner = subprocess.run,
) -> SetupResult:
    """Install dependencies and write every configuration file for ``root``."""

    options = resolve_typescript(root, options)
    describe_options(options)

    dependencies = get_project_dependencies(
        options.project_type, options.use_typescript, options.use_prettier
    )
    install = installer.install(dependencies)
    if not install.ok:
        logger.warning("Some dependencies were not installed: {}", ", ".join(install.failed))

    existing = find_existing_config(root)
    snapshot = _existing_snapshot(existing, prompter)
    eslint_config = build_config(options, snapshot)

    destination = root / DEFAULT_ESLINT_CONFIG
    if existing is not None and existing.mergeable:
        destination = existing.path

    result = SetupResult(
        dependencies=dependencies,
        install=install,
        eslint_config=eslint_config,
        merged_from=existing.path if snapshot is not None else None,
    )
    result.written.append(write_document(destination, eslint_config))
    result.written.append(write_lines(root / ".eslintignore", build_ignore_list(options.project_type)))

    if options.use_prettier:
        result.written.append(
            write_document(root / ".prettierrc", build_prettier_config(options.project_type))
        )
        result.written.append(write_lines(root / ".prettierignore", build_formatter_ignore_list()))

    if options.project_type is ProjectType.SVELTE and options.use_typescript:
        tsconfig = root / "tsconfig.json"
        if tsconfig.exists():
            logger.info("Keeping existing {}", tsconfig.name)
        else:
            result.written.append(write_document(tsconfig, SVELTE_TSCONFIG))

    if options.use_husky:
        result.written.append(setup_husky(root, installer, runner))

    result.written.append(update_package_json(root, build_manifest_updates(options)))

    logger.info("ESLint{} been set up successfully!", " and Prettier have" if options.use_prettier else " has")
    logger.info("To address any potential vulnerabilities, please run: npm audit fix")
    return result


__all__ = ["PRETTIER_CONFIG", "build_prettier_config", "run_setup"]
