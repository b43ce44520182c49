"""Husky and lint-staged pre-commit hook setup."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Callable, Protocol, Sequence

from jinja2 import Environment, PackageLoader
from loguru import logger

from .config import SetupError
from .dependencies import HOOK_DEPENDENCIES
from .models import DependencySpecifier, InstallReport
from .writer import write_text

Runner = Callable[..., subprocess.CompletedProcess]

PRE_COMMIT_COMMAND = "npx lint-staged"


class HookSetupError(SetupError):
    """Raised when Husky cannot be initialised."""


class Installer(Protocol):
    def install(self, dependencies: Sequence[DependencySpecifier]) -> InstallReport: ...


def _environment() -> Environment:
    return Environment(
        loader=PackageLoader("eslint_pretty_quick", "templates"),
        autoescape=False,
        keep_trailing_newline=True,
    )


def render_pre_commit(command: str = PRE_COMMIT_COMMAND) -> str:
    return _environment().get_template("pre-commit.j2").render(command=command)


def setup_husky(root: Path, installer: Installer, runner: Runner = subprocess.run) -> Path:
    """Install Husky, initialise its hooks directory and write the pre-commit hook."""

    logger.info("Setting up Husky and lint-staged...")
    installer.install(list(HOOK_DEPENDENCIES))
    try:
        runner(["npx", "husky", "install"], cwd=root, check=True)
    except (OSError, subprocess.CalledProcessError) as exc:
        raise HookSetupError(f"Failed to run 'npx husky install': {exc}") from exc

    hook = write_text(root / ".husky" / "pre-commit", render_pre_commit(), mode=0o755)
    logger.info("Husky and lint-staged have been configured.")
    return hook


__all__ = ["HookSetupError", "Installer", "render_pre_commit", "setup_husky"]
