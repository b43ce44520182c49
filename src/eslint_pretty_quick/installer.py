"""npm installation with graceful fallbacks."""

from __future__ import annotations

import shlex
import subprocess
import sys
from pathlib import Path
from typing import Callable, List, Sequence

from loguru import logger

from .models import DependencySpecifier, InstallReport

Runner = Callable[..., subprocess.CompletedProcess]


def npm_command() -> str:
    return "npm.cmd" if sys.platform == "win32" else "npm"


class NpmInstaller:
    """Install dev dependencies, degrading from one batch call to per-package calls.

    The tiers are tried in order:

    1. ``npm install --save-dev <all>`` as an argv call.
    2. The same command through the shell.
    3. One ``npm install`` per package; individual failures are logged and skipped.
    """

    def __init__(self, root: Path, runner: Runner = subprocess.run) -> None:
        self.root = root
        self._runner = runner

    def _args(self, packages: Sequence[str]) -> List[str]:
        return [npm_command(), "install", "--save-dev", *packages]

    def _direct(self, packages: Sequence[str]) -> None:
        self._runner(self._args(packages), cwd=self.root, check=True)

    def _shell(self, packages: Sequence[str]) -> None:
        self._runner(shlex.join(self._args(packages)), cwd=self.root, check=True, shell=True)

    def install(self, dependencies: Sequence[DependencySpecifier]) -> InstallReport:
        packages = [str(dep) for dep in dependencies]
        if not packages:
            return InstallReport(method="none")

        logger.info("Installing dependencies: {}", ", ".join(packages))
        try:
            self._direct(packages)
            logger.info("Dependencies installed successfully.")
            return InstallReport(installed=packages, method="direct")
        except (OSError, subprocess.CalledProcessError) as exc:
            logger.warning("npm install failed ({}), retrying through the shell...", exc)

        try:
            self._shell(packages)
            logger.info("Dependencies installed successfully.")
            return InstallReport(installed=packages, method="shell")
        except (OSError, subprocess.CalledProcessError) as exc:
            logger.warning("Batch install failed ({}), installing packages one by one...", exc)

        report = InstallReport(method="per-package")
        for package in packages:
            try:
                self._direct([package])
            except (OSError, subprocess.CalledProcessError) as exc:
                logger.error("Failed to install {}: {}", package, exc)
                report.failed.append(package)
            else:
                report.installed.append(package)
        if report.failed:
            logger.warning("Skipped packages: {}", ", ".join(report.failed))
        return report


class NullInstaller:
    """Skip installation entirely and report every package as skipped."""

    def install(self, dependencies: Sequence[DependencySpecifier]) -> InstallReport:
        packages = [str(dep) for dep in dependencies]
        if packages:
            logger.info("Skipping installation of: {}", ", ".join(packages))
        return InstallReport(skipped=packages, method="skipped")


__all__ = ["NpmInstaller", "NullInstaller"]
