from __future__ import annotations

import subprocess
from pathlib import Path

from eslint_pretty_quick.installer import NpmInstaller, NullInstaller
from eslint_pretty_quick.models import DependencySpecifier

DEPS = [DependencySpecifier("eslint", "^8.39.0"), DependencySpecifier("prettier", "^2.8.8")]


class ScriptedRunner:
    """Fails the first ``failures`` calls, or any call mentioning a bad package."""

    def __init__(self, failures: int = 0, bad: str | None = None) -> None:
        self.calls = []
        self.failures = failures
        self.bad = bad

    def __call__(self, args, **kwargs):
        self.calls.append((args, kwargs))
        if len(self.calls) <= self.failures:
            raise subprocess.CalledProcessError(1, args)
        if self.bad and self.bad in (args if isinstance(args, str) else " ".join(args)):
            raise subprocess.CalledProcessError(1, args)
        return subprocess.CompletedProcess(args, 0)


def test_direct_install(tmp_path: Path) -> None:
    runner = ScriptedRunner()
    report = NpmInstaller(tmp_path, runner=runner).install(DEPS)
    assert report.ok
    assert report.method == "direct"
    args, kwargs = runner.calls[0]
    assert args[1:] == ["install", "--save-dev", "eslint@^8.39.0", "prettier@^2.8.8"]
    assert kwargs["cwd"] == tmp_path


def test_shell_fallback(tmp_path: Path) -> None:
    runner = ScriptedRunner(failures=1)
    report = NpmInstaller(tmp_path, runner=runner).install(DEPS)
    assert report.method == "shell"
    command, kwargs = runner.calls[1]
    assert isinstance(command, str)
    assert kwargs["shell"] is True
    assert report.installed == [str(dep) for dep in DEPS]


def test_per_package_fallback_skips_failures(tmp_path: Path) -> None:
    runner = ScriptedRunner(bad="prettier")
    report = NpmInstaller(tmp_path, runner=runner).install(DEPS)
    assert report.method == "per-package"
    assert report.installed == ["eslint@^8.39.0"]
    assert report.failed == ["prettier@^2.8.8"]
    assert len(runner.calls) == 4


def test_missing_npm_is_not_fatal(tmp_path: Path) -> None:
    def runner(args, **kwargs):
        raise FileNotFoundError("npm")

    report = NpmInstaller(tmp_path, runner=runner).install(DEPS)
    assert not report.ok
    assert report.failed == [str(dep) for dep in DEPS]


def test_nothing_to_install(tmp_path: Path) -> None:
    runner = ScriptedRunner()
    report = NpmInstaller(tmp_path, runner=runner).install([])
    assert report.ok
    assert not runner.calls


def test_null_installer() -> None:
    report = NullInstaller().install(DEPS)
    assert report.method == "skipped"
    assert report.ok
    assert report.failed == []
    assert report.skipped == [str(dep) for dep in DEPS]
