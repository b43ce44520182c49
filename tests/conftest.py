from __future__ import annotations

import json
import subprocess
from pathlib import Path
from typing import Any, Dict, List, Sequence

import pytest

from eslint_pretty_quick.models import DependencySpecifier, InstallReport


class FakeInstaller:
    """Records install calls instead of running npm."""

    def __init__(self, fail: Sequence[str] = ()) -> None:
        self.calls: List[List[str]] = []
        self._fail = set(fail)

    def install(self, dependencies: Sequence[DependencySpecifier]) -> InstallReport:
        packages = [str(dep) for dep in dependencies]
        self.calls.append(packages)
        failed = [pkg for pkg in packages if pkg in self._fail]
        return InstallReport(
            installed=[pkg for pkg in packages if pkg not in self._fail],
            failed=failed,
            method="fake",
        )


class ScriptedPrompter:
    """Answers questions from queues and remembers what was asked."""

    def __init__(self, choices: Sequence[str] = (), confirms: Sequence[bool] = ()) -> None:
        self._choices = list(choices)
        self._confirms = list(confirms)
        self.asked: List[str] = []

    def choose(self, question: str, choices: Sequence[str]) -> str:
        self.asked.append(question)
        answer = self._choices.pop(0)
        assert answer in choices
        return answer

    def confirm(self, question: str, default: bool = False) -> bool:
        self.asked.append(question)
        return self._confirms.pop(0) if self._confirms else default


class RecordingRunner:
    def __init__(self, returncode: int = 0) -> None:
        self.calls: List[Any] = []
        self.returncode = returncode

    def __call__(self, args, **kwargs) -> subprocess.CompletedProcess:
        self.calls.append((args, kwargs))
        if self.returncode and kwargs.get("check"):
            raise subprocess.CalledProcessError(self.returncode, args)
        return subprocess.CompletedProcess(args, self.returncode)


@pytest.fixture()
def project_root(tmp_path: Path) -> Path:
    root = tmp_path / "app"
    root.mkdir()
    (root / ".git").mkdir()
    package_json: Dict[str, Any] = {
        "name": "app",
        "version": "1.0.0",
        "scripts": {"test": "jest"},
    }
    (root / "package.json").write_text(json.dumps(package_json, indent=2))
    return root


@pytest.fixture()
def installer() -> FakeInstaller:
    return FakeInstaller()


@pytest.fixture()
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture()
def node_18(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        "eslint_pretty_quick.environment.detect_node_version", lambda: "v18.16.0"
    )


def read_json(path: Path) -> Dict[str, Any]:
    return json.loads(path.read_text())
