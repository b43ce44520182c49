"""Shared models for the setup wizard."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, NamedTuple, Optional


class ProjectType(str, Enum):
    """Supported project ecosystems."""

    NEXTJS = "nextjs"
    REACT = "react"
    NODEJS = "nodejs"
    ANGULAR = "angular"
    VUE = "vue"
    SVELTE = "svelte"

    @classmethod
    def choices(cls) -> List[str]:
        return [member.value for member in cls]


class NodeKind(str, Enum):
    """Structural shape of a configuration value."""

    SCALAR = "scalar"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


class DependencySpecifier(NamedTuple):
    """An npm package name paired with its version constraint."""

    name: str
    version: str

    def __str__(self) -> str:
        return f"{self.name}@{self.version}"

    @classmethod
    def parse(cls, raw: str) -> "DependencySpecifier":
        """Split ``name@version``, keeping the leading ``@`` of scoped packages."""

        name, sep, version = raw.rpartition("@")
        if not sep or not name:
            return cls(raw, "latest")
        return cls(name, version)


@dataclass(slots=True)
class ExistingConfig:
    """A lint configuration file found in the target project."""

    path: Path
    document: Optional[Dict[str, Any]] = None

    @property
    def mergeable(self) -> bool:
        return self.document is not None


@dataclass(slots=True)
class InstallReport:
    """Outcome of an installer run."""

    installed: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    method: Optional[str] = None

    @property
    def ok(self) -> bool:
        return not self.failed


@dataclass(slots=True)
class SetupResult:
    """Everything produced by a wizard run."""

    dependencies: List[DependencySpecifier]
    install: InstallReport
    eslint_config: Dict[str, Any]
    written: List[Path] = field(default_factory=list)
    merged_from: Optional[Path] = None


__all__ = [
    "DependencySpecifier",
    "ExistingConfig",
    "InstallReport",
    "NodeKind",
    "ProjectType",
    "SetupResult",
]
