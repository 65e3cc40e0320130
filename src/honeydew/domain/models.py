"""Domain models: RunConfig, RepositoryLocation, GitResult. Pure data, no I/O."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple


@dataclass(frozen=True)
class RunConfig:
    """Parameters of one run, built once after the config fetch and passed explicitly."""
    commit_count: int
    verbose: bool = True
    force_push_allowed: bool = True

    def __post_init__(self) -> None:
        if self.commit_count < 0:
            raise ValueError(f"commit_count must be >= 0, got {self.commit_count}")


@dataclass(frozen=True)
class RepositoryLocation:
    """Absolute path of an existing directory holding the git working tree."""
    path: Path

    def join(self, name: str) -> Path:
        return self.path / name


@dataclass(frozen=True)
class GitResult:
    """Outcome of a single git invocation."""
    args: Tuple[str, ...]
    returncode: int

    @property
    def ok(self) -> bool:
        return self.returncode == 0
