"""Pytest fixtures and helpers for honeydew tests."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Sequence

import pytest

from honeydew.domain import GitResult


class FakeKV:
    """In-memory ``KVStore``; ``error`` is raised from every ``get``."""

    def __init__(self, values: Optional[Dict[str, bytes]] = None, error: Optional[Exception] = None):
        self.values = dict(values or {})
        self.error = error
        self.calls: List[str] = []

    def get(self, key: str) -> Optional[bytes]:
        self.calls.append(key)
        if self.error is not None:
            raise self.error
        return self.values.get(key)


class RecordingGitRunner:
    """``GitRunner`` that records every call instead of spawning git.

    ``returncodes`` maps a git subcommand ("add", "commit", "push") to a list
    of exit codes consumed one per call; when the list runs out the command
    succeeds.  ``on_run`` is called with the args before returning, so tests
    can inspect the tracked file at the moment git would read it.
    """

    def __init__(self, returncodes: Optional[Dict[str, List[int]]] = None, on_run=None):
        self.returncodes = {k: list(v) for k, v in (returncodes or {}).items()}
        self.on_run = on_run
        self.calls: List[tuple] = []
        self.cwds: List[Path] = []
        self.show_stdout: List[bool] = []

    def run(self, args: Sequence[str], *, cwd: Path, show_stdout: bool = False) -> GitResult:
        args = tuple(args)
        self.calls.append(args)
        self.cwds.append(cwd)
        self.show_stdout.append(show_stdout)
        if self.on_run is not None:
            self.on_run(args)
        codes = self.returncodes.get(args[0])
        rc = codes.pop(0) if codes else 0
        return GitResult(args=args, returncode=rc)

    def subcommands(self) -> List[str]:
        return [c[0] for c in self.calls]


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    """Clear the load_settings LRU cache before (and after) every test.

    Each test then sees a fresh environment read, so monkeypatched
    HONEYDEW_* / CONSUL_* variables never bleed between tests.
    """
    from honeydew.config import loader as settings_loader
    settings_loader.load_settings.cache_clear()
    yield
    settings_loader.load_settings.cache_clear()


@pytest.fixture
def repo_dir(tmp_path, monkeypatch):
    """An empty directory standing in for the repository; cwd is restored afterwards."""
    monkeypatch.chdir(tmp_path)
    d = tmp_path / "repo"
    d.mkdir()
    return d


@pytest.fixture
def git():
    return RecordingGitRunner()


@pytest.fixture
def make_git():
    """Factory for ``RecordingGitRunner`` with per-subcommand exit codes."""
    return RecordingGitRunner


@pytest.fixture
def make_kv():
    """Factory for ``FakeKV``."""
    return FakeKV
