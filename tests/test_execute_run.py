"""Tests for the execute_run use case (fetch -> locate -> commit -> push)."""
from __future__ import annotations

import os
from pathlib import Path

import httpx
import pytest

from honeydew.application import execute_git, execute_run
from honeydew.config import HoneydewSettings
from honeydew.domain import (
    CommitError,
    ConfigMalformed,
    ConfigUnavailable,
    ForcePushError,
    MissingConfig,
    PathNotFound,
    PushError,
    RunConfig,
)

PUSH = ("push", "origin", "master:main")


def _settings(repo_dir, **overrides) -> HoneydewSettings:
    data = {"repo_dir": str(repo_dir) if repo_dir is not None else None, "home": "/home/someone"}
    data.update(overrides)
    return HoneydewSettings(**data)


def _kv(make_kv, raw: bytes):
    return make_kv({"config/honeydew": raw})


def test_full_run(repo_dir, make_kv, git):
    run_config = execute_run(_kv(make_kv, b'{"num": 2}'), git, settings=_settings(repo_dir))
    assert run_config == RunConfig(commit_count=2, verbose=True, force_push_allowed=True)
    assert git.subcommands() == ["add", "commit", "add", "commit", "push"]
    assert git.calls[-1] == PUSH
    assert (repo_dir / "hello.txt").read_text() == "random word\n" * 2
    assert Path(os.getcwd()).resolve() == repo_dir.resolve()


def test_zero_commits_pushes_once(repo_dir, make_kv, git):
    execute_run(_kv(make_kv, b'{"num": 0}'), git, settings=_settings(repo_dir))
    assert git.calls == [PUSH]
    assert not (repo_dir / "hello.txt").exists()


def test_uses_configured_key(repo_dir, make_kv, git):
    kv = make_kv({"config/elsewhere": b'{"num": 1}'})
    execute_run(kv, git, settings=_settings(repo_dir, config_key="config/elsewhere"))
    assert kv.calls == ["config/elsewhere"]


def test_malformed_config_touches_nothing(repo_dir, make_kv, git):
    with pytest.raises(ConfigMalformed):
        execute_run(_kv(make_kv, b"not-json"), git, settings=_settings(repo_dir))
    assert git.calls == []
    assert list(repo_dir.iterdir()) == []


def test_unreachable_store_touches_nothing(repo_dir, make_kv, git):
    kv = make_kv(error=httpx.ConnectError("refused"))
    with pytest.raises(ConfigUnavailable):
        execute_run(kv, git, settings=_settings(repo_dir))
    assert git.calls == []


def test_missing_repo_dir_touches_nothing(repo_dir, make_kv, git):
    with pytest.raises(MissingConfig, match="HONEYDEW_REPO_DIR"):
        execute_run(_kv(make_kv, b'{"num": 3}'), git, settings=_settings(None))
    assert git.calls == []
    assert list(repo_dir.iterdir()) == []


def test_missing_home(repo_dir, make_kv, git):
    with pytest.raises(MissingConfig, match="HOME"):
        execute_run(_kv(make_kv, b'{"num": 3}'), git, settings=_settings(repo_dir, home=""))
    assert git.calls == []


def test_nonexistent_repo_dir(tmp_path, make_kv, git):
    with pytest.raises(PathNotFound):
        execute_run(_kv(make_kv, b'{"num": 1}'), git, settings=_settings(tmp_path / "gone"))
    assert git.calls == []


def test_commit_failure_skips_push(repo_dir, make_kv, make_git):
    git = make_git({"commit": [0, 1]})
    with pytest.raises(CommitError):
        execute_run(_kv(make_kv, b'{"num": 5}'), git, settings=_settings(repo_dir))
    assert git.subcommands() == ["add", "commit", "add", "commit"]


def test_push_failure_without_force(repo_dir, make_kv, make_git):
    git = make_git({"push": [1]})
    with pytest.raises(PushError):
        execute_run(
            _kv(make_kv, b'{"num": 1}'), git,
            settings=_settings(repo_dir), force_push_allowed=False,
        )
    assert git.subcommands().count("push") == 1


def test_force_push_failure(repo_dir, make_kv, make_git):
    git = make_git({"push": [1, 1]})
    with pytest.raises(ForcePushError):
        execute_run(_kv(make_kv, b'{"num": 1}'), git, settings=_settings(repo_dir))
    assert git.calls[-2:] == [PUSH, PUSH]


def test_force_flags_from_settings(repo_dir, make_kv, make_git):
    git = make_git({"push": [1, 0]})
    execute_run(
        _kv(make_kv, b'{"num": 0}'), git,
        settings=_settings(repo_dir, force_push_flags=["--force"]),
    )
    assert git.calls == [PUSH, ("push", "--force", "origin", "master:main")]


def test_execute_git_returns_location(repo_dir, git):
    location = execute_git(git, RunConfig(commit_count=1, verbose=False), str(repo_dir))
    assert location.path == repo_dir
    assert git.subcommands() == ["add", "commit", "push"]
