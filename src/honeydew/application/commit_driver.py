"""Commit driver: append a line, stage it, commit it; repeat commit_count times.

Each iteration runs AppendLine -> StageFile -> CreateCommit.  The first
failure aborts the loop and propagates, so later iterations and the push
never run.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Sequence

from honeydew.application.ports import GitRunner
from honeydew.config.constants import COMMIT_MESSAGE, TRACKED_FILE_NAME
from honeydew.domain import (
    CommitError,
    GitCommandError,
    GitResult,
    RepositoryLocation,
    RunConfig,
    StageError,
)
from honeydew.infrastructure.workspace import append_line, open_tracked_file

logger = logging.getLogger(__name__)


def _run_git(
    git: GitRunner,
    location: RepositoryLocation,
    args: Sequence[str],
    error_cls: type[GitCommandError],
    *,
    show_stdout: bool = False,
) -> GitResult:
    """Run one git command, turning a launch failure or non-zero exit into ``error_cls``."""
    try:
        result = git.run(args, cwd=location.path, show_stdout=show_stdout)
    except OSError as e:
        raise error_cls(f"git {args[0]} could not be started: {e}", args) from e
    if not result.ok:
        raise error_cls(
            f"git {' '.join(args)} failed with exit status {result.returncode}",
            args,
            result.returncode,
        )
    return result


def stage_file(git: GitRunner, location: RepositoryLocation, path: Path) -> GitResult:
    return _run_git(git, location, ["add", str(path)], StageError)


def create_commit(git: GitRunner, location: RepositoryLocation, *, verbose: bool = False) -> GitResult:
    # git's commit summary goes to stdout; only shown when verbose
    return _run_git(git, location, ["commit", "-m", COMMIT_MESSAGE], CommitError, show_stdout=verbose)


def commit_once(
    git: GitRunner,
    location: RepositoryLocation,
    handle: IO[str],
    path: Path,
    *,
    verbose: bool = False,
) -> None:
    append_line(handle)
    stage_file(git, location, path)
    create_commit(git, location, verbose=verbose)


def run_commits(git: GitRunner, location: RepositoryLocation, run_config: RunConfig) -> int:
    """Make ``run_config.commit_count`` commits on the tracked file; return how many were made.

    With a count of zero the tracked file is not opened at all.
    """
    if run_config.commit_count == 0:
        logger.info("Commit count is 0; nothing to commit")
        return 0
    path = location.join(TRACKED_FILE_NAME)
    with open_tracked_file(path) as handle:
        for i in range(run_config.commit_count):
            commit_once(git, location, handle, path, verbose=run_config.verbose)
            logger.debug("Commit %d/%d done", i + 1, run_config.commit_count)
    logger.info("Made %d commit(s) in %s", run_config.commit_count, location.path)
    return run_config.commit_count
