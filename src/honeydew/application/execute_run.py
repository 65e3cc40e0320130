"""Execute run use case.

Flow: fetch the commit count from the KV store -> build ``RunConfig`` ->
check HOME -> locate the repository -> make the commits -> push.

Collaborators are injected (``KVStore``, ``GitRunner``); the run
parameters travel as an explicit ``RunConfig`` argument.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from honeydew.application.commit_driver import run_commits
from honeydew.application.fetch_config import fetch_commit_count
from honeydew.application.ports import GitRunner, KVStore
from honeydew.application.push_driver import push
from honeydew.config.schema import HoneydewSettings
from honeydew.domain import MissingConfig, RepositoryLocation, RunConfig
from honeydew.infrastructure.workspace import locate_repository

logger = logging.getLogger(__name__)


def execute_git(
    git: GitRunner,
    run_config: RunConfig,
    repo_dir: Optional[str],
    *,
    force_flags: Sequence[str] = (),
) -> RepositoryLocation:
    """Enter the repository, make ``run_config.commit_count`` commits and push."""
    location = locate_repository(repo_dir)
    run_commits(git, location, run_config)
    push(
        git,
        location,
        force_push_allowed=run_config.force_push_allowed,
        force_flags=force_flags,
    )
    return location


def execute_run(
    kv: KVStore,
    git: GitRunner,
    *,
    settings: HoneydewSettings,
    verbose: bool = True,
    force_push_allowed: bool = True,
) -> RunConfig:
    """Run everything end to end; return the ``RunConfig`` that was used.

    Any failure surfaces as a ``HoneydewError`` subclass; nothing after the
    failing step runs.
    """
    commit_count = fetch_commit_count(kv, settings.config_key, verbose=verbose)
    run_config = RunConfig(
        commit_count=commit_count,
        verbose=verbose,
        force_push_allowed=force_push_allowed,
    )
    logger.debug("Run config: %s", run_config)
    if not settings.home:
        raise MissingConfig("env HOME is not defined")
    execute_git(git, run_config, settings.repo_dir, force_flags=settings.force_push_flags)
    return run_config
