"""Push driver: publish local master as remote main, with one fallback push."""

from __future__ import annotations

import logging
from typing import Sequence

from honeydew.application.ports import GitRunner
from honeydew.config.constants import PUSH_REFSPEC, PUSH_REMOTE
from honeydew.domain import ForcePushError, GitResult, PushError, RepositoryLocation

logger = logging.getLogger(__name__)


def push_args(force_flags: Sequence[str] = ()) -> list[str]:
    return ["push", *force_flags, PUSH_REMOTE, PUSH_REFSPEC]


def push(
    git: GitRunner,
    location: RepositoryLocation,
    *,
    force_push_allowed: bool,
    force_flags: Sequence[str] = (),
) -> GitResult:
    """Run ``git push origin master:main``; on failure optionally push once more.

    The second push adds ``force_flags`` (none by default, so it repeats the
    first command verbatim).  Raises ``PushError`` when the first push fails
    and no fallback is allowed, ``ForcePushError`` when the fallback fails.
    """
    args = push_args()
    try:
        result = git.run(args, cwd=location.path)
    except OSError as e:
        raise PushError(f"git push could not be started: {e}", args) from e
    if result.ok:
        return result
    if not force_push_allowed:
        raise PushError(f"git {' '.join(args)} failed with exit status {result.returncode}", args, result.returncode)

    retry_args = push_args(force_flags)
    logger.warning("Push failed (exit %d); retrying with: git %s", result.returncode, " ".join(retry_args))
    try:
        retry = git.run(retry_args, cwd=location.path)
    except OSError as e:
        raise ForcePushError(f"force push could not be started: {e}", retry_args) from e
    if not retry.ok:
        raise ForcePushError(
            f"force push failed: git {' '.join(retry_args)} exited with status {retry.returncode}",
            retry_args,
            retry.returncode,
        )
    return retry
