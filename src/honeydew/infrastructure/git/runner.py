"""Run git as a subprocess with its stderr wired to the operator's terminal."""

from __future__ import annotations

import logging
import shlex
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from honeydew.domain import GitResult

logger = logging.getLogger(__name__)


@dataclass
class SubprocessGitRunner:
    """``GitRunner`` backed by the git CLI.

    stderr is inherited so git's diagnostics stream live; stdout is inherited
    only on request and otherwise discarded.  No timeout: each command runs to
    completion.
    """
    executable: str = "git"

    def run(self, args: Sequence[str], *, cwd: Path, show_stdout: bool = False) -> GitResult:
        cmd = [self.executable, *args]
        logger.debug("Running %s in %s", " ".join(shlex.quote(x) for x in cmd), cwd)
        p = subprocess.run(
            cmd,
            cwd=str(cwd),
            stdout=None if show_stdout else subprocess.DEVNULL,
            stderr=None,
            check=False,
        )
        logger.debug("%s exited with %d", cmd[1] if len(cmd) > 1 else cmd[0], p.returncode)
        return GitResult(args=tuple(args), returncode=p.returncode)


def find_git(executable: str = "git") -> Optional[str]:
    """Absolute path of the git executable, or None when it is not on PATH."""
    return shutil.which(executable)
