"""Repository locator: validate HONEYDEW_REPO_DIR and enter it."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path
from typing import Optional

from honeydew.config.constants import REPO_DIR_ENV
from honeydew.domain import MissingConfig, NotADirectory, PathError, PathNotFound, RepositoryLocation

logger = logging.getLogger(__name__)


def locate_repository(raw: Optional[str], *, chdir: bool = True) -> RepositoryLocation:
    """Resolve the raw env value to an existing directory and make it the process cwd.

    Whitespace around the value is ignored and ``~`` is expanded.  Raises
    ``MissingConfig`` for an unset/blank value, ``PathNotFound`` when nothing
    exists there, ``NotADirectory`` for a non-directory and ``PathError`` for
    any other stat or chdir failure.
    """
    trimmed = (raw or "").strip()
    if not trimmed:
        raise MissingConfig(f"{REPO_DIR_ENV} is not set")
    path = Path(trimmed).expanduser().absolute()
    try:
        st = path.stat()
    except FileNotFoundError as e:
        raise PathNotFound(f"directory {str(path)!r} does not exist") from e
    except OSError as e:
        raise PathError(f"cannot open directory {str(path)!r}: {e}") from e
    if not stat.S_ISDIR(st.st_mode):
        raise NotADirectory(f"{str(path)!r} is not a directory")
    if chdir:
        try:
            os.chdir(path)
        except OSError as e:
            raise PathError(f"cd {str(path)!r} failed: {e}") from e
        logger.debug("Working directory is now %s", path)
    return RepositoryLocation(path=path)
