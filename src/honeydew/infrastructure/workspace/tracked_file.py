"""The text file every commit touches, with guaranteed close."""

from __future__ import annotations

import contextlib
import os
from pathlib import Path
from typing import IO, Iterator

from honeydew.config.constants import APPENDED_LINE, TRACKED_FILE_MODE
from honeydew.domain import CloseError, FileOpenError, WriteError


def _create_owner_only(path: str, flags: int) -> int:
    return os.open(path, flags, TRACKED_FILE_MODE)


@contextlib.contextmanager
def open_tracked_file(path: Path) -> Iterator[IO[str]]:
    """Open ``path`` for append, creating it with mode 0600 when missing.

    The handle is closed on exit whatever happens inside the block.  A failed
    close raises ``CloseError`` (chained to any error already in flight).
    """
    try:
        handle = open(path, "a", encoding="utf-8", opener=_create_owner_only)
    except OSError as e:
        raise FileOpenError(f"cannot open {str(path)!r} for append: {e}") from e
    try:
        yield handle
    finally:
        try:
            handle.close()
        except OSError as e:
            raise CloseError(f"closing {str(path)!r} failed: {e}") from e


def append_line(handle: IO[str], line: str = APPENDED_LINE) -> None:
    """Write one line and flush it so git sees it on disk."""
    try:
        handle.write(line)
        handle.flush()
    except OSError as e:
        raise WriteError(f"writing to {getattr(handle, 'name', '?')!r} failed: {e}") from e
