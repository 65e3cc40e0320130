"""Domain and application errors.

Every failure a run can hit maps to exactly one class here; the CLI reports
any ``HoneydewError`` as a single log line.
"""

from __future__ import annotations

from typing import Sequence


class HoneydewError(Exception):
    """Base for honeydew errors."""
    pass


# Config fetcher

class ConfigUnavailable(HoneydewError):
    """Consul could not be reached, answered with an error, or the key is absent."""
    pass


class ConfigMalformed(HoneydewError):
    """The stored value is not JSON or does not look like {"num": <int>}."""
    pass


# Repository locator

class MissingConfig(HoneydewError):
    """A required environment variable is unset or blank."""
    pass


class PathNotFound(HoneydewError):
    """The repository path does not exist."""
    pass


class NotADirectory(HoneydewError):
    """The repository path exists but is not a directory."""
    pass


class PathError(HoneydewError):
    """Any other failure while inspecting or entering the repository path."""
    pass


# Tracked file

class FileOpenError(HoneydewError):
    """The tracked file could not be created or opened for append."""
    pass


class WriteError(HoneydewError):
    """Appending to the tracked file failed."""
    pass


class CloseError(HoneydewError):
    """Closing the tracked file failed. The CLI exits with status 1."""
    pass


# git

class GitCommandError(HoneydewError):
    """A git invocation exited non-zero or could not be started."""

    def __init__(self, message: str, args: Sequence[str] = (), returncode: int | None = None):
        super().__init__(message)
        self.git_args = tuple(args)
        self.returncode = returncode


class StageError(GitCommandError):
    """``git add`` failed."""
    pass


class CommitError(GitCommandError):
    """``git commit`` failed."""
    pass


class PushError(GitCommandError):
    """The normal ``git push`` failed."""
    pass


class ForcePushError(GitCommandError):
    """The fallback push after a failed normal push also failed."""
    pass
