"""Domain layer: entities and value objects. No I/O."""

from .models import GitResult, RepositoryLocation, RunConfig
from .errors import (
    CloseError,
    CommitError,
    ConfigMalformed,
    ConfigUnavailable,
    FileOpenError,
    ForcePushError,
    GitCommandError,
    HoneydewError,
    MissingConfig,
    NotADirectory,
    PathError,
    PathNotFound,
    PushError,
    StageError,
    WriteError,
)

__all__ = [
    "GitResult",
    "RepositoryLocation",
    "RunConfig",
    "CloseError",
    "CommitError",
    "ConfigMalformed",
    "ConfigUnavailable",
    "FileOpenError",
    "ForcePushError",
    "GitCommandError",
    "HoneydewError",
    "MissingConfig",
    "NotADirectory",
    "PathError",
    "PathNotFound",
    "PushError",
    "StageError",
    "WriteError",
]
