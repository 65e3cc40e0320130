"""Ports (abstract interfaces) used by the application layer.

Each port is a ``Protocol`` so the application reaches Consul and git only
through the *shape* of the collaborator.  Infrastructure adapters satisfy
these shapes and tests substitute recording fakes.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Protocol, Sequence

from honeydew.domain import GitResult


class KVStore(Protocol):
    """Read-only key-value store (Consul KV in production)."""

    def get(self, key: str) -> Optional[bytes]:
        """Return the raw value stored under ``key``, or ``None`` when the key is absent.

        Transport failures and error statuses are raised, not returned.
        """
        ...


class GitRunner(Protocol):
    """Runs one git command to completion.

    stderr always reaches the operator's terminal; stdout does only when
    ``show_stdout`` is True.  Raises ``OSError`` when git cannot be started.
    """

    def run(self, args: Sequence[str], *, cwd: Path, show_stdout: bool = False) -> GitResult: ...
