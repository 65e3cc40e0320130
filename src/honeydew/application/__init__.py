"""Application layer: use cases wired through ports."""

from .execute_run import execute_git, execute_run

__all__ = ["execute_git", "execute_run"]
