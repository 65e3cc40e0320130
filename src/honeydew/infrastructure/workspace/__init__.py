"""Local working tree: repository location and the tracked file."""

from .repository import locate_repository
from .tracked_file import append_line, open_tracked_file

__all__ = ["append_line", "locate_repository", "open_tracked_file"]
