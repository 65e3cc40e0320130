from .runner import SubprocessGitRunner, find_git

__all__ = ["SubprocessGitRunner", "find_git"]
