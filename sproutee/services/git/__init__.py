"""Git-related services for sproutee."""

from .repository import find_git_repository
from .worktrees import WorktreeService, parse_status_porcelain, parse_worktree_list

__all__ = [
    "find_git_repository",
    "WorktreeService",
    "parse_status_porcelain",
    "parse_worktree_list",
]
