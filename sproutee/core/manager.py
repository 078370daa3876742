"""Worktree management for sproutee"""

import os
from pathlib import Path
from typing import List, Optional

from sproutee.models.worktree import AnalyzedWorktree, WorktreeInfo
from sproutee.services.git import WorktreeService, find_git_repository
from sproutee.utils.logging import get_logger

logger = get_logger(__name__)


def _same_path(a: str, b: str) -> bool:
    """Compare paths after resolving symlinks (git reports real paths)."""
    return os.path.normcase(str(Path(a).resolve())) == os.path.normcase(str(Path(b).resolve()))


class WorktreeManager:
    """Entry point for inventory, analysis and creation of worktrees."""

    def __init__(self, repo_root: str, worktree_service: Optional[WorktreeService] = None):
        """Initialize WorktreeManager.

        Args:
            repo_root: Root directory of the git repository
            worktree_service: Service used to talk to git (created if omitted)
        """
        self.repo_root = repo_root
        self.worktree_service = worktree_service or WorktreeService(repo_root)

    @classmethod
    def from_cwd(cls, start_dir: Optional[str] = None) -> "WorktreeManager":
        """Create a manager for the repository enclosing start_dir (default: cwd)."""
        return cls(find_git_repository(start_dir))

    def is_main_worktree(self, worktree: WorktreeInfo) -> bool:
        return _same_path(worktree.path, self.repo_root)

    def list_worktrees(self) -> List[WorktreeInfo]:
        """All worktrees git knows about, including the main one."""
        return self.worktree_service.list_worktrees()

    def list_cleanable_worktrees(self) -> List[WorktreeInfo]:
        """Worktrees that may be removed; the main worktree is never one of them."""
        return [wt for wt in self.list_worktrees() if not self.is_main_worktree(wt)]

    def list_analyzed(self) -> List[AnalyzedWorktree]:
        """Cleanable worktrees with their current status and 1-based index.

        Raises:
            InventoryUnavailableError: If the worktree list cannot be read
            StatusUnavailableError: If any worktree's status cannot be read
        """
        analyses = []
        for index, worktree in enumerate(self.list_cleanable_worktrees(), start=1):
            status = self.worktree_service.get_worktree_status(worktree.path)
            analyses.append(AnalyzedWorktree(index=index, info=worktree, status=status))
        return analyses

    def remove_worktree(self, path: str, force: bool = False) -> None:
        self.worktree_service.remove_worktree(path, force=force)

    def create_worktree(self, name: str, branch: Optional[str] = None) -> str:
        """Create a worktree named name on branch (defaults to name)."""
        return self.worktree_service.create_worktree(name, branch or name)


def list_analyzed(repo_root: str) -> List[AnalyzedWorktree]:
    """Analyze every removable worktree of the repository at repo_root."""
    return WorktreeManager(repo_root).list_analyzed()
