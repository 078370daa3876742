"""Worktree operations service for sproutee."""

import os
from datetime import datetime
from typing import Dict, List, Optional

import git

from sproutee.constants import BRANCH_REF_PREFIX, WORKTREE_DIR, WORKTREE_TIMESTAMP_FORMAT
from sproutee.exceptions import (
    InventoryUnavailableError,
    RemovalFailedError,
    StatusUnavailableError,
    WorktreeCreationError,
)
from sproutee.models.worktree import StatusFinding, WorktreeInfo, WorktreeStatus
from sproutee.utils.logging import get_logger

logger = get_logger(__name__)


def describe_git_error(command: str, error: git.exc.GitCommandError) -> str:
    """Build a readable message from a GitCommandError."""
    stderr = (error.stderr if hasattr(error, "stderr") else str(error)).strip()
    status = error.status if hasattr(error, "status") else "unknown"
    if stderr:
        return f"{command} failed (exit {status}): {stderr}"
    return f"{command} failed with exit code {status}"


def parse_worktree_list(output: str) -> List[WorktreeInfo]:
    """Parse ``git worktree list --porcelain`` output.

    Format::

        worktree /path/to/worktree
        HEAD commit_sha
        branch refs/heads/branch-name
        (blank line between worktrees)

    Unknown keys and lines without a value (``bare``, ``detached``) are ignored.
    """
    worktree_list: List[WorktreeInfo] = []
    current: Dict[str, str] = {}

    def flush():
        if current.get("path"):
            worktree_list.append(
                WorktreeInfo(
                    path=current["path"],
                    branch_name=current.get("branch", ""),
                    commit_sha=current.get("HEAD", ""),
                )
            )
        current.clear()

    for line in output.split("\n"):
        line = line.strip()
        if not line:
            # Empty line marks end of worktree entry
            flush()
            continue

        key, sep, value = line.partition(" ")
        if not sep:
            logger.debug(f"Ignoring porcelain line without value: {line!r}")
            continue

        if key == "worktree":
            current["path"] = value
        elif key == "HEAD":
            current["HEAD"] = value
        elif key == "branch":
            if value.startswith(BRANCH_REF_PREFIX):
                value = value[len(BRANCH_REF_PREFIX):]
            current["branch"] = value

    # Handle last entry if no trailing blank line
    flush()
    return worktree_list


def parse_status_porcelain(output: str) -> WorktreeStatus:
    """Classify ``git status --porcelain`` output.

    Each line is ``XY path``: X = index status (staged), Y = working tree
    status (unstaged), ``??`` = untracked.
    """
    findings = set()
    changed_files: List[str] = []
    untracked_files: List[str] = []

    for line in output.split("\n"):
        if len(line) < 2:
            continue

        index_status = line[0]
        worktree_status = line[1]
        filename = line[3:].strip()

        if index_status == "?" and worktree_status == "?":
            findings.add(StatusFinding.UNTRACKED)
            untracked_files.append(filename)
            continue

        if index_status not in (" ", "?"):
            findings.add(StatusFinding.STAGED)
            if filename not in changed_files:
                changed_files.append(filename)

        if worktree_status not in (" ", "?"):
            findings.add(StatusFinding.UNSTAGED)
            if filename not in changed_files:
                changed_files.append(filename)

    return WorktreeStatus(
        findings=frozenset(findings),
        changed_files=tuple(changed_files),
        untracked_files=tuple(untracked_files),
    )


class WorktreeService:
    """Service for managing git worktrees."""

    def __init__(self, repo_path: str):
        """Initialize the worktree service.

        Args:
            repo_path: Path to the git repository root
        """
        self.repo_path = repo_path

    def _get_repo(self) -> git.Repo:
        """Open the repository; GitPython repos are cheap to create."""
        return git.Repo(self.repo_path)

    @property
    def worktree_base_path(self) -> str:
        return os.path.join(self.repo_path, WORKTREE_DIR)

    def list_worktrees(self) -> List[WorktreeInfo]:
        """Get information about all worktrees, main worktree first.

        Raises:
            InventoryUnavailableError: If git cannot list worktrees
        """
        try:
            repo = self._get_repo()
            output = repo.git.worktree("list", "--porcelain")
        except git.exc.GitCommandError as e:
            message = describe_git_error("git worktree list", e)
            logger.debug(f"Could not list worktrees: {message}")
            raise InventoryUnavailableError(self.repo_path, message) from e
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
            raise InventoryUnavailableError(self.repo_path, f"cannot open repository: {e}") from e

        worktree_list = parse_worktree_list(output)
        logger.debug(f"Found {len(worktree_list)} worktrees")
        for wt in worktree_list:
            logger.debug(f"  {wt}")
        return worktree_list

    def get_worktree_status(self, worktree_path: str) -> WorktreeStatus:
        """Classify the uncommitted state of a worktree.

        Raises:
            StatusUnavailableError: If git status fails in that directory
        """
        if not os.path.isdir(worktree_path):
            raise StatusUnavailableError(worktree_path, "worktree directory does not exist")

        try:
            output = git.Git(worktree_path).status("--porcelain")
        except git.exc.GitCommandError as e:
            message = describe_git_error("git status", e)
            logger.debug(f"Could not check worktree status for {worktree_path}: {message}")
            raise StatusUnavailableError(worktree_path, message) from e

        status = parse_status_porcelain(output)
        logger.debug(f"Status of {worktree_path}: {status.summary()}")
        return status

    def remove_worktree(self, path: str, force: bool = False) -> None:
        """Remove the worktree at path.

        Args:
            path: Path to the worktree directory
            force: Remove even if the working tree is dirty

        Raises:
            RemovalFailedError: If git refuses or fails to remove it
        """
        args = ["remove", path]
        if force:
            args.append("--force")

        try:
            repo = self._get_repo()
            repo.git.worktree(*args)
        except git.exc.GitCommandError as e:
            message = describe_git_error("git worktree remove", e)
            logger.debug(f"Failed to remove worktree at {path}: {message}")
            raise RemovalFailedError(path, message) from e

        logger.info(f"Removed worktree at {path}")

    def generate_worktree_dir_name(self, name: str, now: Optional[datetime] = None) -> str:
        """Directory name for a new worktree: ``<name>_<YYYYmmdd_HHMMSS>``."""
        timestamp = (now or datetime.now()).strftime(WORKTREE_TIMESTAMP_FORMAT)
        return f"{name}_{timestamp}"

    def create_worktree(self, name: str, branch: str) -> str:
        """Create a worktree for branch below the sproutee worktree directory.

        The branch is created from HEAD when it does not exist locally.

        Returns:
            Path of the new worktree
        """
        base_path = self.worktree_base_path
        worktree_path = os.path.join(base_path, self.generate_worktree_dir_name(name))

        try:
            os.makedirs(base_path, exist_ok=True)
        except OSError as e:
            raise WorktreeCreationError(worktree_path, f"failed to create worktree base directory: {e}") from e

        try:
            repo = self._get_repo()
            if branch in [head.name for head in repo.heads]:
                repo.git.worktree("add", worktree_path, branch)
            else:
                logger.debug(f"Branch {branch} does not exist, creating it")
                repo.git.worktree("add", "-b", branch, worktree_path)
        except git.exc.GitCommandError as e:
            message = describe_git_error("git worktree add", e)
            logger.debug(f"Failed to create worktree at {worktree_path}: {message}")
            raise WorktreeCreationError(worktree_path, message) from e

        logger.info(f"Created worktree at {worktree_path} for branch {branch}")
        return worktree_path
