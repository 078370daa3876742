"""Repository discovery for sproutee."""

import os
from pathlib import Path
from typing import Optional, Union

from sproutee.constants import GITDIR_MARKER
from sproutee.exceptions import NotAGitRepositoryError
from sproutee.utils.logging import get_logger

logger = get_logger(__name__)


def _is_git_entry(git_path: Path) -> bool:
    """Return True for a .git directory or a worktree's ``gitdir:`` pointer file."""
    if git_path.is_dir():
        return True
    if git_path.is_file():
        try:
            return git_path.read_text(encoding="utf-8", errors="replace").startswith(GITDIR_MARKER)
        except OSError as e:
            logger.debug(f"Could not read {git_path}: {e}")
    return False


def find_git_repository(start_dir: Optional[Union[str, Path]] = None) -> str:
    """Find the root of the Git repository enclosing start_dir.

    Args:
        start_dir: Directory to start from (defaults to the current directory)

    Returns:
        Absolute path of the directory containing the ``.git`` entry

    Raises:
        NotAGitRepositoryError: If the filesystem root is reached without a match
    """
    origin = Path(start_dir if start_dir is not None else os.getcwd()).absolute()
    current = origin

    while True:
        if _is_git_entry(current / ".git"):
            logger.debug(f"Found git repository at {current}")
            return str(current)

        parent = current.parent
        if parent == current:
            break
        current = parent

    raise NotAGitRepositoryError(str(origin))
