"""Custom exceptions for sproutee"""

from typing import Optional


class SprouteeError(Exception):
    """Base exception for all sproutee errors."""
    pass


class NotAGitRepositoryError(SprouteeError):
    """Exception raised when no enclosing Git repository can be found."""

    def __init__(self, start_dir: Optional[str] = None):
        self.start_dir = start_dir
        error_msg = "not inside a Git repository"
        if start_dir:
            error_msg += f" (searched upward from {start_dir})"
        super().__init__(error_msg)


class GitOperationError(SprouteeError):
    """Exception raised for errors in Git operations."""

    def __init__(self, operation: str, path: Optional[str] = None, message: Optional[str] = None):
        self.operation = operation
        self.path = path
        self.message = message

        error_msg = f"Git operation '{operation}' failed"
        if path:
            error_msg += f" for '{path}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class InventoryUnavailableError(GitOperationError):
    """Exception raised when the worktree list cannot be obtained."""

    def __init__(self, repo_root: str, message: Optional[str] = None):
        super().__init__("worktree list", repo_root, message)


class StatusUnavailableError(GitOperationError):
    """Exception raised when the status of a worktree cannot be queried."""

    def __init__(self, worktree_path: str, message: Optional[str] = None):
        super().__init__("status", worktree_path, message)


class RemovalFailedError(GitOperationError):
    """Exception raised when a single worktree could not be removed."""

    def __init__(self, worktree_path: str, message: Optional[str] = None):
        super().__init__("worktree remove", worktree_path, message)


class WorktreeCreationError(GitOperationError):
    """Exception raised when a new worktree could not be created."""

    def __init__(self, worktree_path: str, message: Optional[str] = None):
        super().__init__("worktree add", worktree_path, message)


class ConfigError(SprouteeError):
    """Exception raised for invalid or unreadable configuration files."""
    pass


class ConfigNotFoundError(ConfigError):
    """Exception raised when no configuration file exists up the directory tree."""

    def __init__(self, file_name: str):
        self.file_name = file_name
        super().__init__(f"configuration file '{file_name}' not found")


class EditorLaunchError(SprouteeError):
    """Exception raised when an editor cannot be started."""

    def __init__(self, editor: str, message: str):
        self.editor = editor
        self.message = message
        super().__init__(f"Failed to open {editor}: {message}")
