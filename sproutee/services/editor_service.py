"""Opening freshly created worktrees in an editor."""

import os
import subprocess
import sys
from typing import List, Optional, Tuple

from sproutee.constants import EDITOR_NAMES
from sproutee.exceptions import EditorLaunchError
from sproutee.utils.logging import get_logger

logger = get_logger(__name__)


def _platform() -> str:
    """Normalized platform name: darwin, windows or linux."""
    if sys.platform == "darwin":
        return "darwin"
    if sys.platform.startswith("win"):
        return "windows"
    if sys.platform.startswith("linux"):
        return "linux"
    return sys.platform


def editor_command(editor: str, path: str, platform: Optional[str] = None) -> List[str]:
    """Command line that opens path in editor on the given platform.

    Raises:
        EditorLaunchError: For unknown editors or unsupported platforms
    """
    platform = platform or _platform()
    display_name = EDITOR_NAMES.get(editor, editor)

    if editor == "cursor":
        command = ["cursor", path]
    elif editor == "vscode":
        command = ["code", path]
    elif editor == "xcode":
        if platform != "darwin":
            raise EditorLaunchError(display_name, "Xcode is only available on macOS")
        return ["xed", path]
    elif editor == "android-studio":
        if platform == "darwin":
            return ["open", "-a", "Android Studio", path]
        if platform == "windows":
            return ["studio", path]
        if platform == "linux":
            return ["studio.sh", path]
        raise EditorLaunchError(display_name, f"unsupported operating system: {platform}")
    else:
        raise EditorLaunchError(display_name, f"unsupported editor: {editor}")

    if platform not in ("darwin", "windows", "linux"):
        raise EditorLaunchError(display_name, f"unsupported operating system: {platform}")
    return command


def resolve_target_path(worktree_path: str, target_dir: Optional[str]) -> Tuple[str, Optional[str]]:
    """Directory to open: target_dir relative to the worktree (or absolute).

    Returns:
        The path to open, and the missing directory when it fell back to
        the worktree root (None otherwise)
    """
    if not target_dir:
        return worktree_path, None

    if os.path.isabs(target_dir):
        target_path = target_dir
    else:
        target_path = os.path.join(worktree_path, target_dir)

    if not os.path.exists(target_path):
        logger.debug(f"Directory {target_path} does not exist, falling back to {worktree_path}")
        return worktree_path, target_path
    return target_path, None


def open_in_editor(path: str, editor: str) -> None:
    """Start the editor on path without waiting for it to exit."""
    command = editor_command(editor, path)
    logger.debug(f"Launching editor: {' '.join(command)}")
    try:
        subprocess.Popen(command)
    except OSError as e:
        raise EditorLaunchError(EDITOR_NAMES.get(editor, editor), str(e)) from e
