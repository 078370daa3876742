"""Shared constants for sproutee."""

# Worktrees created by sproutee live below the repository's git directory
WORKTREE_DIR = ".git/sproutee-worktrees"
WORKTREE_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"

CONFIG_FILE_NAME = "sproutee.json"

# Markers used by git's porcelain formats
GITDIR_MARKER = "gitdir: "
BRANCH_REF_PREFIX = "refs/heads/"
SHORT_SHA_LENGTH = 8


# Selection keywords accepted by the clean prompt
SELECT_CANCEL = "cancel"
SELECT_ALL = "all"
SELECT_CLEAN = "clean"


# Status display phrases
STATUS_CLEAN_TEXT = "Clean (no changes)"
STATUS_STAGED_TEXT = "staged changes"
STATUS_UNSTAGED_TEXT = "unstaged changes"


# Supported editors mapped to their display names
EDITOR_NAMES = {
    "cursor": "Cursor",
    "vscode": "VS Code",
    "xcode": "Xcode",
    "android-studio": "Android Studio",
}


# Symbol constants
SYMBOL_OK = "✅"
SYMBOL_FAIL = "❌"
SYMBOL_WARN = "⚠️ "
SYMBOL_SKIP = "⏭️ "
SYMBOL_FOLDER = "📁"
SYMBOL_SEARCH = "🔍"
SYMBOL_CHANGED = "📝"
SYMBOL_UNTRACKED = "📄"
SYMBOL_TRASH = "🗑️ "
SYMBOL_PROCESSING = "🔄"
SYMBOL_LAUNCH = "🚀"
SYMBOL_HINT = "💡"


# CLI colors (Rich color names) for clean outcomes
OUTCOME_COLORS = {
    "deleted": "green",
    "skipped": "yellow",
    "failed": "red",
    "would-delete": "red",
    "would-confirm": "yellow",
}
