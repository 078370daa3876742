"""Formatting utilities for sproutee."""

from .worktree import format_outcome, format_short_sha, format_worktree_line, OUTCOME_LABELS

__all__ = [
    "format_outcome",
    "format_short_sha",
    "format_worktree_line",
    "OUTCOME_LABELS",
]
