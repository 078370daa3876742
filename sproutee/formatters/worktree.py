"""Worktree and clean outcome formatting utilities."""

from typing import Optional

from sproutee.constants import SHORT_SHA_LENGTH
from sproutee.models.clean import CleanOutcome
from sproutee.models.worktree import WorktreeInfo

OUTCOME_LABELS = {
    CleanOutcome.DELETED: "deleted",
    CleanOutcome.SKIPPED: "skipped",
    CleanOutcome.FAILED: "failed",
    CleanOutcome.WOULD_DELETE: "would delete",
    CleanOutcome.WOULD_CONFIRM: "would require confirmation",
}


def format_outcome(outcome: CleanOutcome) -> str:
    """
    Format a clean outcome as display text.

    Args:
        outcome: Outcome enum value

    Returns:
        Label such as "would delete" or "would require confirmation"
    """
    return OUTCOME_LABELS[outcome]


def format_short_sha(commit_sha: Optional[str]) -> str:
    """First eight characters of a commit sha, or an empty string."""
    if not commit_sha:
        return ""
    return commit_sha[:SHORT_SHA_LENGTH]


def format_worktree_line(index: int, worktree: WorktreeInfo) -> str:
    """
    Format a worktree for the ``list`` command.

    Example:
        "  1. /repo/.git/sproutee-worktrees/feat_20240101_120000 (branch: feat) [1a2b3c4d]"
    """
    line = f"  {index}. {worktree.path}"
    if worktree.branch_name:
        line += f" (branch: {worktree.branch_name})"
    short_sha = format_short_sha(worktree.commit_sha)
    if short_sha:
        line += f" [{short_sha}]"
    return line
