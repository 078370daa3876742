"""Data models for sproutee."""

from .worktree import AnalyzedWorktree, StatusFinding, WorktreeInfo, WorktreeStatus
from .clean import CleanOutcome, CleanResult, CleanState, CleanSummary

__all__ = [
    "AnalyzedWorktree",
    "StatusFinding",
    "WorktreeInfo",
    "WorktreeStatus",
    "CleanOutcome",
    "CleanResult",
    "CleanState",
    "CleanSummary",
]
