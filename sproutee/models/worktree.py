"""Worktree data models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Tuple

from sproutee.constants import (
    STATUS_CLEAN_TEXT,
    STATUS_STAGED_TEXT,
    STATUS_UNSTAGED_TEXT,
)


@dataclass(frozen=True)
class WorktreeInfo:
    """Information about a git worktree."""

    path: str
    branch_name: str  # Empty for a detached HEAD
    commit_sha: str

    @property
    def is_detached(self) -> bool:
        return not self.branch_name

    def __str__(self) -> str:
        """String representation of worktree."""
        branch = self.branch_name or "(detached)"
        return f"{branch} @ {self.path}"


class StatusFinding(Enum):
    """Kinds of uncommitted state a worktree can have."""
    STAGED = "staged"
    UNSTAGED = "unstaged"
    UNTRACKED = "untracked"


# Order in which findings are reported in summaries
FINDING_ORDER = (StatusFinding.STAGED, StatusFinding.UNSTAGED, StatusFinding.UNTRACKED)


@dataclass(frozen=True)
class WorktreeStatus:
    """Classified result of ``git status --porcelain`` for one worktree."""

    findings: FrozenSet[StatusFinding] = frozenset()
    changed_files: Tuple[str, ...] = ()
    untracked_files: Tuple[str, ...] = ()

    @property
    def has_staged_changes(self) -> bool:
        return StatusFinding.STAGED in self.findings

    @property
    def has_unstaged_changes(self) -> bool:
        return StatusFinding.UNSTAGED in self.findings

    @property
    def has_untracked_files(self) -> bool:
        return StatusFinding.UNTRACKED in self.findings

    @property
    def is_clean(self) -> bool:
        return not self.findings

    def _phrase(self, finding: StatusFinding) -> str:
        if finding is StatusFinding.STAGED:
            return STATUS_STAGED_TEXT
        if finding is StatusFinding.UNSTAGED:
            return STATUS_UNSTAGED_TEXT
        count = len(self.untracked_files)
        return f"{count} untracked file{'s' if count != 1 else ''}"

    def summary(self) -> str:
        """Human readable summary, e.g. ``Has staged changes, 2 untracked files``."""
        if self.is_clean:
            return STATUS_CLEAN_TEXT
        phrases = [self._phrase(f) for f in FINDING_ORDER if f in self.findings]
        return "Has " + ", ".join(phrases)


@dataclass(frozen=True)
class AnalyzedWorktree:
    """A worktree paired with its status and its 1-based position in the clean listing."""

    index: int
    info: WorktreeInfo
    status: WorktreeStatus = field(default_factory=WorktreeStatus)

    @property
    def path(self) -> str:
        return self.info.path

    @property
    def is_clean(self) -> bool:
        return self.status.is_clean
