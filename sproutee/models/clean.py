"""Outcome models for the clean workflow"""
from enum import Enum
from dataclasses import dataclass, field
from typing import List, Optional

from sproutee.models.worktree import AnalyzedWorktree


class CleanOutcome(Enum):
    """What happened (or would happen) to a single worktree."""
    DELETED = "deleted"
    SKIPPED = "skipped"
    FAILED = "failed"
    WOULD_DELETE = "would-delete"
    WOULD_CONFIRM = "would-confirm"


class CleanState(Enum):
    """Terminal state reached by the clean workflow."""
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    NO_WORKTREES = "no-worktrees"
    NO_CLEAN_WORKTREES = "no-clean-worktrees"
    NO_VALID_SELECTION = "no-valid-selection"
    DRY_RUN = "dry-run"


@dataclass
class CleanResult:
    """Outcome for one analyzed worktree."""
    worktree: AnalyzedWorktree
    outcome: CleanOutcome
    error: Optional[str] = None


@dataclass
class CleanSummary:
    """Everything the clean workflow did, in processing order."""
    state: CleanState
    results: List[CleanResult] = field(default_factory=list)

    def add(self, worktree: AnalyzedWorktree, outcome: CleanOutcome, error: Optional[str] = None) -> CleanResult:
        result = CleanResult(worktree, outcome, error)
        self.results.append(result)
        return result

    def with_outcome(self, outcome: CleanOutcome) -> List[CleanResult]:
        return [r for r in self.results if r.outcome == outcome]

    @property
    def deleted(self) -> List[CleanResult]:
        return self.with_outcome(CleanOutcome.DELETED)

    @property
    def skipped(self) -> List[CleanResult]:
        return self.with_outcome(CleanOutcome.SKIPPED)

    @property
    def failed(self) -> List[CleanResult]:
        return self.with_outcome(CleanOutcome.FAILED)
