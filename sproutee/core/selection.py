"""Parsing of the clean prompt's free-form selection input.

The prompt accepts ``cancel``, ``all``, ``clean`` or a comma separated list
of 1-based indices. Input is parsed into one of the selection variants below;
each variant resolves itself to concrete indices against the analyzed
worktrees.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple, Union

from sproutee.constants import SELECT_ALL, SELECT_CANCEL, SELECT_CLEAN
from sproutee.models.worktree import AnalyzedWorktree
from sproutee.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CancelSelection:
    """Abort without removing anything."""

    def resolve(self, analyses: Sequence[AnalyzedWorktree]) -> List[int]:
        return []


@dataclass(frozen=True)
class AllSelection:
    """Every analyzed worktree, in ascending order."""

    def resolve(self, analyses: Sequence[AnalyzedWorktree]) -> List[int]:
        return [a.index for a in analyses]


@dataclass(frozen=True)
class CleanSelection:
    """Only worktrees without staged, unstaged or untracked changes."""

    def resolve(self, analyses: Sequence[AnalyzedWorktree]) -> List[int]:
        return [a.index for a in analyses if a.is_clean]


@dataclass(frozen=True)
class IndexSelection:
    """Explicit indices as typed by the user, possibly out of range or repeated."""

    indices: Tuple[int, ...] = ()

    def resolve(self, analyses: Sequence[AnalyzedWorktree]) -> List[int]:
        count = len(analyses)
        selected = []
        for idx in self.indices:
            if 1 <= idx <= count:
                selected.append(idx)
            else:
                logger.debug(f"Ignoring out-of-range selection {idx} (1-{count})")
        return selected


Selection = Union[CancelSelection, AllSelection, CleanSelection, IndexSelection]


def parse_selection(text: str) -> Selection:
    """Parse a line typed at the selection prompt."""
    text = text.strip()

    if text == SELECT_CANCEL:
        return CancelSelection()
    if text == SELECT_ALL:
        return AllSelection()
    if text == SELECT_CLEAN:
        return CleanSelection()

    indices = []
    for part in text.split(","):
        token = part.strip()
        try:
            indices.append(int(token))
        except ValueError:
            if token:
                logger.debug(f"Ignoring invalid selection token {token!r}")
    return IndexSelection(tuple(indices))
