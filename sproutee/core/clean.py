"""Interactive selection and removal of worktrees (the ``clean`` command)."""

import os
from typing import Callable, List, Optional

from rich.console import Console
from rich.markup import escape

from sproutee.config import Config
from sproutee.constants import (
    OUTCOME_COLORS,
    SYMBOL_CHANGED,
    SYMBOL_FAIL,
    SYMBOL_FOLDER,
    SYMBOL_HINT,
    SYMBOL_OK,
    SYMBOL_PROCESSING,
    SYMBOL_SEARCH,
    SYMBOL_SKIP,
    SYMBOL_TRASH,
    SYMBOL_UNTRACKED,
    SYMBOL_WARN,
)
from sproutee.core.manager import WorktreeManager
from sproutee.core.selection import CancelSelection, CleanSelection, parse_selection
from sproutee.exceptions import RemovalFailedError
from sproutee.formatters import format_outcome
from sproutee.models.clean import CleanOutcome, CleanState, CleanSummary
from sproutee.models.worktree import AnalyzedWorktree
from sproutee.utils.logging import get_logger

logger = get_logger(__name__)

Prompt = Callable[[str], str]


def _name(analysis: AnalyzedWorktree) -> str:
    return escape(os.path.basename(analysis.path.rstrip("/\\")) or analysis.path)


class CleanWorkflow:
    """Present analyzed worktrees, read a selection and remove the chosen ones."""

    def __init__(
        self,
        manager: WorktreeManager,
        config: Config,
        console: Optional[Console] = None,
        prompt: Optional[Prompt] = None,
    ):
        self.manager = manager
        self.config = config
        self.console = console or Console()
        self.prompt = prompt or self.console.input

    def _ask(self, message: str) -> str:
        """Read one line; end of input counts as an empty answer."""
        try:
            return self.prompt(message)
        except EOFError:
            logger.debug("End of input while prompting")
            return ""

    def run(self) -> CleanSummary:
        analyses = self.manager.list_analyzed()

        if not analyses:
            self.console.print(f"{SYMBOL_FOLDER} No additional worktrees found to clean.")
            return CleanSummary(CleanState.NO_WORKTREES)

        self.present(analyses)

        if self.config.dry_run:
            return self.dry_run(analyses)

        selected = self.await_selection(analyses)
        if isinstance(selected, CleanSummary):
            return selected
        return self.process(analyses, selected)

    def present(self, analyses: List[AnalyzedWorktree]) -> None:
        """Print every analyzed worktree with its status."""
        self.console.print(f"{SYMBOL_SEARCH} Found {len(analyses)} worktree(s) to analyze:\n")
        for analysis in analyses:
            status = analysis.status
            branch = analysis.info.branch_name or "detached"
            self.console.print(
                f"{analysis.index}. {_name(analysis)} [dim]({escape(analysis.path)}, branch: {escape(branch)})[/dim]"
            )
            self.console.print(f"   {status.summary()}")
            # File lists only matter when the user will be asked to confirm
            if not status.is_clean and not self.config.force:
                if status.has_staged_changes or status.has_unstaged_changes:
                    files = escape(", ".join(status.changed_files))
                    self.console.print(f"   {SYMBOL_CHANGED} Changed files: {files}")
                if status.has_untracked_files:
                    files = escape(", ".join(status.untracked_files))
                    self.console.print(f"   {SYMBOL_UNTRACKED} Untracked files: {files}")
            self.console.print()

    def dry_run(self, analyses: List[AnalyzedWorktree]) -> CleanSummary:
        """Report what each worktree would go through without removing anything."""
        summary = CleanSummary(CleanState.DRY_RUN)
        self.console.print(f"{SYMBOL_SEARCH} Dry run - no worktrees will be deleted:")
        for analysis in analyses:
            if analysis.is_clean or self.config.force:
                outcome = CleanOutcome.WOULD_DELETE
            else:
                outcome = CleanOutcome.WOULD_CONFIRM
            summary.add(analysis, outcome)
            color = OUTCOME_COLORS[outcome.value]
            self.console.print(f"   {analysis.index}. {_name(analysis)} - [{color}]{format_outcome(outcome)}[/{color}]")
        return summary

    def await_selection(self, analyses: List[AnalyzedWorktree]):
        """Ask which worktrees to delete.

        Returns:
            The selected indices, or a CleanSummary when the workflow ends here
        """
        self.console.print(f"{SYMBOL_HINT} Select worktrees to delete:")
        self.console.print("   - Enter numbers separated by commas (e.g., 1,3,5)")
        self.console.print("   - Enter 'clean' to delete only clean worktrees")
        self.console.print("   - Enter 'all' to delete all worktrees")
        self.console.print("   - Enter 'cancel' to abort")
        if not self.config.force:
            self.console.print(f"   {SYMBOL_WARN} Worktrees with uncommitted changes will require confirmation")

        selection = parse_selection(self._ask("\nYour choice: "))

        if isinstance(selection, CancelSelection):
            self.console.print(f"{SYMBOL_FAIL} Operation cancelled.")
            return CleanSummary(CleanState.CANCELLED)

        selected = selection.resolve(analyses)

        if isinstance(selection, CleanSelection) and not selected:
            self.console.print(f"{SYMBOL_FOLDER} No clean worktrees found.")
            return CleanSummary(CleanState.NO_CLEAN_WORKTREES)

        if not selected:
            self.console.print(f"{SYMBOL_FAIL} No valid worktrees selected.")
            return CleanSummary(CleanState.NO_VALID_SELECTION)

        return selected

    def confirm(self, analysis: AnalyzedWorktree) -> bool:
        """Ask before deleting a worktree with uncommitted changes."""
        self.console.print(f"{SYMBOL_WARN} This worktree has uncommitted changes!")
        self.console.print(f"   {analysis.status.summary()}")
        response = self._ask("   Continue with deletion? (y/N): ")
        return response.strip().lower() == "y"

    def process(self, analyses: List[AnalyzedWorktree], selected: List[int]) -> CleanSummary:
        """Remove the selected worktrees one by one, reporting as we go."""
        summary = CleanSummary(CleanState.COMPLETED)
        self.console.print(f"\n{SYMBOL_TRASH} Removing {len(selected)} worktree(s):")

        for idx in selected:
            analysis = analyses[idx - 1]
            self.console.print(f"\n{SYMBOL_PROCESSING} Processing: {_name(analysis)}")

            if not analysis.is_clean and not self.config.force:
                if not self.confirm(analysis):
                    self.console.print(f"   {SYMBOL_SKIP} Skipped.")
                    summary.add(analysis, CleanOutcome.SKIPPED)
                    continue

            # A dirty worktree reaching this point was authorized by --force or by the user
            force = self.config.force or not analysis.is_clean
            try:
                self.manager.remove_worktree(analysis.path, force=force)
            except RemovalFailedError as e:
                self.console.print(f"   [red]{SYMBOL_FAIL} Failed: {escape(str(e))}[/red]")
                summary.add(analysis, CleanOutcome.FAILED, str(e))
                continue

            self.console.print(f"   [green]{SYMBOL_OK} Deleted: {_name(analysis)}[/green]")
            summary.add(analysis, CleanOutcome.DELETED)

        return summary


def run_clean_workflow(
    repo_root: str,
    config: Config,
    prompt: Optional[Prompt] = None,
    console: Optional[Console] = None,
) -> CleanSummary:
    """Run the clean command against the repository at repo_root."""
    workflow = CleanWorkflow(WorktreeManager(repo_root), config, console=console, prompt=prompt)
    return workflow.run()
