"""Display service for worktree listings, copy reports and configuration"""
import os
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from sproutee.config import CopyConfig
from sproutee.constants import SYMBOL_FAIL, SYMBOL_FOLDER, SYMBOL_OK
from sproutee.formatters import format_worktree_line
from sproutee.models.worktree import WorktreeInfo
from sproutee.services.copy_service import CopyReport


class DisplayService:
    def __init__(self, console: Optional[Console] = None, verbose: bool = False):
        self.console = console or Console()
        self.verbose = verbose

    def display_worktree_list(self, worktrees: List[WorktreeInfo]) -> None:
        """Numbered list of worktrees with branch and short commit."""
        if not worktrees:
            self.console.print("No worktrees found.")
            return

        self.console.print(f"Found {len(worktrees)} worktree(s):")
        for i, worktree in enumerate(worktrees, start=1):
            self.console.print(escape(format_worktree_line(i, worktree)))

    def display_copy_report(self, report: CopyReport) -> None:
        """Summary of a file copy run, failures first."""
        if report.total_files == 0:
            self.console.print(f"{SYMBOL_FOLDER} No files configured for copying.")
            return

        self.console.print(f"{SYMBOL_FOLDER} File Copy Summary:")
        self.console.print(f"   Total files: {report.total_files}")
        self.console.print(f"   {SYMBOL_OK} Successful: {report.success_count}")

        if report.failure_count > 0:
            self.console.print(f"   {SYMBOL_FAIL} Failed: {report.failure_count}")
            self.console.print("\n📋 Failed copies:")
            for result in report.failed:
                self.console.print(f"   • {escape(result.source_path)} → {escape(result.target_path)}")
                self.console.print(f"     [red]Error: {escape(result.error or 'unknown error')}[/red]")

        if report.success_count > 0:
            self.console.print("\n📋 Successfully copied files:")
            for result in report.succeeded:
                self.console.print(f"   • {escape(os.path.basename(result.target_path))}")

    def display_copy_config(self, copy_config: CopyConfig) -> None:
        files = copy_config.copy_files or []
        self.console.print("Current configuration:")
        self.console.print(f"Files to copy: {len(files)}")
        for i, path in enumerate(files, start=1):
            self.console.print(f"  {i}. {escape(path)}")
