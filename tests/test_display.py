"""Tests for formatters and the display service"""
from sproutee.config import CopyConfig
from sproutee.formatters import format_short_sha, format_worktree_line
from sproutee.models.worktree import WorktreeInfo
from sproutee.services.copy_service import CopyReport, CopyResult
from sproutee.services.display_service import DisplayService


class TestFormatWorktreeLine:

    def test_full_line(self):
        wt = WorktreeInfo(path="/repo/wt", branch_name="feat", commit_sha="1a2b3c4d5e6f")
        assert format_worktree_line(1, wt) == "  1. /repo/wt (branch: feat) [1a2b3c4d]"

    def test_detached_without_sha(self):
        wt = WorktreeInfo(path="/repo/wt", branch_name="", commit_sha="")
        assert format_worktree_line(2, wt) == "  2. /repo/wt"

    def test_short_sha(self):
        assert format_short_sha(None) == ""
        assert format_short_sha("abc") == "abc"


class TestDisplayService:

    def test_empty_worktree_list(self, console, output):
        DisplayService(console).display_worktree_list([])
        assert "No worktrees found." in output.getvalue()

    def test_worktree_list_keeps_brackets(self, console, output):
        wt = WorktreeInfo(path="/repo/[x]", branch_name="b", commit_sha="0" * 40)
        DisplayService(console).display_worktree_list([wt])
        text = output.getvalue()
        assert "Found 1 worktree(s):" in text
        assert "/repo/[x] (branch: b) [00000000]" in text

    def test_copy_report(self, console, output):
        report = CopyReport()
        report.add_result(CopyResult("/src/.env", "/dst/.env", True))
        report.add_result(CopyResult("/src/missing", "/dst/missing", False, "source file does not exist"))

        DisplayService(console).display_copy_report(report)

        text = output.getvalue()
        assert "Total files: 2" in text
        assert "Successful: 1" in text
        assert "Failed: 1" in text
        assert "Error: source file does not exist" in text

    def test_empty_copy_report(self, console, output):
        DisplayService(console).display_copy_report(CopyReport())
        assert "No files configured for copying." in output.getvalue()

    def test_copy_config(self, console, output):
        DisplayService(console).display_copy_config(CopyConfig(copy_files=[".env", "a/b.json"]))
        text = output.getvalue()
        assert "Files to copy: 2" in text
        assert "  1. .env" in text
        assert "  2. a/b.json" in text
