"""Tests for repository discovery"""
from pathlib import Path

import pytest

from sproutee.exceptions import NotAGitRepositoryError
from sproutee.services.git import find_git_repository


class TestFindGitRepository:
    """Walking upward to the enclosing repository."""

    def test_finds_git_directory(self, temp_dir):
        (temp_dir / ".git").mkdir()
        assert find_git_repository(temp_dir) == str(temp_dir)

    def test_walks_up_from_nested_directory(self, temp_dir):
        (temp_dir / ".git").mkdir()
        nested = temp_dir / "src" / "pkg" / "deep"
        nested.mkdir(parents=True)

        assert find_git_repository(nested) == str(temp_dir)

    def test_gitdir_pointer_file_counts(self, temp_dir):
        """A linked worktree has a .git file pointing at the real git dir."""
        (temp_dir / ".git").write_text("gitdir: /somewhere/.git/worktrees/feature\n")
        assert find_git_repository(temp_dir) == str(temp_dir)

    def test_git_file_without_marker_is_ignored(self, temp_dir):
        (temp_dir / ".git").write_text("not a pointer\n")
        with pytest.raises(NotAGitRepositoryError):
            find_git_repository(temp_dir)

    def test_not_a_repository(self, temp_dir):
        with pytest.raises(NotAGitRepositoryError, match="not inside a Git repository"):
            find_git_repository(temp_dir)

    def test_defaults_to_current_directory(self, git_repo, monkeypatch):
        docs = Path(git_repo.working_dir) / "docs"
        docs.mkdir()
        monkeypatch.chdir(docs)
        assert find_git_repository() == git_repo.working_dir

    def test_linked_worktree_is_its_own_root(self, git_repo_with_worktrees, temp_dir):
        assert find_git_repository(temp_dir / "feature-a") == str(temp_dir / "feature-a")
