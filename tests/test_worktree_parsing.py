"""Tests for parsing `git worktree list --porcelain` output."""

from sproutee.services.git import parse_worktree_list


class TestParseWorktreeList:

    def test_three_worktrees_with_detached_head(self):
        output = (
            "worktree /path/to/main\n"
            "HEAD 1234567890abcdef\n"
            "branch refs/heads/main\n"
            "\n"
            "worktree /path/to/feature\n"
            "HEAD abcdef1234567890\n"
            "branch refs/heads/feature-branch\n"
            "\n"
            "worktree /path/to/detached\n"
            "HEAD fedcba0987654321\n"
            "detached\n"
        )

        worktrees = parse_worktree_list(output)

        assert len(worktrees) == 3
        assert worktrees[0].path == "/path/to/main"
        assert worktrees[0].branch_name == "main"
        assert worktrees[0].commit_sha == "1234567890abcdef"
        assert worktrees[1].branch_name == "feature-branch"
        assert worktrees[2].branch_name == ""
        assert worktrees[2].is_detached

    def test_empty_output(self):
        assert parse_worktree_list("") == []

    def test_stray_blank_lines_are_ignored(self):
        output = "\n\nworktree /a\nHEAD 111\nbranch refs/heads/a\n\n\n\n"
        worktrees = parse_worktree_list(output)
        assert [wt.path for wt in worktrees] == ["/a"]

    def test_block_without_worktree_key_is_discarded(self):
        output = "HEAD 111\nbranch refs/heads/orphan\n\nworktree /b\nHEAD 222\n"
        worktrees = parse_worktree_list(output)
        assert len(worktrees) == 1
        assert worktrees[0].path == "/b"
        assert worktrees[0].commit_sha == "222"

    def test_unknown_keys_are_ignored(self):
        output = (
            "worktree /repo\n"
            "bare\n"
            "\n"
            "worktree /wt\n"
            "HEAD 333\n"
            "branch refs/heads/topic\n"
            "locked reason given\n"
            "prunable gitdir file points to non-existent location\n"
        )
        worktrees = parse_worktree_list(output)
        assert len(worktrees) == 2
        assert worktrees[1].branch_name == "topic"
        assert worktrees[1].commit_sha == "333"

    def test_branch_prefix_only_stripped_once(self):
        output = "worktree /wt\nHEAD 444\nbranch refs/heads/feature/refs/heads/x\n"
        assert parse_worktree_list(output)[0].branch_name == "feature/refs/heads/x"

    def test_path_with_spaces(self):
        output = "worktree /path/with some spaces/wt\nHEAD 555\n"
        assert parse_worktree_list(output)[0].path == "/path/with some spaces/wt"
