"""Pytest fixtures for sproutee tests"""
import io
import tempfile
from pathlib import Path

import git
import pytest
from rich.console import Console

from sproutee.models.worktree import AnalyzedWorktree, StatusFinding, WorktreeInfo, WorktreeStatus


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing (symlinks resolved, as git reports them)."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository with one commit on main."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)

    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    (repo_path / "README.md").write_text("# Test Repository\n")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")

    # Rename master to main if needed
    try:
        repo.git.branch('-M', 'main')
    except git.exc.GitCommandError:
        pass

    yield repo

    repo.close()


@pytest.fixture
def git_repo_with_worktrees(git_repo, temp_dir):
    """Repository with two linked worktrees, feature-a and feature-b."""
    for name in ("feature-a", "feature-b"):
        git_repo.git.worktree("add", "-b", name, str(temp_dir / name))
    yield git_repo


@pytest.fixture
def output():
    """In-memory buffer for a Console."""
    return io.StringIO()


@pytest.fixture
def console(output):
    """Console writing plain text into the output buffer."""
    return Console(file=output, width=200, color_system=None, highlight=False)


class ScriptedPrompt:
    """Stand-in for Console.input that replays canned answers."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, message: str) -> str:
        self.prompts.append(message)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@pytest.fixture
def scripted_prompt():
    return ScriptedPrompt


def make_analysis(index, name, findings=(), changed=(), untracked=()):
    """Build an AnalyzedWorktree without touching git."""
    info = WorktreeInfo(path=f"/repo/.git/sproutee-worktrees/{name}", branch_name=name, commit_sha="a" * 40)
    status = WorktreeStatus(
        findings=frozenset(findings),
        changed_files=tuple(changed),
        untracked_files=tuple(untracked),
    )
    return AnalyzedWorktree(index=index, info=info, status=status)


@pytest.fixture
def sample_analyses():
    """Three worktrees: clean, dirty (staged + untracked), clean."""
    return [
        make_analysis(1, "alpha"),
        make_analysis(
            2,
            "beta",
            findings=(StatusFinding.STAGED, StatusFinding.UNTRACKED),
            changed=("app.py",),
            untracked=("notes.txt", "tmp.log"),
        ),
        make_analysis(3, "gamma"),
    ]


@pytest.fixture
def analysis_factory():
    return make_analysis
